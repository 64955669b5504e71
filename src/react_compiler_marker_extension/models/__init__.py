from .artifact import SERVER_PATH, ServerArtifact
from .command import STDIO_FLAG, CommandSpec
from .lsp import LspSettings
from .worktree import Worktree

__all__ = [
    "SERVER_PATH",
    "STDIO_FLAG",
    "CommandSpec",
    "LspSettings",
    "ServerArtifact",
    "Worktree",
]
