"""Bootstrap for the React Compiler Marker language server inside an editor."""

from .errors import RuntimeNotFoundError, SettingsLookupError
from .extension import ReactCompilerMarkerExtension, make_extension
from .models import CommandSpec, LspSettings, ServerArtifact, Worktree
from .resolver import (
    DEFAULT_TOOLTIP_FORMAT,
    EXTENSION_ID,
    WORKSPACE_CONFIGURATION_KEY,
)

__all__ = [
    "DEFAULT_TOOLTIP_FORMAT",
    "EXTENSION_ID",
    "WORKSPACE_CONFIGURATION_KEY",
    "CommandSpec",
    "LspSettings",
    "ReactCompilerMarkerExtension",
    "RuntimeNotFoundError",
    "ServerArtifact",
    "SettingsLookupError",
    "Worktree",
    "make_extension",
]
