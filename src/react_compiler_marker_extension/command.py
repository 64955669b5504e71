"""Command builder — the process invocation that starts the server over stdio."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from .models.artifact import SERVER_PATH
from .models.command import STDIO_FLAG, CommandSpec

if TYPE_CHECKING:
    from .host import Host
    from .models.worktree import Worktree

log = logging.getLogger(__name__)


def server_path(work_dir: Path | None = None) -> str:
    """Absolute path of the installed bundle.

    Relies on the host starting the extension with its work directory as cwd.
    """
    base = work_dir if work_dir is not None else Path.cwd()
    return str(Path(base).absolute() / SERVER_PATH)


def build_command(
    host: Host,
    server_id: str,
    worktree: Worktree,
    work_dir: Path | None = None,
) -> CommandSpec:
    """Build the node invocation for the language server.

    server_id and worktree are part of the host signature but do not affect
    the command.

    Raises:
        RuntimeNotFoundError: If the host cannot locate node.
    """
    node = host.node_binary_path()
    spec = CommandSpec(command=node, args=[server_path(work_dir), STDIO_FLAG], env=[])
    log.debug("Language server command for %s: %s %s", server_id, spec.command, " ".join(spec.args))
    return spec
