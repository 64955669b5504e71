"""ReactCompilerMarkerExtension — the entry points the editor host calls."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .command import build_command
from .host import LocalHost
from .installer import install_server
from .models.artifact import ServerArtifact
from .resolver import resolve_initialization_options, resolve_workspace_configuration

if TYPE_CHECKING:
    from .host import Host
    from .models.command import CommandSpec
    from .models.worktree import Worktree

log = logging.getLogger(__name__)


class ReactCompilerMarkerExtension:
    """One activated extension. The host constructs it once per process.

    Construction installs the bundled server into the work directory, which
    defaults to the process cwd. The remaining methods are called per
    language server id and worktree, and recompute their result each time:

        ext = ReactCompilerMarkerExtension(host)
        cmd = ext.language_server_command("react-compiler-marker", worktree)
        init = ext.language_server_initialization_options("react-compiler-marker", worktree)
    """

    def __init__(
        self,
        host: Host,
        *,
        work_dir: Path | None = None,
        artifact: ServerArtifact | None = None,
    ) -> None:
        self._host = host
        self._work_dir = Path(work_dir) if work_dir is not None else None
        artifact = artifact if artifact is not None else ServerArtifact.bundled()
        install_server(artifact, self._work_dir if self._work_dir is not None else Path.cwd())

    def language_server_command(self, language_server_id: str, worktree: Worktree) -> CommandSpec:
        return build_command(self._host, language_server_id, worktree, work_dir=self._work_dir)

    def language_server_initialization_options(
        self, language_server_id: str, worktree: Worktree
    ) -> Any:
        return resolve_initialization_options(self._host, language_server_id, worktree)

    def language_server_workspace_configuration(
        self, language_server_id: str, worktree: Worktree
    ) -> dict[str, Any]:
        return resolve_workspace_configuration(self._host, language_server_id, worktree)


def make_extension(
    user_settings: Path | None = None,
    work_dir: Path | None = None,
) -> ReactCompilerMarkerExtension:
    """Build the extension with a filesystem-backed host.

    user_settings: defaults to ~/.config/zed/settings.json
    work_dir: defaults to the process cwd
    """
    user_settings = user_settings or Path.home() / ".config" / "zed" / "settings.json"
    log.debug("Activating extension with user settings %s", user_settings)
    return ReactCompilerMarkerExtension(LocalHost(user_settings), work_dir=work_dir)
