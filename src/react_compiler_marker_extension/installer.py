"""Asset installer — materializes the bundled server in the work directory."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from .models.artifact import ServerArtifact

log = logging.getLogger(__name__)


def install_server(artifact: ServerArtifact, work_dir: Path) -> Path | None:
    """Write the server bundle under work_dir, overwriting any previous copy.

    Best effort: I/O failures are logged and swallowed so extension startup
    continues. A missing bundle surfaces later when the host starts the server.
    Returns the installed path, or None if the write failed.
    """
    target = artifact.target(work_dir)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(artifact.content)
    except OSError as e:
        log.warning("Failed to install language server bundle to %s: %s", target, e)
        return None
    log.debug("Installed language server bundle (%d bytes) to %s", len(artifact.content), target)
    return target
