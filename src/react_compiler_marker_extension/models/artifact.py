from __future__ import annotations

from importlib.resources import files
from pathlib import Path

from pydantic import BaseModel, ConfigDict

# Install location of the server bundle, relative to the extension work directory
SERVER_PATH = "server/server.bundle.js"

_PACKAGE = "react_compiler_marker_extension"


class ServerArtifact(BaseModel):
    """The language server bundle shipped inside this package.

    Always installed at SERVER_PATH, which is also where the command points.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
    content: bytes

    @classmethod
    def bundled(cls) -> ServerArtifact:
        """Load the bundle that ships as package data."""
        resource = files(_PACKAGE) / "server" / "server.bundle.js"
        return cls(content=resource.read_bytes())

    def target(self, work_dir: Path) -> Path:
        return work_dir / SERVER_PATH
