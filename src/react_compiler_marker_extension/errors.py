from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class RuntimeNotFoundError(Exception):
    """Raised when the host cannot locate the runtime that executes the server bundle.

    Attributes:
        runtime: Name of the runtime that was looked up (e.g. "node").
        searched: Locations that were tried, in order.
    """

    def __init__(self, runtime: str, searched: Sequence[str] = ()) -> None:
        self.runtime = runtime
        self.searched = list(searched)
        msg = f"Runtime not found: {runtime}"
        if self.searched:
            msg += f" (searched: {', '.join(self.searched)})"
        super().__init__(msg)


class SettingsLookupError(Exception):
    """Raised by a host when per-worktree LSP settings cannot be read.

    Attributes:
        path: The settings file that could not be read, if applicable.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)
