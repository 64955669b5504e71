"""Protocols (ports) for the editor host."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..models.lsp import LspSettings
    from ..models.worktree import Worktree


class Host(Protocol):
    """Capabilities the editor provides to this extension."""

    def lsp_settings_for_worktree(self, extension_id: str, worktree: Worktree) -> LspSettings: ...

    # Raises SettingsLookupError when settings exist but cannot be read.
    # The resolver also tolerates OSError; any other exception propagates.

    def node_binary_path(self) -> str: ...

    # Raises RuntimeNotFoundError when no runtime is available
