"""In-memory host for testing (no disk I/O)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..errors import RuntimeNotFoundError, SettingsLookupError
from ..models.lsp import LspSettings

if TYPE_CHECKING:
    from ..models.worktree import Worktree


class InMemoryHost:
    def __init__(
        self,
        settings: dict[int, dict[str, Any]] | None = None,
        node_path: str | None = "/usr/bin/node",
        fail_lookup: bool = False,
    ) -> None:
        self._settings = dict(settings or {})
        self._node_path = node_path
        self._fail_lookup = fail_lookup
        self.lookups: list[tuple[str, int]] = []

    def set_settings(self, worktree_id: int, data: dict[str, Any]) -> None:
        self._settings[worktree_id] = data

    def lsp_settings_for_worktree(self, extension_id: str, worktree: Worktree) -> LspSettings:
        self.lookups.append((extension_id, worktree.id))
        if self._fail_lookup:
            raise SettingsLookupError(f"No settings available for {extension_id}")
        return LspSettings.model_validate(self._settings.get(worktree.id, {}))

    def node_binary_path(self) -> str:
        if self._node_path is None:
            raise RuntimeNotFoundError("node")
        return self._node_path
