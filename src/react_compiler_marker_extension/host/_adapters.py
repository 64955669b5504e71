"""Concrete host adapter backed by settings files and the local PATH."""

from __future__ import annotations

import json
import logging
import os
import shutil
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from ..errors import RuntimeNotFoundError, SettingsLookupError
from ..models.lsp import LspSettings

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..models.worktree import Worktree

log = logging.getLogger(__name__)

# Well-known install locations tried after PATH
_NODE_LOCATIONS = (
    "/opt/homebrew/bin/node",
    "/usr/local/bin/node",
    "/usr/bin/node",
)


def _load_json(path: Path) -> dict[str, Any]:
    try:
        if not path.exists():
            return {}
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise SettingsLookupError(f"Invalid JSON in {path}: {e}", path=path) from e
    except UnicodeDecodeError as e:
        raise SettingsLookupError(f"Settings file is not UTF-8: {path}: {e}", path=path) from e
    except OSError as e:
        raise SettingsLookupError(f"Cannot read {path}: {e}", path=path) from e
    if not isinstance(raw, dict):
        raise SettingsLookupError(f"Settings root is not an object: {path}", path=path)
    return raw


def _lsp_entry(path: Path, extension_id: str) -> dict[str, Any]:
    lsp = _load_json(path).get("lsp")
    if lsp is None:
        return {}
    if not isinstance(lsp, dict):
        raise SettingsLookupError(f"'lsp' is not an object in {path}", path=path)
    entry = lsp.get(extension_id)
    if entry is None:
        return {}
    if not isinstance(entry, dict):
        raise SettingsLookupError(f"'lsp.{extension_id}' is not an object in {path}", path=path)
    return entry


def default_node_candidates() -> list[str]:
    candidates: list[str] = []
    nvm_bin = os.environ.get("NVM_BIN")
    if nvm_bin:
        candidates.append(str(Path(nvm_bin) / "node"))
    candidates.extend(_NODE_LOCATIONS)
    return candidates


class LocalHost:
    """Reads LSP settings from the user settings file and <worktree>/.zed/settings.json.

    Worktree keys override user keys per top-level key (``initialization_options``,
    ``settings``, ...). Node is located on PATH, then at well-known locations.
    """

    def __init__(
        self,
        user_settings: Path,
        node_candidates: Sequence[str] | None = None,
    ) -> None:
        self._user_settings = Path(user_settings)
        self._node_candidates = (
            list(node_candidates) if node_candidates is not None else default_node_candidates()
        )

    def lsp_settings_for_worktree(self, extension_id: str, worktree: Worktree) -> LspSettings:
        merged = dict(_lsp_entry(self._user_settings, extension_id))
        merged.update(_lsp_entry(worktree.root_path / ".zed" / "settings.json", extension_id))
        try:
            return LspSettings.model_validate(merged)
        except ValidationError as e:
            raise SettingsLookupError(f"Invalid LSP settings for {extension_id}: {e}") from e

    def node_binary_path(self) -> str:
        found = shutil.which("node")
        if found:
            return found
        for candidate in self._node_candidates:
            path = Path(candidate)
            if path.is_file() and os.access(path, os.X_OK):
                return str(path)
        raise RuntimeNotFoundError("node", ["PATH", *self._node_candidates])
