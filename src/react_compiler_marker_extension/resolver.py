"""Configuration resolver — initialization options and workspace configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from .errors import SettingsLookupError
from .models.lsp import LspSettings

if TYPE_CHECKING:
    from .host import Host
    from .models.worktree import Worktree

log = logging.getLogger(__name__)

EXTENSION_ID = "react-compiler-marker"
TOOLTIP_FORMAT_KEY = "tooltipFormat"
DEFAULT_TOOLTIP_FORMAT = "markdown"
WORKSPACE_CONFIGURATION_KEY = "reactCompilerMarker"

# Formats the server renders; anything else is forwarded but ignored by it
_KNOWN_TOOLTIP_FORMATS = ("markdown", "html")


@dataclass(frozen=True)
class SettingsLookup:
    """Outcome of asking the host for this extension's worktree settings.

    Attributes:
        settings: The settings the host returned, or None on failure.
        error: The lookup failure, if any.
    """

    settings: LspSettings | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def or_empty(self) -> LspSettings:
        """Collapse failure and absence into empty settings."""
        return self.settings if self.settings is not None else LspSettings()


def lookup_settings(host: Host, worktree: Worktree) -> SettingsLookup:
    try:
        settings = host.lsp_settings_for_worktree(EXTENSION_ID, worktree)
    except (SettingsLookupError, ValidationError, OSError) as e:
        log.debug("LSP settings lookup failed for worktree %s, using defaults: %s", worktree.id, e)
        return SettingsLookup(error=e)
    return SettingsLookup(settings=settings)


def resolve_initialization_options(host: Host, server_id: str, worktree: Worktree) -> Any:
    """Initialization options sent to the server when it connects.

    Inserts ``tooltipFormat: "markdown"`` unless the host configured one.
    A non-object value from the host is returned as is.
    """
    options = lookup_settings(host, worktree).or_empty().initialization_options
    if options is None:
        options = {}
    if not isinstance(options, dict):
        return options

    options = dict(options)
    options.setdefault(TOOLTIP_FORMAT_KEY, DEFAULT_TOOLTIP_FORMAT)
    if options[TOOLTIP_FORMAT_KEY] not in _KNOWN_TOOLTIP_FORMATS:
        log.warning(
            "Unknown %s %r for %s; the server will fall back to %s",
            TOOLTIP_FORMAT_KEY,
            options[TOOLTIP_FORMAT_KEY],
            server_id,
            DEFAULT_TOOLTIP_FORMAT,
        )
    return options


def resolve_workspace_configuration(host: Host, server_id: str, worktree: Worktree) -> dict[str, Any]:
    settings = lookup_settings(host, worktree).or_empty().settings
    return {WORKSPACE_CONFIGURATION_KEY: settings if settings is not None else {}}
