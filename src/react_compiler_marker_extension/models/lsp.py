from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class LspSettings(BaseModel):
    """Per-worktree LSP settings the host stores for one extension.

    Both fields stay untyped JSON: the host may hand over any value, and
    non-object values must reach the resolver unchanged.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    initialization_options: Any = Field(None, alias="initializationOptions")
    settings: Any = None
