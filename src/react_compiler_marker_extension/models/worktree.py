from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class Worktree(BaseModel):
    """A host project folder that settings are looked up against."""

    model_config = ConfigDict(frozen=True)
    id: int
    root_path: Path
