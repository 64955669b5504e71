from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

STDIO_FLAG = "--stdio"


class CommandSpec(BaseModel):
    """Process invocation handed to the host: executable, ordered args, env pairs."""

    model_config = ConfigDict(frozen=True)
    command: str
    args: list[str] = []
    env: list[tuple[str, str]] = []

    def to_json(self) -> dict[str, Any]:
        return {
            "command": self.command,
            "args": list(self.args),
            "env": [list(pair) for pair in self.env],
        }
