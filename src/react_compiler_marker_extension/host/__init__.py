"""Host adapters — where settings and the node runtime come from."""

from ._adapters import LocalHost, default_node_candidates
from ._in_memory import InMemoryHost
from ._protocols import Host

__all__ = [
    "Host",
    "InMemoryHost",
    "LocalHost",
    "default_node_candidates",
]
