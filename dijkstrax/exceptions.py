"""Error taxonomy for :mod:`dijkstrax`.

Everything a caller can get wrong (bad node ids, bad weights, a missing
ordering) is an :class:`InputError`, which is also a :class:`ValueError`.
An unreachable target is a normal result, never an error.
"""

from __future__ import annotations

from typing import Any


class DijkstraXError(Exception):
    """Base class for all package-specific errors."""


class InputError(DijkstraXError, ValueError):
    """Raised for invalid arguments; nothing is modified when it is raised."""


class NodeIndexError(InputError, IndexError):
    """A node id outside ``[0, n)``.

    Attributes:
        node: The rejected value.
        n: Node count of the graph it was checked against.
        role: What the value was used as (``"source"``, ``"tail"``, ...).
    """

    def __init__(self, node: Any, n: int, role: str = "node") -> None:
        self.node = node
        self.n = n
        self.role = role
        super().__init__(f"{role} must be a node id in [0, {n}), got {node!r}")


class GraphFormatError(InputError):
    """Raised for bad edge weights or unreadable edge files."""


class ConfigError(DijkstraXError, ValueError):
    """Raised for invalid :class:`~dijkstrax.engine.EngineConfig` or ordering values."""


class AlgorithmError(DijkstraXError, RuntimeError):
    """Raised when a predecessor table does not describe a path back to the source."""


__all__ = [
    "DijkstraXError",
    "InputError",
    "NodeIndexError",
    "GraphFormatError",
    "ConfigError",
    "AlgorithmError",
]
