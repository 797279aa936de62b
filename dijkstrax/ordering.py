"""Ordering strategies for frontier entries."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, NamedTuple, Protocol

from .exceptions import ConfigError, InputError

Vertex = int
Float = float

DEFAULT_EPS = 1e-6


class QueueEntry(NamedTuple):
    """A ``(node, distance)`` pair waiting in the frontier."""

    node: Vertex
    distance: Float


class Ordering(Protocol):
    """Strategy deciding which of two entries leaves the frontier first."""

    def compare(self, a: QueueEntry, b: QueueEntry) -> int:
        """Return a negative number, zero or a positive number.

        Negative means ``a`` is popped before ``b``.
        """
        ...


@dataclass(frozen=True)
class EpsilonOrdering:
    """Ascending by distance; distances closer than ``eps`` compare equal.

    Args:
        eps: Absolute tolerance. ``0.0`` gives exact comparisons.
    """

    eps: float = DEFAULT_EPS

    def __post_init__(self) -> None:
        if isinstance(self.eps, bool) or not isinstance(self.eps, (int, float)):
            raise ConfigError(f"eps must be a number, got {self.eps!r}")
        if not math.isfinite(self.eps) or self.eps < 0:
            raise ConfigError(f"eps must be finite and non-negative, got {self.eps}")

    def compare(self, a: QueueEntry, b: QueueEntry) -> int:
        diff = a.distance - b.distance
        # inf - inf is nan
        if a.distance == b.distance or abs(diff) < self.eps:
            return 0
        return 1 if diff > 0 else -1


@dataclass(frozen=True)
class KeyOrdering:
    """Ascending by ``key(entry)``."""

    key: Callable[[QueueEntry], Any]

    def compare(self, a: QueueEntry, b: QueueEntry) -> int:
        ka = self.key(a)
        kb = self.key(b)
        if ka < kb:
            return -1
        if kb < ka:
            return 1
        return 0


def key_ordering(key: Callable[[QueueEntry], Any]) -> KeyOrdering:
    """Build an ordering from a sort key over :class:`QueueEntry`.

    Examples:
        ```python
        >>> farthest_first = key_ordering(lambda e: -e.distance)
        ```
    """
    if not callable(key):
        raise InputError("key must be callable.")
    return KeyOrdering(key)


def check_ordering(ordering: Any) -> Ordering:
    """Return ``ordering`` unchanged if it looks like an :class:`Ordering`.

    Raises:
        InputError: If ``ordering`` is ``None`` or has no callable ``compare``.
    """
    if ordering is None:
        raise InputError("ordering must not be None.")
    if not callable(getattr(ordering, "compare", None)):
        raise InputError(f"ordering {ordering!r} has no callable compare().")
    return ordering


__all__ = [
    "DEFAULT_EPS",
    "EpsilonOrdering",
    "KeyOrdering",
    "Ordering",
    "QueueEntry",
    "check_ordering",
    "key_ordering",
]
