"""Binary-heap frontier with lazy deletion."""

from __future__ import annotations

import heapq
from typing import List, Protocol

from .ordering import EpsilonOrdering, Float, Ordering, QueueEntry, Vertex


class FrontierProtocol(Protocol):
    """Protocol for frontier structures consumed by the engine."""

    def push(self, node: Vertex, distance: Float) -> None:
        """Insert an entry. Older entries for ``node`` are left in place."""
        ...

    def pop(self) -> QueueEntry:
        """Remove and return the first entry under the ordering."""
        ...

    def __len__(self) -> int:
        ...


class _Slot:
    """Heap cell comparing through an :class:`Ordering`."""

    __slots__ = ("entry", "ordering")

    def __init__(self, entry: QueueEntry, ordering: Ordering) -> None:
        self.entry = entry
        self.ordering = ordering

    def __lt__(self, other: "_Slot") -> bool:
        return self.ordering.compare(self.entry, other.entry) < 0


class HeapFrontier:
    """Push-only priority queue backed by :mod:`heapq`.

    There is no decrease-key: a node whose distance improves is pushed again,
    and the caller discards the superseded (stale) entry when it comes out.

    Args:
        ordering: Strategy deciding the pop order. Defaults to
            :class:`~dijkstrax.ordering.EpsilonOrdering`.
    """

    def __init__(self, ordering: Ordering | None = None) -> None:
        self.ordering: Ordering = ordering if ordering is not None else EpsilonOrdering()
        self._heap: List[_Slot] = []
        self.pushes = 0
        self.peak = 0

    def push(self, node: Vertex, distance: Float) -> None:
        """Insert ``(node, distance)``."""
        heapq.heappush(self._heap, _Slot(QueueEntry(node, distance), self.ordering))
        self.pushes += 1
        if len(self._heap) > self.peak:
            self.peak = len(self._heap)

    def pop(self) -> QueueEntry:
        """Remove and return the first entry.

        Raises:
            IndexError: If the frontier is empty.
        """
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        return heapq.heappop(self._heap).entry

    def peek(self) -> QueueEntry:
        """Return the first entry without removing it."""
        if not self._heap:
            raise IndexError("peek at an empty frontier")
        return self._heap[0].entry

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


__all__ = ["FrontierProtocol", "HeapFrontier"]
