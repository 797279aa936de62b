"""Append-only directed graph used by the shortest-path engine."""

from __future__ import annotations

import math
import numbers
from typing import TYPE_CHECKING, Iterable, Iterator, List, NamedTuple, Tuple

from .exceptions import GraphFormatError, InputError, NodeIndexError

if TYPE_CHECKING:  # pragma: no cover
    import networkx as nx

Vertex = int
Float = float


class Edge(NamedTuple):
    """Directed edge ``tail -> head`` with a non-negative weight."""

    tail: Vertex
    head: Vertex
    weight: Float


class Graph:
    """Directed graph with non-negative edge weights over nodes ``0 .. n-1``.

    Each node owns an ordered list of outgoing edges. Parallel edges and
    self-loops are kept as inserted. There is no removal operation.

    Negative weights are not supported: attempting to insert an edge with
    ``w < 0`` raises :class:`~dijkstrax.exceptions.GraphFormatError` that
    cites the offending edge.

    Args:
        n: Number of nodes. ``0`` gives an empty graph.
    """

    def __init__(self, n: int) -> None:
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise InputError("Graph.n must be a non-negative integer.")
        self._n = n
        self._adj: List[List[Edge]] = [[] for _ in range(n)]
        self._m = 0

    @property
    def n(self) -> int:
        """Number of nodes."""
        return self._n

    @property
    def num_edges(self) -> int:
        """Number of stored edges, parallel edges counted separately."""
        return self._m

    @property
    def adj(self) -> Tuple[Tuple[Edge, ...], ...]:
        """Snapshot of the adjacency lists.

        Changing the returned tuples cannot affect the graph.
        """
        return tuple(tuple(lst) for lst in self._adj)

    def contains(self, u: Vertex) -> bool:
        """Return ``True`` if ``u`` is a valid node index."""
        return not isinstance(u, bool) and isinstance(u, numbers.Integral) and 0 <= u < self._n

    def add_edge(self, u: Vertex, v: Vertex, w: Float) -> None:
        """Append a directed edge from ``u`` to ``v``.

        Args:
            u: Tail node.
            v: Head node.
            w: Non-negative edge weight.

        Raises:
            InputError: If ``u`` or ``v`` are out of range.
            GraphFormatError: If ``w`` is non-numeric, NaN or negative.

        Examples:
            ```python
            >>> g = Graph(2)
            >>> g.add_edge(0, 1, 1.5)
            >>> g.adj
            ((Edge(tail=0, head=1, weight=1.5),), ())
            ```
        """
        if not self.contains(u):
            raise NodeIndexError(u, self._n, role="tail")
        if not self.contains(v):
            raise NodeIndexError(v, self._n, role="head")
        if isinstance(w, bool) or not isinstance(w, numbers.Real):
            raise GraphFormatError(f"non-numeric weight {w!r} on edge ({u}, {v})")
        if math.isnan(w):
            raise GraphFormatError(f"NaN weight on edge ({u}, {v})")
        if w < 0:
            raise GraphFormatError(f"negative weight {w} on edge ({u}, {v})")
        self._adj[u].append(Edge(int(u), int(v), float(w)))
        self._m += 1

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[Tuple[Vertex, Vertex, Float]]) -> "Graph":
        """Create a graph from an iterable of ``(u, v, w)`` tuples."""
        g = cls(n)
        for u, v, w in edges:
            g.add_edge(u, v, w)
        return g

    def out_edges(self, u: Vertex) -> Tuple[Edge, ...]:
        """Return the outgoing edges of ``u`` in insertion order."""
        self._check(u)
        return tuple(self._adj[u])

    def out_degree(self, u: Vertex) -> int:
        """Return the number of outgoing edges of ``u``."""
        self._check(u)
        return len(self._adj[u])

    def edges(self) -> Iterator[Edge]:
        """Iterate over all edges, grouped by tail node."""
        for lst in self._adj:
            yield from lst

    def to_networkx(self) -> "nx.MultiDiGraph":
        """Return a :class:`networkx.MultiDiGraph` copy of this graph.

        Every node index is present, including isolated ones. Edge weights are
        stored under the ``weight`` attribute.
        """
        import networkx as nx

        G = nx.MultiDiGraph()
        G.add_nodes_from(range(self._n))
        for e in self.edges():
            G.add_edge(e.tail, e.head, weight=e.weight)
        return G

    def _check(self, u: Vertex) -> None:
        if not self.contains(u):
            raise NodeIndexError(u, self._n)

    # The relaxation loop iterates the live lists directly.
    def _neighbors(self, u: Vertex) -> List[Edge]:
        return self._adj[u]

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        return f"Graph(n={self._n}, m={self._m})"


__all__ = ["Edge", "Graph", "Vertex", "Float"]
