"""Utilities for reconstructing paths from predecessor arrays."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .exceptions import AlgorithmError, InputError
from .graph import Graph, Vertex


def reconstruct_path(
    predecessors: Sequence[Optional[Vertex]],
    source: Vertex,
    target: Vertex,
) -> List[Vertex]:
    """Return the path from ``source`` to ``target`` using a predecessor array.

    The walk follows ``predecessors`` backwards from ``target`` until it hits a
    node without a predecessor, then reverses the collected nodes.

    Args:
        predecessors: Predecessor of each node, ``None`` for the source and for
            unreached nodes.
        source: Source node identifier.
        target: Target node identifier.

    Returns:
        Nodes from source to target, both inclusive.

    Raises:
        InputError: If ``source`` or ``target`` is out of range.
        AlgorithmError: If the chain loops or stops at a node other than
            ``source``. Callers check reachability before walking.
    """
    n = len(predecessors)
    if not (0 <= source < n and 0 <= target < n):
        raise InputError("source/target out of range.")

    chain: List[Vertex] = []
    cur: Optional[Vertex] = target
    while cur is not None:
        if len(chain) >= n:
            raise AlgorithmError(f"predecessor cycle while walking back from {target}")
        chain.append(cur)
        cur = predecessors[cur]

    if chain[-1] != source:
        raise AlgorithmError(
            f"predecessor chain from {target} ends at {chain[-1]}, not at source {source}"
        )
    chain.reverse()
    return chain


def path_weight(graph: Graph, path: Sequence[Vertex]) -> float:
    """Return the summed weight of ``path`` using the cheapest parallel edge.

    An empty path weighs ``inf``; a single node weighs ``0.0``.

    Raises:
        InputError: If two consecutive nodes are not joined by an edge.
    """
    if not path:
        return float("inf")
    total = 0.0
    for u, v in zip(path, path[1:]):
        weights = [e.weight for e in graph.out_edges(u) if e.head == v]
        if not weights:
            raise InputError(f"no edge ({u}, {v}) in graph")
        total += min(weights)
    return total


__all__ = ["path_weight", "reconstruct_path"]
