"""Single-source, single-target Dijkstra engine with path reconstruction."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .exceptions import AlgorithmError, ConfigError, InputError, NodeIndexError
from .frontier import HeapFrontier
from .graph import Edge, Float, Graph, Vertex
from .logger import Logger, NoopLogger
from .ordering import DEFAULT_EPS, EpsilonOrdering, Ordering, check_ordering
from .path import reconstruct_path

_DEFAULT_ORDERING: Any = object()


class RunStatus(str, Enum):
    """Lifecycle of a single :meth:`ShortestPathEngine.dijkstra` call."""

    UNSTARTED = "unstarted"
    RUNNING = "running"
    COMPLETED = "completed"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class EngineConfig:
    """Configuration knobs for the engine.

    Attributes:
        eps: Tolerance of the default ordering. Entries whose distances differ
            by less than ``eps`` are popped in arbitrary order. Ignored when an
            explicit ordering is passed to the engine.
        early_exit: Stop as soon as the target is popped. When ``False`` the
            loop settles every reachable node first; the returned distance is
            the same.
    """

    eps: float = DEFAULT_EPS
    early_exit: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.eps, bool) or not isinstance(self.eps, (int, float)):
            raise ConfigError(f"eps must be a number, got {self.eps!r}")
        if not math.isfinite(self.eps) or self.eps < 0:
            raise ConfigError(f"eps must be finite and non-negative, got {self.eps}")
        if not isinstance(self.early_exit, bool):
            raise ConfigError("early_exit must be a bool.")


@dataclass(frozen=True)
class RunState:
    """Distance and predecessor tables left behind by the latest run."""

    source: Vertex
    target: Vertex
    distances: Tuple[Float, ...]
    predecessors: Tuple[Optional[Vertex], ...]
    visited: Tuple[bool, ...]
    status: RunStatus

    @property
    def distance(self) -> Float:
        """Distance to ``target`` (``inf`` when exhausted before reaching it)."""
        if self.status is RunStatus.COMPLETED:
            return self.distances[self.target]
        return math.inf


@dataclass(frozen=True)
class ShortestPath:
    """Distance and node sequence between two nodes."""

    distance: Float
    nodes: List[Vertex]

    @property
    def reachable(self) -> bool:
        return self.distance != math.inf


@dataclass(frozen=True)
class EngineMetrics:
    """Counters and timing collected from the most recent run."""

    n: int
    m: int
    source: Optional[Vertex]
    target: Optional[Vertex]
    status: str
    counters: Dict[str, int]
    wall_ms: float


class ShortestPathEngine:
    """Dijkstra shortest paths on a directed graph with non-negative weights.

    The engine owns its :class:`~dijkstrax.graph.Graph` and keeps the tables
    of the last :meth:`dijkstra` call in :attr:`state`. One instance must not
    be used from several threads at once without an external lock; a second
    call overwrites the tables of the first.

    Args:
        n: Number of nodes, indexed ``0 .. n-1``.
        ordering: Strategy ordering frontier entries. Defaults to
            :class:`~dijkstrax.ordering.EpsilonOrdering` built from
            ``config.eps``. Passing ``None`` explicitly is an error.
        config: Optional engine configuration.
        logger: Optional event logger.

    Raises:
        InputError: If ``n`` is negative or ``ordering`` is ``None`` or lacks
            a ``compare`` method.
        ConfigError: If ``config`` is not an :class:`EngineConfig`.

    Examples:
        ```python
        >>> engine = ShortestPathEngine(3)
        >>> engine.add_edge(0, 1, 2.0)
        >>> engine.add_edge(1, 2, 3.0)
        >>> engine.dijkstra(0, 2)
        5.0
        >>> engine.reconstruct_path(0, 2)
        [0, 1, 2]
        ```
    """

    def __init__(
        self,
        n: int,
        ordering: Ordering = _DEFAULT_ORDERING,
        *,
        config: Optional[EngineConfig] = None,
        logger: Logger | None = None,
    ) -> None:
        if config is not None and not isinstance(config, EngineConfig):
            raise ConfigError(f"config must be an EngineConfig, got {type(config).__name__}")
        self.cfg = config or EngineConfig()
        if ordering is _DEFAULT_ORDERING:
            ordering = EpsilonOrdering(self.cfg.eps)
        self.ordering: Ordering = check_ordering(ordering)
        self._graph = Graph(n)
        self.logger = logger or NoopLogger()

        self._state: Optional[RunState] = None
        self._wall_ms = 0.0
        self.counters: Dict[str, int] = self._fresh_counters()

    @staticmethod
    def _fresh_counters() -> Dict[str, int]:
        return {
            "pops": 0,
            "stale_pops": 0,
            "pushes": 0,
            "edges_relaxed": 0,
            "improvements": 0,
            "max_frontier_size": 0,
        }

    # ---------- graph -----------------------------------------------------

    @property
    def n(self) -> int:
        return self._graph.n

    @property
    def graph(self) -> Graph:
        """The engine's graph. Do not add edges while a run is in progress."""
        return self._graph

    @property
    def adjacency(self) -> Tuple[Tuple[Edge, ...], ...]:
        """Read-only snapshot of the adjacency lists."""
        return self._graph.adj

    def add_edge(self, u: Vertex, v: Vertex, w: Float) -> None:
        """Append a directed edge ``u -> v`` with weight ``w``.

        Raises:
            InputError: If ``u`` or ``v`` are out of range.
            GraphFormatError: If ``w`` is negative, NaN or non-numeric.
        """
        self._graph.add_edge(u, v, w)

    # ---------- algorithm -------------------------------------------------

    def _check_node(self, name: str, u: Vertex) -> None:
        if not self._graph.contains(u):
            raise NodeIndexError(u, self.n, role=name)

    def dijkstra(self, source: Vertex, target: Vertex) -> Float:
        """Return the shortest distance from ``source`` to ``target``.

        Args:
            source: Start node.
            target: End node.

        Returns:
            The distance, ``0.0`` when ``source == target``, or ``math.inf``
            when ``target`` cannot be reached.

        Raises:
            InputError: If either node is out of range.
        """
        self._check_node("source", source)
        self._check_node("target", target)
        source, target = int(source), int(target)

        n = self.n
        counters = self._fresh_counters()
        dist: List[Float] = [math.inf] * n
        pred: List[Optional[Vertex]] = [None] * n
        visited: List[bool] = [False] * n
        dist[source] = 0.0
        status = RunStatus.RUNNING

        t0 = time.perf_counter()
        pq = HeapFrontier(self.ordering)
        pq.push(source, 0.0)

        while pq:
            node, d_u = pq.pop()
            counters["pops"] += 1
            visited[node] = True

            # lazy deletion
            if d_u > dist[node]:
                counters["stale_pops"] += 1
                self.logger.debug("stale", node=node, queued=d_u, best=dist[node])
                continue

            for edge in self._graph._neighbors(node):
                v = edge.head
                if visited[v]:
                    continue
                counters["edges_relaxed"] += 1
                nd = dist[node] + edge.weight
                if nd < dist[v]:
                    dist[v] = nd
                    pred[v] = node
                    pq.push(v, nd)
                    counters["improvements"] += 1

            if node == target:
                status = RunStatus.COMPLETED
                if self.cfg.early_exit:
                    break

        if status is RunStatus.RUNNING:
            status = RunStatus.EXHAUSTED

        counters["pushes"] = pq.pushes
        counters["max_frontier_size"] = pq.peak
        self._wall_ms = (time.perf_counter() - t0) * 1000.0
        self.counters = counters
        self._state = RunState(
            source=source,
            target=target,
            distances=tuple(dist),
            predecessors=tuple(pred),
            visited=tuple(visited),
            status=status,
        )
        result = self._state.distance
        self.logger.info(
            "run",
            source=source,
            target=target,
            distance=None if result == math.inf else result,
            status=status.value,
            **counters,
        )
        return result

    def reconstruct_path(self, source: Vertex, target: Vertex) -> List[Vertex]:
        """Return the nodes of a shortest path from ``source`` to ``target``.

        The distance computation is always re-run for ``source`` so the
        predecessor table matches the request.

        Returns:
            Nodes from ``source`` to ``target`` inclusive, or ``[]`` when no
            path exists.

        Raises:
            InputError: If either node is out of range.
        """
        self._check_node("source", source)
        self._check_node("target", target)
        source, target = int(source), int(target)
        if self.dijkstra(source, target) == math.inf:
            return []
        state = self._state
        if state is None:  # pragma: no cover - dijkstra always sets it
            raise AlgorithmError("missing run state after dijkstra()")
        return reconstruct_path(state.predecessors, source, target)

    def shortest_path(self, source: Vertex, target: Vertex) -> ShortestPath:
        """Return distance and node sequence from a single run."""
        nodes = self.reconstruct_path(source, target)
        state = self._state
        distance = state.distance if state is not None else math.inf
        return ShortestPath(distance=distance, nodes=nodes)

    # ---------- state & counters -----------------------------------------

    @property
    def state(self) -> Optional[RunState]:
        """Tables of the latest run, ``None`` before the first run."""
        return self._state

    @property
    def status(self) -> RunStatus:
        if self._state is None:
            return RunStatus.UNSTARTED
        return self._state.status

    def summary(self) -> Dict[str, int]:
        """Return a copy of the counters of the latest run."""
        return dict(self.counters)

    def metrics(self, wall_ms: float | None = None) -> EngineMetrics:
        """Return metrics for the most recent run.

        Args:
            wall_ms: Override for the measured run time in milliseconds.
        """
        state = self._state
        return EngineMetrics(
            n=self.n,
            m=self._graph.num_edges,
            source=state.source if state else None,
            target=state.target if state else None,
            status=self.status.value,
            counters=self.summary(),
            wall_ms=self._wall_ms if wall_ms is None else wall_ms,
        )

    def __repr__(self) -> str:
        return f"ShortestPathEngine(n={self.n}, m={self._graph.num_edges}, status={self.status.value})"


__all__ = [
    "EngineConfig",
    "EngineMetrics",
    "RunState",
    "RunStatus",
    "ShortestPath",
    "ShortestPathEngine",
]
