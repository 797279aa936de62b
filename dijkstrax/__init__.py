"""Public package exports for :mod:`dijkstrax`."""

from __future__ import annotations

from .engine import (
    EngineConfig,
    EngineMetrics,
    RunState,
    RunStatus,
    ShortestPath,
    ShortestPathEngine,
)
from .exceptions import (
    AlgorithmError,
    ConfigError,
    DijkstraXError,
    GraphFormatError,
    InputError,
    NodeIndexError,
)
from .frontier import HeapFrontier
from .graph import Edge, Graph
from .io import load_engine, read_edges_csv
from .logger import Logger, NoopLogger, StdLogger
from .ordering import EpsilonOrdering, KeyOrdering, Ordering, QueueEntry, key_ordering
from .path import path_weight, reconstruct_path

__version__ = "0.1.0"

__all__ = [
    "ShortestPathEngine",
    "EngineConfig",
    "EngineMetrics",
    "RunState",
    "RunStatus",
    "ShortestPath",
    "Graph",
    "Edge",
    "HeapFrontier",
    "Ordering",
    "EpsilonOrdering",
    "KeyOrdering",
    "QueueEntry",
    "key_ordering",
    "reconstruct_path",
    "path_weight",
    "read_edges_csv",
    "load_engine",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "DijkstraXError",
    "InputError",
    "NodeIndexError",
    "GraphFormatError",
    "ConfigError",
    "AlgorithmError",
]
