"""Sample road network of eight Spanish cities."""

from __future__ import annotations

from typing import List, Optional, Tuple

from .engine import EngineConfig, ShortestPathEngine
from .logger import Logger

CITIES: List[str] = [
    "Santander",
    "Bilbao",
    "Zaragoza",
    "Palencia",
    "Cáceres",
    "Madrid",
    "Valencia",
    "Barcelona",
]

ROADS: List[Tuple[int, int, float]] = [
    (0, 1, 111),
    (0, 3, 203),
    (1, 2, 323),
    (2, 7, 299),
    (3, 4, 368),
    (3, 5, 239),
    (4, 5, 299),
    (5, 2, 322),
    (5, 6, 350),
    (6, 7, 352),
]

# Palencia -> Barcelona
DEFAULT_SOURCE = 3
DEFAULT_TARGET = 7


def build_demo_engine(
    config: Optional[EngineConfig] = None,
    logger: Logger | None = None,
) -> ShortestPathEngine:
    """Return an engine loaded with :data:`ROADS` over :data:`CITIES`."""
    engine = ShortestPathEngine(len(CITIES), config=config, logger=logger)
    for u, v, w in ROADS:
        engine.add_edge(u, v, w)
    return engine


def demo_csv() -> str:
    """Return :data:`ROADS` in the CSV layout read by :func:`~dijkstrax.io.read_edges_csv`."""
    lines = ["# u,v,w"]
    lines.extend(f"{u},{v},{w:g}" for u, v, w in ROADS)
    return "\n".join(lines) + "\n"


__all__ = ["CITIES", "ROADS", "DEFAULT_SOURCE", "DEFAULT_TARGET", "build_demo_engine", "demo_csv"]
