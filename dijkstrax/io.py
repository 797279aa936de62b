"""Edge-list input helpers for command-line use."""

from __future__ import annotations

import math
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .engine import EngineConfig, ShortestPathEngine
from .exceptions import GraphFormatError, InputError
from .logger import Logger

EdgeList = List[Tuple[int, int, float]]


def read_edges_csv(path: Union[str, Path]) -> Tuple[int, EdgeList]:
    """Read a CSV edge list and return the node count and the edges.

    Each non-empty line that does not start with ``#`` holds ``u,v,w``.
    Columns may be separated by commas or tabs; extra columns are ignored.

    Args:
        path: File to read.

    Returns:
        ``(n, edges)`` where ``n`` is the largest node id plus one.

    Raises:
        InputError: If the file does not exist.
        GraphFormatError: If a line cannot be parsed or no edges are found.
    """
    p = Path(path)
    if not p.exists():
        raise InputError(f"edges file not found: {path}")
    edges: EdgeList = []
    max_id = -1
    try:
        with p.open("r", encoding="utf-8") as fh:
            lines = fh.readlines()
    except UnicodeDecodeError as exc:
        raise GraphFormatError(f"{p}: not UTF-8 text: {exc}") from exc
    for lineno, raw in enumerate(lines, start=1):
        row = raw.strip()
        if not row or row.startswith("#"):
            continue
        parts = row.replace("\t", ",").split(",")
        if len(parts) < 3:
            raise GraphFormatError(f"{p}:{lineno}: expected 'u,v,w', got {row!r}")
        try:
            u = int(parts[0].strip())
            v = int(parts[1].strip())
            w = float(parts[2].strip())
        except ValueError as exc:
            raise GraphFormatError(f"{p}:{lineno}: {exc}") from exc
        if u < 0 or v < 0:
            raise GraphFormatError(f"{p}:{lineno}: negative node id in {row!r}")
        if math.isnan(w) or w < 0:
            raise GraphFormatError(f"{p}:{lineno}: invalid weight {w} on edge ({u}, {v})")
        edges.append((u, v, w))
        max_id = max(max_id, u, v)
    if max_id < 0:
        raise GraphFormatError("no edges parsed from file")
    return max_id + 1, edges


def load_engine(
    path: Union[str, Path],
    n: Optional[int] = None,
    config: Optional[EngineConfig] = None,
    logger: Logger | None = None,
) -> ShortestPathEngine:
    """Build a :class:`ShortestPathEngine` from a CSV edge list.

    Args:
        path: File to read.
        n: Node count. Defaults to the largest id in the file plus one; a
            smaller value is rejected.
        config: Optional engine configuration.
        logger: Optional event logger.
    """
    found, edges = read_edges_csv(path)
    if n is None:
        n = found
    elif n < found:
        raise InputError(f"--n {n} is smaller than the node ids in {path} (need {found})")
    engine = ShortestPathEngine(n, config=config, logger=logger)
    for u, v, w in edges:
        engine.add_edge(u, v, w)
    return engine


__all__ = ["read_edges_csv", "load_engine"]
