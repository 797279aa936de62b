"""Render a graph and a highlighted shortest path with NetworkX + Matplotlib."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Sequence, Union

import matplotlib.pyplot as plt
import networkx as nx
from matplotlib.figure import Figure

from .exceptions import InputError
from .graph import Graph

LAYOUTS = ("spring", "shell", "circular")


def _layout(G: nx.MultiDiGraph, layout: str) -> Dict[int, Sequence[float]]:
    if layout == "spring":
        return nx.spring_layout(G, seed=42)
    if layout == "shell":
        return nx.shell_layout(G)
    if layout == "circular":
        return nx.circular_layout(G)
    raise InputError(f"unknown layout {layout!r}; choose from {', '.join(LAYOUTS)}")


def draw_path(
    graph: Graph,
    path: Sequence[int] = (),
    *,
    labels: Optional[Sequence[str]] = None,
    layout: str = "spring",
    show_weights: bool = True,
    node_size: int = 600,
    title: Optional[str] = None,
) -> Figure:
    """Draw ``graph`` and highlight the consecutive edges of ``path``.

    Nodes on the path are red, the rest blue. Parallel edges are drawn once.

    Args:
        graph: Graph to draw.
        path: Node sequence to highlight, possibly empty.
        labels: Optional display name per node index.
        layout: One of :data:`LAYOUTS`.
        show_weights: Annotate edges with the cheapest parallel weight.
        node_size: Marker size passed to NetworkX.
        title: Figure title.

    Returns:
        The Matplotlib figure. The caller closes it.
    """
    if labels is not None and len(labels) != graph.n:
        raise InputError(f"expected {graph.n} labels, got {len(labels)}")
    G = graph.to_networkx()
    pos = _layout(G, layout)

    on_path = set(path)
    path_edges = set(zip(path, path[1:]))
    simple = nx.DiGraph()
    simple.add_nodes_from(G.nodes)
    for u, v, w in G.edges(data="weight"):
        if not simple.has_edge(u, v) or w < simple[u][v]["weight"]:
            simple.add_edge(u, v, weight=w)

    fig, ax = plt.subplots(figsize=(10, 8))
    nx.draw_networkx_nodes(
        simple,
        pos,
        ax=ax,
        node_color=["tab:red" if u in on_path else "tab:blue" for u in simple.nodes],
        node_size=node_size,
        alpha=0.9,
    )
    nx.draw_networkx_edges(
        simple,
        pos,
        ax=ax,
        edgelist=[e for e in simple.edges if e not in path_edges],
        arrowstyle="->",
        arrowsize=12,
        width=1.2,
        alpha=0.5,
    )
    if path_edges:
        nx.draw_networkx_edges(
            simple,
            pos,
            ax=ax,
            edgelist=sorted(path_edges),
            edge_color="tab:red",
            arrowstyle="->",
            arrowsize=14,
            width=2.5,
        )
    names = {u: labels[u] for u in simple.nodes} if labels is not None else None
    nx.draw_networkx_labels(simple, pos, ax=ax, labels=names, font_size=8)
    if show_weights:
        edge_labels = {(u, v): f"{w:g}" for u, v, w in simple.edges(data="weight")}
        nx.draw_networkx_edge_labels(simple, pos, ax=ax, edge_labels=edge_labels, font_size=7)

    ax.set_title(title or "Shortest path", fontsize=14)
    ax.axis("off")
    fig.tight_layout()
    return fig


def save_path_plot(
    graph: Graph,
    path: Sequence[int],
    out: Union[str, Path],
    **kwargs: object,
) -> Path:
    """Draw with :func:`draw_path` and write the figure to ``out``."""
    fig = draw_path(graph, path, **kwargs)  # type: ignore[arg-type]
    try:
        fig.savefig(out)
    finally:
        plt.close(fig)
    return Path(out)


__all__ = ["LAYOUTS", "draw_path", "save_path_plot"]
