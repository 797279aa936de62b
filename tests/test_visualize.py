"""
Tests for path plotting.
"""

import importlib

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from dijkstrax import Graph, InputError  # noqa: E402
from dijkstrax.demo import CITIES, build_demo_engine  # noqa: E402
import dijkstrax.visualize  # noqa: E402
from dijkstrax.visualize import LAYOUTS, draw_path, save_path_plot  # noqa: E402


@pytest.mark.parametrize("layout", LAYOUTS)
def test_draw_path_layouts(layout):
    engine = build_demo_engine()
    fig = draw_path(engine.graph, engine.reconstruct_path(3, 7), labels=CITIES, layout=layout)
    try:
        assert fig.axes[0].get_title() == "Shortest path"
    finally:
        plt.close(fig)


def test_draw_empty_path_and_parallel_edges():
    g = Graph.from_edges(3, [(0, 1, 2.0), (0, 1, 1.0)])
    fig = draw_path(g, [], title="none")
    try:
        assert fig.axes[0].get_title() == "none"
    finally:
        plt.close(fig)


def test_bad_arguments():
    g = Graph(2)
    with pytest.raises(InputError):
        draw_path(g, [], labels=["only one"])
    with pytest.raises(InputError):
        draw_path(g, [], layout="nope")


def test_save_path_plot(tmp_path):
    engine = build_demo_engine()
    out = save_path_plot(engine.graph, [0, 1, 2], tmp_path / "p.png")
    assert out.exists()


def test_import_leaves_backend_alone():
    matplotlib.use("svg")
    try:
        importlib.reload(dijkstrax.visualize)
        assert matplotlib.get_backend().lower() == "svg"
    finally:
        matplotlib.use("Agg")
