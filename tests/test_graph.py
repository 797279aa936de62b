"""
Unit tests for the append-only Graph.
"""

import math

import pytest

from dijkstrax import Edge, Graph, GraphFormatError, InputError, NodeIndexError


def test_add_edges_preserves_insertion_order():
    g = Graph(3)
    g.add_edge(0, 2, 4.0)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 2.5)

    assert g.adj == (
        (Edge(0, 2, 4.0), Edge(0, 1, 1.0)),
        (Edge(1, 2, 2.5),),
        (),
    )
    assert g.num_edges == 3
    assert g.out_degree(0) == 2
    assert isinstance(g.adj[0][1].weight, float)


def test_edges_are_stored_under_their_tail():
    g = Graph.from_edges(4, [(3, 0, 1.0), (1, 2, 1.0), (3, 3, 0.0), (1, 2, 5.0)])
    for u, lst in enumerate(g.adj):
        assert all(e.tail == u for e in lst)
    assert list(g.edges()) == [Edge(1, 2, 1.0), Edge(1, 2, 5.0), Edge(3, 0, 1.0), Edge(3, 3, 0.0)]


def test_adj_is_a_snapshot():
    g = Graph(2)
    g.add_edge(0, 1, 1.0)
    snapshot = g.adj
    g.add_edge(1, 0, 2.0)

    assert snapshot == ((Edge(0, 1, 1.0),), ())
    assert g.adj[1] == (Edge(1, 0, 2.0),)


def test_zero_nodes_is_allowed():
    g = Graph(0)
    assert g.n == 0
    assert g.adj == ()
    with pytest.raises(InputError):
        g.add_edge(0, 0, 1.0)


@pytest.mark.parametrize("n", [-1, 2.0, "3", None, True])
def test_invalid_node_count(n):
    with pytest.raises(InputError):
        Graph(n)


@pytest.mark.parametrize("u,v", [(-1, 0), (0, 3), (3, 0), (0, -1)])
def test_out_of_range_endpoints_rejected(u, v):
    g = Graph(3)
    with pytest.raises(InputError):
        g.add_edge(u, v, 1.0)
    assert g.num_edges == 0


@pytest.mark.parametrize("w", [-0.5, -1, math.nan, "1.0", None])
def test_bad_weights_rejected_without_mutation(w):
    g = Graph(2)
    with pytest.raises(GraphFormatError):
        g.add_edge(0, 1, w)
    assert g.adj == ((), ())


def test_negative_weight_error_is_an_input_error():
    g = Graph(2)
    with pytest.raises(InputError, match="negative weight"):
        g.add_edge(0, 1, -3.0)


def test_out_edges_checks_range():
    g = Graph(1)
    with pytest.raises(InputError):
        g.out_edges(1)


def test_to_networkx_keeps_parallel_and_isolated():
    g = Graph(4)
    g.add_edge(0, 1, 2.0)
    g.add_edge(0, 1, 3.0)
    G = g.to_networkx()

    assert sorted(G.nodes) == [0, 1, 2, 3]
    assert G.number_of_edges(0, 1) == 2
    assert sorted(w for _, _, w in G.edges(data="weight")) == [2.0, 3.0]


def test_numpy_scalars_are_accepted():
    np = pytest.importorskip("numpy")
    g = Graph(3)
    g.add_edge(np.int64(0), np.int32(2), np.float32(1.5))

    assert g.contains(np.int64(2))
    assert g.adj[0] == (Edge(0, 2, 1.5),)
    assert type(g.adj[0][0].head) is int


def test_out_of_range_error_names_the_endpoint():
    g = Graph(2)
    with pytest.raises(NodeIndexError) as info:
        g.add_edge(0, 5, 1.0)
    assert (info.value.node, info.value.n, info.value.role) == (5, 2, "head")
    assert isinstance(info.value, IndexError)
