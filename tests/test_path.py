"""
Unit tests for predecessor walks and path weights.
"""

import math

import pytest

from dijkstrax import AlgorithmError, Graph, InputError, path_weight, reconstruct_path


def test_reconstruct_path_walks_back_to_source():
    pred = [None, 0, 1, 0]
    assert reconstruct_path(pred, 0, 2) == [0, 1, 2]
    assert reconstruct_path(pred, 0, 3) == [0, 3]


def test_reconstruct_path_source_equals_target():
    assert reconstruct_path([None, None], 1, 1) == [1]


def test_node_zero_is_a_valid_predecessor():
    # 0 must not be mistaken for "no predecessor"
    pred = [2, None, 1]
    assert reconstruct_path(pred, 1, 0) == [1, 2, 0]


def test_broken_chain_raises():
    pred = [None, None, 1]
    with pytest.raises(AlgorithmError):
        reconstruct_path(pred, 0, 2)


def test_cycle_raises():
    pred = [None, 2, 1]
    with pytest.raises(AlgorithmError):
        reconstruct_path(pred, 0, 2)


def test_out_of_range():
    with pytest.raises(InputError):
        reconstruct_path([None], 0, 1)


def test_path_weight_uses_cheapest_parallel_edge():
    g = Graph.from_edges(3, [(0, 1, 5.0), (0, 1, 2.0), (1, 2, 1.5)])
    assert path_weight(g, [0, 1, 2]) == 3.5
    assert path_weight(g, [2]) == 0.0
    assert path_weight(g, []) == math.inf
    with pytest.raises(InputError):
        path_weight(g, [2, 0])
