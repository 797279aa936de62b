"""
Unit tests for ordering strategies and the heap frontier.
"""

import math

import pytest

from dijkstrax import ConfigError, EpsilonOrdering, HeapFrontier, InputError, QueueEntry, key_ordering
from dijkstrax.ordering import check_ordering


def test_epsilon_ordering_ascending():
    o = EpsilonOrdering()
    assert o.compare(QueueEntry(0, 1.0), QueueEntry(1, 2.0)) == -1
    assert o.compare(QueueEntry(0, 2.0), QueueEntry(1, 1.0)) == 1


def test_epsilon_ordering_treats_near_values_as_equal():
    o = EpsilonOrdering(1e-6)
    assert o.compare(QueueEntry(0, 1.0), QueueEntry(1, 1.0 + 5e-7)) == 0
    assert o.compare(QueueEntry(0, 1.0), QueueEntry(1, 1.0 + 2e-6)) == -1
    assert o.compare(QueueEntry(0, math.inf), QueueEntry(1, math.inf)) == 0


@pytest.mark.parametrize("eps", [-1e-6, math.inf, math.nan, "x"])
def test_epsilon_ordering_rejects_bad_eps(eps):
    with pytest.raises(ConfigError):
        EpsilonOrdering(eps)


def test_key_ordering():
    desc = key_ordering(lambda e: -e.distance)
    assert desc.compare(QueueEntry(0, 5.0), QueueEntry(1, 1.0)) == -1
    assert desc.compare(QueueEntry(0, 1.0), QueueEntry(1, 1.0)) == 0
    with pytest.raises(InputError):
        key_ordering(3)


def test_check_ordering():
    with pytest.raises(InputError):
        check_ordering(None)
    with pytest.raises(InputError):
        check_ordering(object())
    o = EpsilonOrdering()
    assert check_ordering(o) is o


def test_frontier_pops_in_order():
    pq = HeapFrontier()
    for node, d in [(0, 5.0), (1, 1.0), (2, 3.0), (3, 0.0)]:
        pq.push(node, d)

    assert len(pq) == 4
    assert pq.peek() == QueueEntry(3, 0.0)
    assert [pq.pop().node for _ in range(4)] == [3, 1, 2, 0]
    assert not pq
    assert pq.pushes == 4
    assert pq.peak == 4


def test_frontier_keeps_duplicates_for_lazy_deletion():
    pq = HeapFrontier()
    pq.push(1, 10.0)
    pq.push(1, 4.0)

    assert pq.pop() == QueueEntry(1, 4.0)
    assert pq.pop() == QueueEntry(1, 10.0)


def test_frontier_custom_ordering():
    pq = HeapFrontier(key_ordering(lambda e: -e.distance))
    pq.push(0, 1.0)
    pq.push(1, 9.0)
    assert pq.pop().node == 1


def test_pop_empty_raises():
    pq = HeapFrontier()
    with pytest.raises(IndexError):
        pq.pop()
    with pytest.raises(IndexError):
        pq.peek()
