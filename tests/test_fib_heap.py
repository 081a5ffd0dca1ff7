import random

import pytest

from algokit.fib_heap import FibHeap


def _drain(heap):
    out = []
    while len(heap):
        out.append(heap.extract_min().key)
    return out


def test_extracts_in_sorted_order():
    rng = random.Random(7)
    keys = [rng.randint(-100, 100) for _ in range(200)]
    heap = FibHeap()
    for k in keys:
        heap.insert(k, str(k))
    assert len(heap) == len(keys)
    assert _drain(heap) == sorted(keys)
    assert len(heap) == 0


def test_extract_returns_value():
    heap = FibHeap()
    heap.insert(5, "five")
    heap.insert(2, "two")
    heap.insert(9, "nine")
    node = heap.extract_min()
    assert (node.key, node.value) == (2, "two")
    assert heap.minimum().value == "five"


def test_empty_heap():
    heap = FibHeap()
    assert heap.minimum() is None
    with pytest.raises(IndexError):
        heap.extract_min()


def test_decrease_key_reorders():
    heap = FibHeap()
    nodes = {k: heap.insert(k, k) for k in range(20)}
    heap.extract_min()  # forces consolidation into trees
    heap.decrease_key(nodes[15], -1)
    assert heap.minimum() is nodes[15]
    assert heap.extract_min().value == 15
    heap.decrease_key(nodes[19], 0)
    assert _drain(heap) == [0] + [k for k in range(1, 19) if k != 15]


def test_decrease_key_with_larger_key_is_ignored():
    heap = FibHeap()
    node = heap.insert(3, "x")
    heap.decrease_key(node, 10)
    assert node.key == 3


def test_many_decreases_keep_order():
    rng = random.Random(3)
    heap = FibHeap()
    nodes = [heap.insert(rng.randint(0, 1000), i) for i in range(100)]
    for _ in range(5):
        heap.extract_min()
    live = [n for n in nodes if n.key is not None]
    extracted = set()
    remaining = []
    for _ in range(len(heap)):
        pass
    for n in rng.sample(nodes, 40):
        heap.decrease_key(n, n.key - rng.randint(0, 500))
    remaining = _drain(heap)
    assert remaining == sorted(remaining)
    assert len(remaining) == 95
    assert len(live) == 100
    assert not extracted


def test_merge():
    a, b = FibHeap(), FibHeap()
    for k in (5, 1, 8):
        a.insert(k)
    for k in (0, 7):
        b.insert(k)
    a.merge(b)
    assert len(a) == 5
    assert len(b) == 0
    assert b.minimum() is None
    assert _drain(a) == [0, 1, 5, 7, 8]