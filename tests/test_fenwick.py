import pytest

from algokit.fenwick import FenwickTree


def _filled(values):
    tree = FenwickTree(len(values))
    for i, v in enumerate(values, start=1):
        tree.update(i, v)
    return tree


def test_prefix_sums_match():
    values = [3, -1, 4, 1, 5, 9, 2, 6]
    tree = _filled(values)
    for i in range(len(values) + 1):
        assert tree.prefix_sum(i) == sum(values[:i])


def test_range_sums_match():
    values = [5, 2, 7, 1, 8]
    tree = _filled(values)
    for a in range(1, 6):
        for b in range(a, 6):
            assert tree.range_sum(a, b) == sum(values[a - 1:b])


def test_update_accumulates():
    values = [1, 1, 1, 1]
    tree = _filled(values)
    tree.update(2, 10)
    values[1] += 10
    assert tree.range_sum(2, 3) == values[1] + values[2]
    assert tree.prefix_sum(4) == sum(values)


def test_bad_indices():
    tree = FenwickTree(3)
    with pytest.raises(IndexError):
        tree.update(0, 1)
    with pytest.raises(IndexError):
        tree.update(4, 1)
    with pytest.raises(IndexError):
        tree.prefix_sum(4)