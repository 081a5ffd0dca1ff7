import random

import pytest

from algokit.sorting import quicksort, selection_sort, shuffle


@pytest.mark.parametrize("seed", range(5))
def test_quicksort_random(seed):
    rng = random.Random(seed)
    data = [rng.randrange(100) for _ in range(50)]
    expected = sorted(data)
    quicksort(data, random.Random(seed + 100))
    assert data == expected


@pytest.mark.parametrize("data", [[], [1], [2, 1], [3, 3, 3], list(range(20, 0, -1))])
def test_quicksort_edge_cases(data):
    expected = sorted(data)
    quicksort(data)
    assert data == expected


@pytest.mark.parametrize("data", [[], [1], [5, 4, 3, 2, 1], [2, 9, 2, 0, 7, 7]])
def test_selection_sort(data):
    expected = sorted(data)
    selection_sort(data)
    assert data == expected


def test_selection_sort_strings():
    data = ["pear", "apple", "fig"]
    selection_sort(data)
    assert data == sorted(["pear", "apple", "fig"])


def test_shuffle_is_permutation():
    data = list(range(10))
    shuffle(data, random.Random(3))
    assert sorted(data) == list(range(10))


def test_shuffle_deterministic_with_seed():
    a = list(range(30))
    b = list(range(30))
    shuffle(a, random.Random(9))
    shuffle(b, random.Random(9))
    assert a == b
    assert a != list(range(30))


def test_shuffle_empty():
    data = []
    shuffle(data)
    assert data == []