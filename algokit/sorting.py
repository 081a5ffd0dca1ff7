"""In-place quicksort, selection sort and Fisher-Yates shuffle."""

from __future__ import annotations

import random
from collections.abc import MutableSequence
from typing import Any


def _partition(items: MutableSequence[Any], begin: int, end: int, rng: random.Random) -> int:
    pivot_idx = rng.randint(begin, end)
    pivot = items[pivot_idx]
    items[begin], items[pivot_idx] = items[pivot_idx], items[begin]
    i, j = begin + 1, end
    while i <= j:
        while i <= end and items[i] <= pivot:
            i += 1
        while j >= begin and items[j] > pivot:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[begin], items[j] = items[j], items[begin]
    return j


def quicksort(items: MutableSequence[Any], rng: random.Random | None = None) -> None:
    """Sort ``items`` in place using a random pivot."""
    rng = rng or random.Random()
    pending = [(0, len(items) - 1)]
    while pending:
        begin, end = pending.pop()
        if begin < end:
            mid = _partition(items, begin, end, rng)
            pending.append((begin, mid - 1))
            pending.append((mid + 1, end))


def selection_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by repeatedly selecting the minimum."""
    n = len(items)
    for j in range(n - 1):
        i_min = min(range(j, n), key=items.__getitem__)
        if i_min != j:
            items[j], items[i_min] = items[i_min], items[j]


def shuffle(items: MutableSequence[Any], rng: random.Random | None = None) -> None:
    """Shuffle ``items`` in place with the Fisher-Yates algorithm."""
    rng = rng or random.Random()
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]