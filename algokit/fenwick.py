"""Fenwick (binary indexed) tree for prefix sums."""

from __future__ import annotations


class FenwickTree:
    """Prefix sums over positions ``1..size`` with O(log n) updates."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._tree = [0] * (size + 1)

    def _check(self, index: int) -> None:
        if not 1 <= index < len(self._tree):
            raise IndexError(f"index {index} out of range")

    def update(self, index: int, delta: int) -> None:
        """Add ``delta`` to the element at ``index``."""
        self._check(index)
        while index < len(self._tree):
            self._tree[index] += delta
            index += index & -index

    def prefix_sum(self, index: int) -> int:
        """Sum of elements ``1..index``; zero for index 0."""
        if index != 0:
            self._check(index)
        total = 0
        while index:
            total += self._tree[index]
            index -= index & -index
        return total

    def range_sum(self, start: int, end: int) -> int:
        """Sum of elements ``start..end`` inclusive."""
        return self.prefix_sum(end) - self.prefix_sum(start - 1)