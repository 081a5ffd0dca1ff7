"""A fixed-size two-dimensional array backed by a flat list."""

from __future__ import annotations

from typing import Any


class Array2D:
    """A rows x cols grid addressed as ``grid[row, col]``."""

    def __init__(self, nrow: int, ncol: int, fill: Any = None) -> None:
        if nrow < 0 or ncol < 0:
            raise ValueError("dimensions must be non-negative")
        self._nrow = nrow
        self._ncol = ncol
        self._data = [fill] * (nrow * ncol)

    def rows(self) -> int:
        """Number of rows."""
        return self._nrow

    def cols(self) -> int:
        """Number of columns."""
        return self._ncol

    def _offset(self, row: int, col: int) -> int:
        if not (0 <= row < self._nrow and 0 <= col < self._ncol):
            raise IndexError(f"position ({row}, {col}) out of range")
        return row * self._ncol + col

    def __getitem__(self, index):
        """Return the cell at ``(row, col)``, or a copy of a whole row for an int."""
        if isinstance(index, tuple):
            row, col = index
            return self._data[self._offset(row, col)]
        if not 0 <= index < self._nrow:
            raise IndexError(f"row {index} out of range")
        start = index * self._ncol
        return self._data[start:start + self._ncol]

    def __setitem__(self, index, value) -> None:
        row, col = index
        self._data[self._offset(row, col)] = value

    def clear(self, value: Any) -> None:
        """Set every cell to ``value``."""
        self._data = [value] * (self._nrow * self._ncol)