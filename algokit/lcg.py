"""Linear congruential pseudo-random generator over 32-bit integers."""

from __future__ import annotations

_A = 1664525
_C = 1013904223
_MASK = 0xFFFFFFFF


class LinearCongruential:
    """An endless iterator of values in ``[0, 4294967295]``."""

    def __init__(self, seed: int = 0) -> None:
        self._state = seed & _MASK

    def __iter__(self) -> "LinearCongruential":
        return self

    def __next__(self) -> int:
        self._state = (_A * self._state + _C) & _MASK
        return self._state