"""Hashing by multiplication: h(k) = (A*k mod 2^w) >> (w - r)."""

from __future__ import annotations

import math
from itertools import count

_BITWIDTH = 32
_MASK = 0xFFFFFFFF


def is_prime(n: int) -> bool:
    """Return True if ``n`` is a prime number."""
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    return all(n % d for d in range(3, math.isqrt(n) + 1, 2))


class MultiplicativeHash:
    """A multiplicative hash into a table of ``2**r`` buckets.

    ``r`` is the first prime not below ``ceil(log2(size))``.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        start = math.ceil(math.log2(size))
        self.r = next(i for i in count(start) if is_prime(i))
        if self.r > _BITWIDTH:
            raise ValueError("size too large for a 32-bit hash")
        self.A = (1 << (_BITWIDTH - self.r)) + 1

    def table_size(self) -> int:
        """Number of buckets the hash maps into."""
        return 1 << self.r

    def __call__(self, key: int) -> int:
        return ((self.A * (key & _MASK)) & _MASK) >> (_BITWIDTH - self.r)