"""The MD5 message digest."""

from __future__ import annotations

import math
import struct

_MASK = 0xFFFFFFFF
_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_SHIFTS = (
    [7, 12, 17, 22] * 4
    + [5, 9, 14, 20] * 4
    + [4, 11, 16, 23] * 4
    + [6, 10, 15, 21] * 4
)
_CONSTANTS = [int(abs(math.sin(i + 1)) * 2**32) & _MASK for i in range(64)]


def _rotl(value: int, amount: int) -> int:
    return ((value << amount) | (value >> (32 - amount))) & _MASK


def _transform(state: tuple[int, int, int, int], block: bytes) -> tuple[int, int, int, int]:
    words = struct.unpack("<16I", block)
    a, b, c, d = state
    for i in range(64):
        if i < 16:
            f = (b & c) | (~b & d)
            g = i
        elif i < 32:
            f = (b & d) | (c & ~d)
            g = (5 * i + 1) % 16
        elif i < 48:
            f = b ^ c ^ d
            g = (3 * i + 5) % 16
        else:
            f = c ^ (b | ~d)
            g = (7 * i) % 16
        total = (a + (f & _MASK) + _CONSTANTS[i] + words[g]) & _MASK
        a, b, c, d = d, (b + _rotl(total, _SHIFTS[i])) & _MASK, b, c
    return (
        (state[0] + a) & _MASK,
        (state[1] + b) & _MASK,
        (state[2] + c) & _MASK,
        (state[3] + d) & _MASK,
    )


class MD5:
    """Incremental MD5 hashing of byte strings."""

    def __init__(self, data: bytes = b"") -> None:
        self._state = _INITIAL_STATE
        self._buffer = b""
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the digest."""
        chunk = memoryview(data).tobytes()
        self._length += len(chunk)
        buffer = self._buffer + chunk
        full = len(buffer) - len(buffer) % 64
        state = self._state
        for offset in range(0, full, 64):
            state = _transform(state, buffer[offset:offset + 64])
        self._state = state
        self._buffer = buffer[full:]

    def digest(self) -> bytes:
        """Return the 16-byte digest of everything fed so far."""
        bit_length = (self._length * 8) & 0xFFFFFFFFFFFFFFFF
        padding = b"\x80" + b"\x00" * ((55 - self._length) % 64)
        tail = self._buffer + padding + struct.pack("<Q", bit_length)
        state = self._state
        for offset in range(0, len(tail), 64):
            state = _transform(state, tail[offset:offset + 64])
        return struct.pack("<4I", *state)

    def hexdigest(self) -> str:
        """Return the digest as 32 lower-case hexadecimal digits."""
        return self.digest().hex()


def md5(data: bytes = b"") -> MD5:
    """Return a new MD5 object primed with ``data``."""
    return MD5(data)