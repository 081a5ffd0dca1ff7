"""Huffman coding over 8-bit symbols."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from itertools import count


@dataclass(eq=False)
class _Node:
    symbol: int = 0
    left: _Node | None = None
    right: _Node | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _as_bytes(data: str | bytes) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _as_symbol(symbol: int | str | bytes) -> int:
    if isinstance(symbol, int):
        if not 0 <= symbol < 256:
            raise ValueError("symbol must be a byte value")
        return symbol
    raw = _as_bytes(symbol)
    if len(raw) != 1:
        raise ValueError("symbol must be a single byte")
    return raw[0]


class HuffmanTree:
    """A Huffman code built from the byte frequencies of a sample."""

    def __init__(self, sample: str | bytes) -> None:
        data = _as_bytes(sample)
        self._freqs = [0] * 256
        for byte in data:
            self._freqs[byte] += 1
        self._root = self._build()
        self._codes = self._build_codes()

    def _build(self) -> _Node:
        order = count()
        queue = [
            (freq, next(order), _Node(symbol))
            for symbol, freq in enumerate(self._freqs)
            if freq
        ]
        if not queue:
            raise ValueError("sample must not be empty")
        heapq.heapify(queue)
        while len(queue) > 1:
            p1, _, n1 = heapq.heappop(queue)
            p2, _, n2 = heapq.heappop(queue)
            heapq.heappush(queue, (p1 + p2, next(order), _Node(left=n1, right=n2)))
        root = queue[0][2]
        if root.is_leaf:
            # a lone symbol still needs one bit per occurrence
            root = _Node(left=root)
        return root

    def _build_codes(self) -> dict[int, str]:
        codes: dict[int, str] = {}
        pending = [(self._root, "")]
        while pending:
            node, code = pending.pop()
            if node.is_leaf:
                codes[node.symbol] = code
                continue
            if node.right is not None:
                pending.append((node.right, code + "1"))
            if node.left is not None:
                pending.append((node.left, code + "0"))
        return codes

    def frequencies(self) -> list[int]:
        """Count of each byte value in the sample, indexed 0..255."""
        return list(self._freqs)

    def code_for(self, symbol: int | str | bytes) -> str:
        """Return the code of ``symbol`` as a string of ``0`` and ``1``."""
        byte = _as_symbol(symbol)
        try:
            return self._codes[byte]
        except KeyError:
            raise KeyError(f"symbol {byte!r} does not occur in the sample") from None

    def encode(self, message: str | bytes) -> tuple[bytes, int]:
        """Encode ``message``; return the packed bits (MSB first) and their count."""
        bits = "".join(self.code_for(byte) for byte in _as_bytes(message))
        length = len(bits)
        bits += "0" * (-length % 8)
        packed = bytes(int(bits[i:i + 8], 2) for i in range(0, len(bits), 8))
        return packed, length

    def decode(self, codes: bytes, length: int) -> bytes:
        """Decode the first ``length`` bits of ``codes`` back into bytes."""
        if length < 0 or length > len(codes) * 8:
            raise ValueError("bit length does not fit the given codes")
        out = bytearray()
        node = self._root
        for cursor in range(length):
            bit = (codes[cursor // 8] >> (7 - cursor % 8)) & 1
            nxt = node.right if bit else node.left
            if nxt is None:
                raise ValueError(f"invalid code at bit {cursor}")
            node = nxt
            if node.is_leaf:
                out.append(node.symbol)
                node = self._root
        return bytes(out)