"""A probabilistic skip list mapping ordered keys to values."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any

_MAX_LEVEL = 6


@dataclass
class _Node:
    key: Any
    value: Any
    forward: list[_Node | None] = field(default_factory=list)


class SkipList:
    """Ordered key-value store; each node is promoted with probability 1/2."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self._header = _Node(None, None, [None] * (_MAX_LEVEL + 1))
        self._level = 0

    def _random_level(self) -> int:
        level = 0
        while self._rng.random() < 0.5 and level < _MAX_LEVEL:
            level += 1
        return level

    def _find_update(self, key: Any) -> tuple[list[_Node], _Node | None]:
        update: list[_Node] = [self._header] * (_MAX_LEVEL + 1)
        x = self._header
        for i in range(self._level, -1, -1):
            while (nxt := x.forward[i]) is not None and nxt.key < key:
                x = nxt
            update[i] = x
        return update, x.forward[0]

    def insert(self, key: Any, value: Any) -> None:
        """Insert ``key``; an existing key keeps its current value."""
        update, x = self._find_update(key)
        if x is not None and x.key == key:
            return
        level = self._random_level()
        if level > self._level:
            for i in range(self._level + 1, level + 1):
                update[i] = self._header
            self._level = level
        node = _Node(key, value, [None] * (level + 1))
        for i in range(level + 1):
            node.forward[i] = update[i].forward[i]
            update[i].forward[i] = node

    def __getitem__(self, key: Any) -> Any:
        _, x = self._find_update(key)
        if x is not None and x.key == key:
            return x.value
        raise KeyError(key)

    def __delitem__(self, key: Any) -> None:
        """Remove ``key``; a missing key is ignored."""
        update, x = self._find_update(key)
        if x is None or x.key != key:
            return
        for i in range(self._level + 1):
            if update[i].forward[i] is not x:
                break
            update[i].forward[i] = x.forward[i]
        while self._level > 0 and self._header.forward[self._level] is None:
            self._level -= 1

    def __contains__(self, key: Any) -> bool:
        _, x = self._find_update(key)
        return x is not None and x.key == key

    def levels(self) -> list[list[tuple[Any, Any]]]:
        """Key-value pairs on each level, from the highest level down to 0."""
        result = []
        for i in range(self._level, -1, -1):
            row = []
            x = self._header.forward[i]
            while x is not None:
                row.append((x.key, x.value))
                x = x.forward[i]
            result.append(row)
        return result