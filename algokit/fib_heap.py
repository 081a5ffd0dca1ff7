"""A Fibonacci min-heap of key/value pairs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class FibNode:
    """A heap entry; keep it to decrease its key later."""

    key: Any
    value: Any
    parent: FibNode | None = None
    mark: bool = False
    children: list[FibNode] = field(default_factory=list)

    @property
    def degree(self) -> int:
        return len(self.children)


class FibHeap:
    """A Fibonacci heap ordered by ascending key."""

    def __init__(self) -> None:
        self._roots: list[FibNode] = []
        self._min: FibNode | None = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def minimum(self) -> FibNode | None:
        """Return the node with the smallest key, or None when empty."""
        return self._min

    def insert(self, key: Any, value: Any = None) -> FibNode:
        """Add a key/value pair and return its node."""
        node = FibNode(key, value)
        self._roots.append(node)
        if self._min is None or node.key < self._min.key:
            self._min = node
        self._count += 1
        return node

    def merge(self, other: FibHeap) -> None:
        """Move every node of ``other`` into this heap, leaving ``other`` empty."""
        self._roots.extend(other._roots)
        if self._min is None or (other._min is not None and other._min.key < self._min.key):
            self._min = other._min
        self._count += other._count
        other._roots = []
        other._min = None
        other._count = 0

    def extract_min(self) -> FibNode:
        """Remove and return the node with the smallest key."""
        z = self._min
        if z is None:
            raise IndexError("extract from an empty heap")
        for child in z.children:
            child.parent = None
            self._roots.append(child)
        z.children = []
        self._roots.remove(z)
        self._count -= 1
        if self._roots:
            self._consolidate()
        else:
            self._min = None
        return z

    def decrease_key(self, node: FibNode, key: Any) -> None:
        """Lower the key of ``node``; a larger key is ignored."""
        if key > node.key:
            return
        node.key = key
        parent = node.parent
        if parent is not None and node.key < parent.key:
            self._cut(node, parent)
            self._cascading_cut(parent)
        if self._min is None or node.key < self._min.key:
            self._min = node

    def _cut(self, x: FibNode, y: FibNode) -> None:
        y.children.remove(x)
        self._roots.append(x)
        x.parent = None
        x.mark = False

    def _cascading_cut(self, y: FibNode) -> None:
        while (z := y.parent) is not None:
            if not y.mark:
                y.mark = True
                return
            self._cut(y, z)
            y = z

    @staticmethod
    def _link(y: FibNode, x: FibNode) -> None:
        y.parent = x
        x.children.append(y)
        y.mark = False

    def _consolidate(self) -> None:
        by_degree: dict[int, FibNode] = {}
        for w in self._roots:
            x = w
            d = x.degree
            while d in by_degree:
                y = by_degree.pop(d)
                if x.key > y.key:
                    x, y = y, x
                self._link(y, x)
                d += 1
            by_degree[d] = x
        self._roots = [by_degree[d] for d in sorted(by_degree)]
        self._min = None
        for root in self._roots:
            if self._min is None or root.key < self._min.key:
                self._min = root