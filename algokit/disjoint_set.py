"""Union-find with path compression and union by rank."""

from __future__ import annotations

from collections.abc import Hashable, Iterable


class DisjointSet:
    """A partition of hashable items into disjoint sets."""

    def __init__(self, items: Iterable[Hashable] = ()) -> None:
        self._parent: dict[Hashable, Hashable] = {}
        self._rank: dict[Hashable, int] = {}
        for item in items:
            self.make_set(item)

    def make_set(self, item: Hashable) -> None:
        """Put ``item`` in a set of its own."""
        self._parent[item] = item
        self._rank[item] = 0

    def find(self, item: Hashable) -> Hashable:
        """Return the representative of the set holding ``item``."""
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while item != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, x: Hashable, y: Hashable) -> Hashable:
        """Join the sets of ``x`` and ``y``; return the new representative."""
        rx, ry = self.find(x), self.find(y)
        if rx == ry:
            return rx
        if self._rank[rx] > self._rank[ry]:
            self._parent[ry] = rx
            return rx
        self._parent[rx] = ry
        if self._rank[rx] == self._rank[ry]:
            self._rank[ry] += 1
        return ry