"""A weighted directed graph stored as adjacency maps."""

from __future__ import annotations

import random
from collections.abc import Hashable


class DirectedGraph:
    """Directed graph with at most one weighted edge from one vertex to another."""

    def __init__(self) -> None:
        self._adj: dict[Hashable, dict[Hashable, int]] = {}

    @classmethod
    def random(cls, nvertex: int, rng: random.Random | None = None) -> DirectedGraph:
        """Build a graph on ``0..nvertex-1`` where each edge i->j (i < j)
        exists with probability 1/3 and has a weight in ``0..99``."""
        rng = rng or random.Random()
        graph = cls()
        for i in range(nvertex):
            graph.add_vertex(i)
        for i in range(nvertex):
            for j in range(i + 1, nvertex):
                if rng.randrange(3) == 0:
                    graph.add_edge(i, j, rng.randrange(100))
        return graph

    def vertex_count(self) -> int:
        return len(self._adj)

    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._adj.values())

    def __contains__(self, vid: Hashable) -> bool:
        return vid in self._adj

    def vertices(self) -> list[Hashable]:
        """Vertex ids in the order they were added."""
        return list(self._adj)

    def neighbours(self, vid: Hashable) -> list[tuple[Hashable, int]]:
        """Outgoing edges of ``vid`` as ``(target, weight)`` pairs."""
        return list(self._adj[vid].items())

    def weight(self, x: Hashable, y: Hashable) -> int:
        """Weight of the edge ``x -> y``; KeyError if there is none."""
        return self._adj[x][y]

    def add_vertex(self, vid: Hashable) -> bool:
        """Add a vertex; return False if it already exists."""
        if vid in self._adj:
            return False
        self._adj[vid] = {}
        return True

    def delete_vertex(self, vid: Hashable) -> None:
        """Remove a vertex and every edge into or out of it; ignore a missing one."""
        if vid not in self._adj:
            return
        del self._adj[vid]
        for edges in self._adj.values():
            edges.pop(vid, None)

    def add_edge(self, x: Hashable, y: Hashable, weight: int) -> bool:
        """Add ``x -> y``; return False if a vertex is missing or the edge exists."""
        if x not in self._adj or y not in self._adj:
            return False
        if y in self._adj[x]:
            return False
        self._adj[x][y] = weight
        return True

    def delete_edge(self, x: Hashable, y: Hashable) -> None:
        """Remove ``x -> y`` if present."""
        if x in self._adj:
            self._adj[x].pop(y, None)

    def transpose(self) -> DirectedGraph:
        """Return a new graph with every edge reversed."""
        trans = type(self)()
        for u, edges in self._adj.items():
            trans.add_vertex(u)
            for v, w in edges.items():
                trans.add_vertex(v)
                trans.add_edge(v, u, w)
        return trans