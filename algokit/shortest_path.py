"""Single-source shortest paths: Dijkstra and Bellman-Ford."""

from __future__ import annotations

import heapq
import math
from collections.abc import Hashable
from itertools import count

from algokit.graph import DirectedGraph


def dijkstra(graph: DirectedGraph, source: Hashable) -> dict[Hashable, Hashable | None]:
    """Return the predecessor of every vertex on its shortest path from ``source``.

    Vertices that are unreachable, and the source itself, map to None.
    Edge weights must be non-negative.
    """
    if source not in graph:
        raise KeyError(source)
    dist = {v: math.inf for v in graph.vertices()}
    previous: dict[Hashable, Hashable | None] = {v: None for v in graph.vertices()}
    dist[source] = 0
    tie = count()
    heap = [(0, next(tie), source)]
    visited: set[Hashable] = set()
    while heap:
        _, _, u = heapq.heappop(heap)
        if u in visited:
            continue
        visited.add(u)
        for v, w in graph.neighbours(u):
            alt = dist[u] + w
            if alt < dist[v]:
                dist[v] = alt
                previous[v] = u
                heapq.heappush(heap, (alt, next(tie), v))
    return previous


class BellmanFord:
    """Shortest paths that allow negative weights and detect negative cycles."""

    def __init__(self, graph: DirectedGraph) -> None:
        self._graph = graph
        self._has_neg_cycle = False

    def run(self, source: Hashable) -> dict[Hashable, Hashable | None]:
        """Return the predecessor of every vertex on its shortest path from ``source``.

        Unreachable vertices and the source map to None. After a run,
        :meth:`has_negative_cycle` tells whether a reachable negative cycle exists.
        """
        graph = self._graph
        if source not in graph:
            raise KeyError(source)
        vertices = graph.vertices()
        dist = {v: math.inf for v in vertices}
        previous: dict[Hashable, Hashable | None] = {v: None for v in vertices}
        dist[source] = 0
        self._has_neg_cycle = False

        for _ in range(len(vertices) - 1):
            for u in vertices:
                if dist[u] == math.inf:
                    continue
                for v, w in graph.neighbours(u):
                    if dist[u] + w < dist[v]:
                        dist[v] = dist[u] + w
                        previous[v] = u

        self._has_neg_cycle = any(
            dist[u] != math.inf and dist[u] + w < dist[v]
            for u in vertices
            for v, w in graph.neighbours(u)
        )
        return previous

    def has_negative_cycle(self) -> bool:
        return self._has_neg_cycle