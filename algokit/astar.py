"""A* path search on a grid with eight-way movement."""

from __future__ import annotations

import heapq
import math
from itertools import count

from algokit.array2d import Array2D

WALL = 0xFF
_SQRT2 = math.sqrt(2.0)

Cell = tuple[int, int]


def _estimate(x1: int, y1: int, x2: int, y2: int) -> float:
    return math.hypot(x2 - x1, y2 - y1)


class AStar:
    """Path finder over a grid whose cells equal to ``WALL`` are impassable.

    Moving horizontally or vertically costs 1, diagonally sqrt(2).
    """

    WALL = WALL

    def __init__(self, grid: Array2D) -> None:
        self._grid = grid

    def _neighbours(self, x: int, y: int):
        nrow, ncol = self._grid.rows(), self._grid.cols()
        for nx in range(x - 1, x + 2):
            for ny in range(y - 1, y + 2):
                if (nx, ny) == (x, y):
                    continue
                if 0 <= nx < nrow and 0 <= ny < ncol and self._grid[nx, ny] != WALL:
                    yield nx, ny

    def run(self, x1: int, y1: int, x2: int, y2: int) -> list[Cell] | None:
        """Search a path from ``(x1, y1)`` to ``(x2, y2)``.

        Returns the cells of the path from the goal back to the start, an
        empty list when the goal cannot be reached, or None when the start
        cell is a wall.
        """
        grid = self._grid
        if grid[x1, y1] == WALL:
            return None
        grid[x2, y2]  # validates the goal position
        start: Cell = (x1, y1)
        goal: Cell = (x2, y2)

        g_score: dict[Cell, float] = {start: 0.0}
        came_from: dict[Cell, Cell] = {}
        open_cells: set[Cell] = {start}
        closed: set[Cell] = set()
        tie = count()
        heap: list[tuple[float, int, Cell]] = [(0.0, next(tie), start)]

        while heap:
            _, _, current = heapq.heappop(heap)
            if current == goal:
                path = [goal]
                cell = goal
                while cell != start:
                    cell = came_from[cell]
                    path.append(cell)
                return path

            closed.add(current)
            open_cells.discard(current)
            cx, cy = current
            for neighbour in self._neighbours(cx, cy):
                if neighbour in closed:
                    continue
                nx, ny = neighbour
                step = 1.0 if nx == cx or ny == cy else _SQRT2
                tentative = g_score[current] + step
                if neighbour not in open_cells or tentative < g_score[neighbour]:
                    came_from[neighbour] = current
                    g_score[neighbour] = tentative
                    if neighbour not in open_cells:
                        f_score = tentative + _estimate(nx, ny, x2, y2)
                        heapq.heappush(heap, (f_score, next(tie), neighbour))
                        open_cells.add(neighbour)
        return []