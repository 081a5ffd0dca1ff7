"""N-queens solutions by backtracking."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def solve_queens(n: int = 8) -> Iterator[tuple[int, ...]]:
    """Yield every placement of ``n`` queens as the column chosen in each row.

    Solutions come in the order found by trying rows top to bottom and
    columns left to right.
    """
    if n < 1:
        raise ValueError("board size must be positive")
    columns: list[int] = []

    def safe(col: int) -> bool:
        row = len(columns)
        return all(
            c != col and abs(c - col) != row - r for r, c in enumerate(columns)
        )

    def place() -> Iterator[tuple[int, ...]]:
        for col in range(n):
            if safe(col):
                columns.append(col)
                if len(columns) == n:
                    yield tuple(columns)
                else:
                    yield from place()
                columns.pop()

    yield from place()


def format_board(board: Sequence[int]) -> str:
    """Render a solution as rows of ``1`` (queen) and ``0`` cells."""
    size = len(board)
    lines = [
        "".join(f"{'1' if col == queen else '0'} " for col in range(size))
        for queen in board
    ]
    return "\n".join(lines) + "\n"