"""Combinatorial puzzles: N-queens placement and the 0/1 knapsack."""

from __future__ import annotations

from collections.abc import Sequence


def n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens on an ``n`` by ``n`` board.

    Each board is a list of rows such as ``".Q.."``; boards come in the order the
    search finds them, trying columns left to right row by row.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    solutions: list[list[str]] = []
    placed: list[int] = []
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            solutions.append(["." * c + "Q" + "." * (n - c - 1) for c in placed])
            return
        for col in range(n):
            if col in columns or row - col in diagonals or row + col in anti_diagonals:
                continue
            placed.append(col)
            columns.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            place(row + 1)
            placed.pop()
            columns.discard(col)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)

    place(0)
    return solutions


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of items whose weights fit within ``capacity``."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            if weight >= 0:
                best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]