"""Dynamic programming over rectangular grids of numbers."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["max_path_sum", "max_cross_span", "largest_square"]

Grid = Sequence[Sequence[int]]


def _rows(grid: Grid) -> list[list[int]]:
    rows = [list(row) for row in grid]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("grid rows must all have the same length")
    return rows


def max_path_sum(grid: Grid) -> int:
    """Return the best sum of a path ending at the bottom-right cell.

    A path moves only right or down. Stepping in from outside the grid
    contributes nothing, so a path may begin on any cell of the top row
    or left column.
    """
    above: list[int] = []
    for row in _rows(grid):
        current: list[int] = []
        for col, value in enumerate(row):
            left = current[-1] if current else 0
            up = above[col] if above else 0
            current.append(value + max(left, up))
        above = current
    return above[-1] if above else 0


def max_cross_span(grid: Grid) -> int:
    """Return the largest k such that some cell starts a run of k ones
    both downward and to the right. Only cells equal to 1 count."""
    rows = _rows(grid)
    if not rows:
        return 0
    width = len(rows[0])
    down_below = [0] * width
    best = 0
    for row in reversed(rows):
        down = [1 + below if value == 1 else 0 for value, below in zip(row, down_below)]
        right_run = 0
        for value, down_run in zip(reversed(row), reversed(down)):
            right_run = right_run + 1 if value == 1 else 0
            best = max(best, min(down_run, right_run))
        down_below = down
    return best


def largest_square(grid: Grid) -> int:
    """Return the side of the largest square made entirely of non-zero cells."""
    rows = _rows(grid)
    if not rows:
        return 0
    width = len(rows[0])
    below = [0] * (width + 1)
    best = 0
    for row in reversed(rows):
        current = [0] * (width + 1)
        for col in reversed(range(width)):
            if row[col] != 0:
                current[col] = 1 + min(below[col], current[col + 1], below[col + 1])
                best = max(best, current[col])
        below = current
    return best