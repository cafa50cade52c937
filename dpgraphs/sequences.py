"""Dynamic programming over sequences: LIS, LCS and bounded subset sums."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

__all__ = [
    "SubsetSelection",
    "longest_increasing_subsequence",
    "longest_common_subsequence",
    "longest_common_subsequence_diagonal",
    "max_subset_sum",
]


@dataclass(frozen=True)
class SubsetSelection:
    """The best reachable total and the indices of the items that make it up."""

    total: int
    indices: tuple[int, ...]


def longest_increasing_subsequence(values: Sequence[Any]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    items = list(values)
    ending_at: list[int] = []
    for value in items:
        # zip stops at the items already processed, i.e. those before `value`.
        longest_before = max(
            (length for prev, length in zip(items, ending_at) if prev < value),
            default=0,
        )
        ending_at.append(longest_before + 1)
    return max(ending_at, default=0)


def longest_common_subsequence(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Return the length of the longest common subsequence of ``a`` and ``b``."""
    width = len(b)
    below = [0] * (width + 1)
    for item_a in reversed(a):
        row = [0] * (width + 1)
        for j, item_b in reversed(list(enumerate(b))):
            best = max(below[j], row[j + 1])
            if item_a == item_b:
                best = max(best, below[j + 1] + 1)
            row[j] = best
        below = row
    return below[0]


def longest_common_subsequence_diagonal(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Return the LCS length, filling the table one anti-diagonal at a time.

    Every cell on an anti-diagonal depends only on later diagonals, so the
    cells of one diagonal are independent of each other.
    """
    m, n = len(a), len(b)
    table = [[0] * (n + 1) for _ in range(m + 1)]
    for diagonal in range(m + n - 2, -1, -1):
        for i in range(max(0, diagonal - n + 1), min(diagonal, m - 1) + 1):
            j = diagonal - i
            best = max(table[i + 1][j], table[i][j + 1])
            if a[i] == b[j]:
                best = max(best, table[i + 1][j + 1] + 1)
            table[i][j] = best
    return table[0][0]


def max_subset_sum(weights: Sequence[int], capacity: int) -> SubsetSelection:
    """Pick items whose weights sum as high as possible without exceeding ``capacity``.

    An item is taken only when taking it gives a strictly larger total than
    skipping it, so among equal totals the later items are preferred.
    """
    items = list(weights)
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    if any(weight < 0 for weight in items):
        raise ValueError("weights must not be negative")

    # best[i][s]: best total using items[i:] with room s; take[i][s]: decision.
    best = [[0] * (capacity + 1) for _ in range(len(items) + 1)]
    take = [[False] * (capacity + 1) for _ in range(len(items))]
    for i in reversed(range(len(items))):
        weight = items[i]
        following = best[i + 1]
        for room in range(capacity + 1):
            skipped = following[room]
            taken = weight + following[room - weight] if weight <= room else 0
            if taken > skipped:
                best[i][room] = taken
                take[i][room] = True
            else:
                best[i][room] = skipped

    chosen: list[int] = []
    room = capacity
    for i, weight in enumerate(items):
        if take[i][room]:
            chosen.append(i)
            room -= weight
    return SubsetSelection(total=best[0][capacity], indices=tuple(chosen))