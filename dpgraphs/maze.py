"""Breadth-first search on character mazes: shortest routes and monster escapes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

__all__ = [
    "MazeSearch",
    "Escape",
    "parse_grid",
    "neighbours",
    "search_maze",
    "escape_monsters",
]

Cell = tuple[int, int]

WALL = "#"
START = "S"
FINISH = "F"
PERSON = "A"
MONSTER = "M"

# Down, left, up, right: the order in which neighbours are explored.
_STEPS = ((1, 0), (0, -1), (-1, 0), (0, 1))


def parse_grid(lines: Iterable[str]) -> tuple[str, ...]:
    """Turn text lines into grid rows, dropping whitespace and blank lines."""
    rows = tuple("".join(line.split()) for line in lines)
    rows = tuple(row for row in rows if row)
    _check_rectangular(rows)
    return rows


def _check_rectangular(rows: Sequence[str]) -> None:
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("grid rows must all have the same length")


def _rows(grid: Sequence[str]) -> tuple[str, ...]:
    rows = tuple(grid)
    _check_rectangular(rows)
    return rows


def neighbours(grid: Sequence[str], cell: Cell) -> list[Cell]:
    """Open cells next to ``cell``, in the order down, left, up, right."""
    height = len(grid)
    width = len(grid[0]) if height else 0
    row, col = cell
    found = []
    for d_row, d_col in _STEPS:
        r, c = row + d_row, col + d_col
        if 0 <= r < height and 0 <= c < width and grid[r][c] != WALL:
            found.append((r, c))
    return found


def _locate(rows: Sequence[str], mark: str) -> Cell:
    cells = [
        (r, c) for r, row in enumerate(rows) for c, char in enumerate(row) if char == mark
    ]
    if not cells:
        raise ValueError(f"grid has no {mark!r} cell")
    # The last occurrence wins, as when the grid is scanned row by row.
    return cells[-1]


@dataclass(frozen=True)
class MazeSearch:
    """Result of a breadth-first search from the start cell.

    ``distances`` holds -1 for cells never reached. ``ways`` accumulates,
    for each cell, the counts of the already visited neighbours seen while
    the cell was expanded; the start cell begins at 1.
    """

    grid: tuple[str, ...]
    start: Cell
    finish: Cell
    distances: tuple[tuple[int, ...], ...]
    ways: tuple[tuple[int, ...], ...]
    parents: Mapping[Cell, Cell]
    reachable: bool

    @property
    def visited(self) -> tuple[tuple[bool, ...], ...]:
        """Which cells the search reached."""
        return tuple(tuple(d != -1 for d in row) for row in self.distances)

    @property
    def distance(self) -> int | None:
        """Length of the shortest route to the finish, or None if there is none."""
        if not self.reachable:
            return None
        row, col = self.finish
        return self.distances[row][col]

    def path(self) -> tuple[Cell, ...]:
        """Cells of a shortest route from start to finish, both included."""
        if not self.reachable:
            raise ValueError("the finish cannot be reached from the start")
        route = [self.finish]
        while route[-1] != self.start:
            route.append(self.parents[route[-1]])
        route.reverse()
        return tuple(route)


def search_maze(grid: Sequence[str]) -> MazeSearch:
    """Search from the ``S`` cell towards the ``F`` cell, avoiding ``#`` walls."""
    rows = _rows(grid)
    start = _locate(rows, START)
    finish = _locate(rows, FINISH)
    width = len(rows[0])

    distances = [[-1] * width for _ in rows]
    ways = [[0] * width for _ in rows]
    parents: dict[Cell, Cell] = {}
    reachable = False

    distances[start[0]][start[1]] = 0
    ways[start[0]][start[1]] = 1
    queue = deque([start])
    while queue:
        top = queue.popleft()
        top_row, top_col = top
        for cell in neighbours(rows, top):
            row, col = cell
            if distances[row][col] == -1:
                parents[cell] = top
                distances[row][col] = distances[top_row][top_col] + 1
                queue.append(cell)
                if cell == finish:
                    reachable = True
            else:
                ways[top_row][top_col] += ways[row][col]

    return MazeSearch(
        grid=rows,
        start=start,
        finish=finish,
        distances=tuple(tuple(row) for row in distances),
        ways=tuple(tuple(row) for row in ways),
        parents=parents,
        reachable=reachable,
    )


@dataclass(frozen=True)
class Escape:
    """Whether the person can reach the border before any monster.

    ``path`` spells the moves with the letters U, D, L and R.
    """

    escaped: bool
    distance: int | None
    path: str


def _route(parents: Mapping[Cell, Cell], origin: Cell, end: Cell) -> str:
    moves = []
    current = end
    while current != origin:
        previous = parents[current]
        if previous[0] == current[0] + 1:
            moves.append("U")
        elif previous[0] == current[0] - 1:
            moves.append("D")
        elif previous[1] == current[1] + 1:
            moves.append("L")
        else:
            moves.append("R")
        current = previous
    return "".join(reversed(moves))


def escape_monsters(grid: Sequence[str]) -> Escape:
    """Find a route for ``A`` to the border that no ``M`` can cut off.

    The person and all monsters spread out together; a cell belongs to
    whoever reaches it first, with ties going to whoever comes first in
    row-by-row order.
    """
    rows = _rows(grid)
    people = [
        (r, c) for r, row in enumerate(rows) for c, char in enumerate(row) if char == PERSON
    ]
    if len(people) != 1:
        raise ValueError(f"grid must hold exactly one {PERSON!r} cell, found {len(people)}")
    person = people[0]

    owner: dict[Cell, str] = {}
    distance: dict[Cell, int] = {}
    parents: dict[Cell, Cell] = {}
    queue: deque[Cell] = deque()
    for r, row in enumerate(rows):
        for c, char in enumerate(row):
            if char in (PERSON, MONSTER):
                owner[(r, c)] = char
                distance[(r, c)] = 0
                queue.append((r, c))

    while queue:
        top = queue.popleft()
        for cell in neighbours(rows, top):
            if cell not in owner:
                owner[cell] = owner[top]
                distance[cell] = distance[top] + 1
                if owner[top] == PERSON:
                    parents[cell] = top
                queue.append(cell)

    height, width = len(rows), len(rows[0])
    for r, row in enumerate(rows):
        for c, char in enumerate(row):
            on_border = r in (0, height - 1) or c in (0, width - 1)
            if on_border and char != WALL and owner.get((r, c)) == PERSON:
                return Escape(
                    escaped=True,
                    distance=distance[(r, c)],
                    path=_route(parents, person, (r, c)),
                )
    return Escape(escaped=False, distance=None, path="")