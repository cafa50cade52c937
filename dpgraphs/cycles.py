"""Cycle detection in directed graphs by depth-first search."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum

from dpgraphs.components import adjacency_list

__all__ = ["CycleSearch", "find_directed_cycle"]


class _Mark(Enum):
    UNSEEN = 0
    ACTIVE = 1
    DONE = 2


@dataclass(frozen=True)
class CycleSearch:
    """Outcome of a cycle search.

    ``cycle`` holds the first cycle found, starting at the node the closing
    back edge points to; it is empty when the graph has no cycle.
    ``parents`` maps each visited node to its DFS parent, or ``None`` for roots.
    """

    cycle: tuple[int, ...]
    parents: Mapping[int, int | None]

    @property
    def has_cycle(self) -> bool:
        """Whether any cycle was found."""
        return bool(self.cycle)


def _unwind(node: int, target: int, parents: Mapping[int, int | None]) -> tuple[int, ...]:
    path = []
    current: int | None = node
    while current is not None and current != target:
        path.append(current)
        current = parents[current]
    path.append(target)
    path.reverse()
    return tuple(path)


def find_directed_cycle(node_count: int, edges: Iterable[tuple[int, int]]) -> CycleSearch:
    """Search the directed graph on nodes ``1..node_count`` for a cycle."""
    graph = adjacency_list(node_count, edges, directed=True)
    marks = [_Mark.UNSEEN] * (node_count + 1)
    parents: dict[int, int | None] = {}
    cycle: tuple[int, ...] = ()

    for root in range(1, node_count + 1):
        if marks[root] is not _Mark.UNSEEN:
            continue
        parents[root] = None
        marks[root] = _Mark.ACTIVE
        stack = [(root, iter(graph[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if marks[neighbour] is _Mark.UNSEEN:
                    parents[neighbour] = node
                    marks[neighbour] = _Mark.ACTIVE
                    stack.append((neighbour, iter(graph[neighbour])))
                    break
                if marks[neighbour] is _Mark.ACTIVE and not cycle:
                    cycle = _unwind(node, neighbour, parents)
            else:
                marks[node] = _Mark.DONE
                stack.pop()

    return CycleSearch(cycle=cycle, parents=parents)