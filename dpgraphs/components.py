"""Connected components of undirected graphs found by BFS or DFS."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass

__all__ = [
    "ComponentReport",
    "adjacency_list",
    "components_bfs",
    "components_dfs",
    "bfs_levels",
    "format_report",
]

Edge = tuple[int, int]


@dataclass(frozen=True)
class ComponentReport:
    """Components in discovery order, each listing its nodes in visiting order.

    ``levels`` maps every reached node to its BFS depth below the node its
    component started from; it is ``None`` when depths were not computed.
    """

    components: tuple[tuple[int, ...], ...]
    levels: Mapping[int, int] | None = None

    @property
    def count(self) -> int:
        """Number of components."""
        return len(self.components)

    @property
    def sizes(self) -> tuple[int, ...]:
        """Size of each component, in the same order as ``components``."""
        return tuple(len(component) for component in self.components)


def adjacency_list(
    node_count: int, edges: Iterable[Edge], directed: bool = False
) -> list[list[int]]:
    """Build adjacency lists indexed by node, for nodes ``0..node_count``.

    Neighbours keep the order in which their edges were given. An
    undirected edge is recorded at both of its ends.
    """
    if node_count < 0:
        raise ValueError(f"node count must not be negative, got {node_count}")
    graph: list[list[int]] = [[] for _ in range(node_count + 1)]
    for a, b in edges:
        for node in (a, b):
            if not 0 <= node <= node_count:
                raise ValueError(f"node {node} is outside 0..{node_count}")
        graph[a].append(b)
        if not directed:
            graph[b].append(a)
    return graph


def _bfs(
    graph: list[list[int]], start: int, seen: set[int], levels: dict[int, int]
) -> list[int]:
    seen.add(start)
    levels[start] = 0
    order = [start]
    queue = deque([start])
    while queue:
        top = queue.popleft()
        for neighbour in graph[top]:
            if neighbour not in seen:
                seen.add(neighbour)
                levels[neighbour] = levels[top] + 1
                order.append(neighbour)
                queue.append(neighbour)
    return order


def _dfs(
    graph: list[list[int]], start: int, seen: set[int], levels: dict[int, int]
) -> list[int]:
    seen.add(start)
    order = [start]
    stack = [iter(graph[start])]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in seen:
                seen.add(neighbour)
                order.append(neighbour)
                stack.append(iter(graph[neighbour]))
                break
        else:
            stack.pop()
    return order


_Traversal = Callable[[list[list[int]], int, set[int], dict[int, int]], list[int]]


def _collect(
    node_count: int, edges: Iterable[Edge], traverse: _Traversal
) -> tuple[tuple[tuple[int, ...], ...], dict[int, int]]:
    graph = adjacency_list(node_count, edges)
    seen: set[int] = set()
    levels: dict[int, int] = {}
    components = tuple(
        tuple(traverse(graph, node, seen, levels))
        for node in range(1, node_count + 1)
        if node not in seen
    )
    return components, levels


def components_bfs(node_count: int, edges: Iterable[Edge]) -> ComponentReport:
    """Split nodes ``1..node_count`` into components, visiting each breadth-first."""
    components, _ = _collect(node_count, edges, _bfs)
    return ComponentReport(components=components)


def components_dfs(node_count: int, edges: Iterable[Edge]) -> ComponentReport:
    """Split nodes ``1..node_count`` into components, visiting each depth-first."""
    components, _ = _collect(node_count, edges, _dfs)
    return ComponentReport(components=components)


def bfs_levels(node_count: int, edges: Iterable[Edge]) -> ComponentReport:
    """Breadth-first components together with each node's depth in its BFS tree."""
    components, levels = _collect(node_count, edges, _bfs)
    return ComponentReport(components=components, levels=levels)


def format_report(report: ComponentReport) -> str:
    """Render a report as the component listing text."""
    lines = [f"no of components : {report.count}", "components :"]
    lines.extend("".join(f"{node}," for node in component) for component in report.components)
    lines.append("size of the components : ")
    lines.extend(f"{index} : {size}" for index, size in enumerate(report.sizes, start=1))
    if report.levels is not None:
        lines.append("depth / level")
        lines.extend(f"{node} : {level}" for node, level in sorted(report.levels.items()))
    return "\n".join(lines) + "\n"