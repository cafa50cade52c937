import pytest

from dpgraphs.components import (
    ComponentReport,
    adjacency_list,
    bfs_levels,
    components_bfs,
    components_dfs,
    format_report,
)

EDGES = [(1, 2), (1, 3), (2, 4), (3, 5), (5, 4), (6, 7)]
NODES = 8


def _closure(graph, start):
    seen = {start}
    todo = [start]
    while todo:
        node = todo.pop()
        for v in graph[node]:
            if v not in seen:
                seen.add(v)
                todo.append(v)
    return seen


def test_adjacency_list_undirected_records_both_ends():
    graph = adjacency_list(3, [(1, 2), (2, 3)])
    assert graph == [[], [2], [1, 3], [2]]


def test_adjacency_list_directed_records_one_end():
    graph = adjacency_list(3, [(1, 2), (2, 3)], directed=True)
    assert graph == [[], [2], [3], []]


def test_adjacency_list_rejects_out_of_range_node():
    with pytest.raises(ValueError):
        adjacency_list(3, [(1, 4)])


def test_adjacency_list_rejects_negative_count():
    with pytest.raises(ValueError):
        adjacency_list(-1, [])


@pytest.mark.parametrize("finder", [components_bfs, components_dfs, bfs_levels])
def test_components_partition_the_nodes(finder):
    report = finder(NODES, EDGES)
    flat = [node for component in report.components for node in component]
    assert sorted(flat) == list(range(1, NODES + 1))
    assert sum(report.sizes) == NODES
    assert report.count == len(report.components)


@pytest.mark.parametrize("finder", [components_bfs, components_dfs])
def test_each_component_is_a_connected_closure(finder):
    graph = adjacency_list(NODES, EDGES)
    report = finder(NODES, EDGES)
    for component in report.components:
        assert set(component) == _closure(graph, component[0])


@pytest.mark.parametrize("finder", [components_bfs, components_dfs])
def test_components_start_at_smallest_unvisited_node(finder):
    report = finder(NODES, EDGES)
    starts = [component[0] for component in report.components]
    assert starts == sorted(starts)
    assert starts[0] == 1


def test_bfs_order():
    report = components_bfs(NODES, EDGES)
    assert report.components[0] == (1, 2, 3, 4, 5)


def test_dfs_order():
    report = components_dfs(NODES, EDGES)
    assert report.components[0] == (1, 2, 4, 5, 3)


def test_isolated_nodes_are_single_components():
    report = components_dfs(4, [])
    assert report.components == ((1,), (2,), (3,), (4,))
    assert report.levels is None


def test_levels_are_true_bfs_depths():
    report = bfs_levels(NODES, EDGES)
    graph = adjacency_list(NODES, EDGES)
    levels = report.levels
    for component in report.components:
        assert levels[component[0]] == 0
    for a, b in EDGES:
        assert abs(levels[a] - levels[b]) <= 1
    for node, level in levels.items():
        if level > 0:
            assert any(levels[v] == level - 1 for v in graph[node])


def test_levels_on_branching_graph_use_depth_not_pop_count():
    report = bfs_levels(4, [(1, 2), (1, 3), (3, 4)])
    assert report.levels[4] == report.levels[3] + 1
    assert report.levels[2] == report.levels[3]


def test_format_report_layout():
    report = ComponentReport(components=((1, 2), (3,)))
    assert format_report(report) == (
        "no of components : 2\n"
        "components :\n"
        "1,2,\n"
        "3,\n"
        "size of the components : \n"
        "1 : 2\n"
        "2 : 1\n"
    )


def test_format_report_includes_levels():
    report = bfs_levels(2, [(1, 2)])
    text = format_report(report)
    assert text.endswith("depth / level\n1 : 0\n2 : 1\n")