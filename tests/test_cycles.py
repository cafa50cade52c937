import pytest

from dpgraphs.cycles import find_directed_cycle


def _is_closed_walk(cycle, edges):
    edge_set = set(edges)
    steps = zip(cycle, cycle[1:] + cycle[:1])
    return all(step in edge_set for step in steps)


def test_acyclic_graph_has_no_cycle():
    result = find_directed_cycle(4, [(1, 2), (2, 3), (1, 3), (3, 4)])
    assert result.has_cycle is False
    assert result.cycle == ()


def test_diamond_cross_edge_is_not_a_cycle():
    result = find_directed_cycle(4, [(1, 2), (1, 3), (2, 4), (3, 4)])
    assert not result.has_cycle


def test_triangle_cycle_found():
    edges = [(1, 2), (2, 3), (3, 1)]
    result = find_directed_cycle(3, edges)
    assert result.has_cycle
    assert result.cycle == (1, 2, 3)
    assert _is_closed_walk(result.cycle, edges)


def test_cycle_starts_at_back_edge_target():
    edges = [(1, 2), (2, 3), (3, 4), (4, 2)]
    result = find_directed_cycle(4, edges)
    assert result.cycle[0] == 2
    assert sorted(result.cycle) == [2, 3, 4]
    assert _is_closed_walk(result.cycle, edges)


def test_self_loop_is_a_cycle_of_one():
    result = find_directed_cycle(3, [(1, 2), (2, 2)])
    assert result.cycle == (2,)


def test_cycle_in_later_component_is_found():
    edges = [(1, 2), (3, 4), (4, 5), (5, 3)]
    result = find_directed_cycle(5, edges)
    assert set(result.cycle) == {3, 4, 5}
    assert _is_closed_walk(result.cycle, edges)


def test_parents_follow_tree_edges():
    edges = [(1, 2), (2, 3), (1, 4), (5, 4)]
    result = find_directed_cycle(5, edges)
    assert set(result.parents) == {1, 2, 3, 4, 5}
    for node, parent in result.parents.items():
        if parent is not None:
            assert (parent, node) in edges
    assert result.parents[1] is None
    assert result.parents[5] is None


def test_out_of_range_node_rejected():
    with pytest.raises(ValueError):
        find_directed_cycle(2, [(1, 3)])


def test_empty_graph():
    result = find_directed_cycle(0, [])
    assert result.cycle == ()
    assert dict(result.parents) == {}