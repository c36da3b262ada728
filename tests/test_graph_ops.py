import pytest

from labkit.graph_ops import Graph, run_program


def _graph(size, edges):
    graph = Graph(size)
    for u, v in edges:
        graph.add_edge(u, v)
    return graph


def test_render_format():
    assert _graph(3, [(0, 1)]).render() == "Vertex 0: 1 \nVertex 1: 0 \nVertex 2: \n"


def test_remove_edge_is_symmetric():
    graph = _graph(3, [(0, 1), (1, 2)])
    graph.remove_edge(1, 0)
    assert graph.adjacency == [set(), {2}, {1}]


def test_complement_of_empty_is_complete():
    graph = Graph(4)
    graph.complement()
    assert all(graph.adjacency[v] == set(range(4)) - {v} for v in range(4))


def test_complement_twice_restores():
    graph = _graph(5, [(0, 1), (2, 4), (3, 4)])
    before = graph.render()
    graph.complement()
    assert graph.render() != before
    graph.complement()
    assert graph.render() == before


def test_union_grows_and_merges():
    graph = _graph(2, [(0, 1)])
    graph.union(_graph(4, [(2, 3), (0, 3)]))
    assert len(graph) == 4
    assert graph.adjacency == [{1, 3}, {0}, {3}, {2, 0}]


def test_intersection_keeps_common_and_clears_extra():
    graph = _graph(4, [(0, 1), (2, 3), (1, 2)])
    graph.intersection(_graph(2, [(0, 1)]))
    assert graph.adjacency == [{1}, {0}, set(), set()]


def test_intersection_with_itself_changes_nothing():
    graph = _graph(4, [(0, 1), (2, 3)])
    copy = _graph(4, [(0, 1), (2, 3)])
    graph.intersection(copy)
    assert graph.render() == copy.render()


def test_reachability():
    graph = _graph(5, [(0, 1), (1, 2), (3, 4)])
    assert graph.is_reachable(0, 2)
    assert graph.is_reachable(2, 2)
    assert not graph.is_reachable(0, 4)


def test_reachability_out_of_range():
    with pytest.raises(IndexError):
        Graph(2).is_reachable(0, 5)


def test_run_program_session():
    text = (
        "G 3 1 0 1 "
        "isReachable 0 2 "
        "union H 3 1 1 2 "
        "isReachable 0 2 "
        "printGraph "
        "end"
    )
    expected = "No\nYes\nVertex 0: 1 \nVertex 1: 0 2 \nVertex 2: 1 \n"
    assert run_program(text) == expected


def test_run_program_complement_and_edges():
    text = "G 3 0 add_edge 0 2 complement printGraph end"
    assert run_program(text) == "Vertex 0: 1 \nVertex 1: 0 2 \nVertex 2: 1 \n"