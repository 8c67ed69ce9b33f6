import pytest

from dsworkbook.matrix_graph import MatrixGraph


def build(count, edges, first=0, capacity=10):
    graph = MatrixGraph(capacity=capacity, first=first)
    for _ in range(count):
        graph.add_vertex()
    for u, v in edges:
        graph.add_edge(u, v)
    return graph


@pytest.fixture
def small_graph():
    return build(5, [(0, 1), (0, 2), (0, 4), (1, 2), (2, 3), (2, 4), (3, 4)])


@pytest.fixture
def seven_graph():
    return build(
        7,
        [(1, 2), (1, 6), (2, 3), (2, 7), (3, 4), (4, 5), (4, 7), (5, 6), (5, 7)],
        first=1,
    )


def test_add_vertex_returns_consecutive_numbers():
    graph = MatrixGraph(capacity=4, first=1)
    assert [graph.add_vertex() for _ in range(3)] == [1, 2, 3]
    assert graph.vertices() == [1, 2, 3]


def test_add_vertex_beyond_capacity_raises():
    graph = MatrixGraph(capacity=2)
    graph.add_vertex()
    graph.add_vertex()
    with pytest.raises(OverflowError):
        graph.add_vertex()


def test_invalid_capacity():
    with pytest.raises(ValueError):
        MatrixGraph(capacity=0)


def test_add_edge_out_of_range_raises(small_graph):
    with pytest.raises(IndexError):
        small_graph.add_edge(0, 5)


def test_one_based_graph_rejects_zero(seven_graph):
    with pytest.raises(IndexError):
        seven_graph.add_edge(0, 1)


def test_format_two_vertices():
    graph = build(2, [(0, 1)])
    assert graph.format() == " 0 1\n 1 0"


def test_rows_are_symmetric(seven_graph):
    rows = seven_graph.rows()
    assert all(rows[i][j] == rows[j][i] for i in range(7) for j in range(7))
    assert sum(map(sum, rows)) == 2 * 9


def test_rows_is_a_copy(small_graph):
    rows = small_graph.rows()
    rows[0][3] = 1
    assert small_graph.has_edge(0, 3) is False


def test_dfs_recursive_small(small_graph):
    assert small_graph.dfs_recursive(0) == [0, 1, 2, 3, 4]


@pytest.mark.parametrize("start", range(1, 8))
def test_dfs_iterative_matches_recursive(seven_graph, start):
    assert seven_graph.dfs_iterative(start) == seven_graph.dfs_recursive(start)


@pytest.mark.parametrize("start", range(1, 8))
def test_traversals_visit_every_vertex_once(seven_graph, start):
    for order in (seven_graph.dfs_recursive(start), seven_graph.bfs(start)):
        assert order[0] == start
        assert sorted(order) == seven_graph.vertices()


def test_dfs_steps_follow_edges(seven_graph):
    order = seven_graph.dfs_recursive(7)
    for k, v in enumerate(order[1:], start=1):
        assert any(seven_graph.has_edge(u, v) for u in order[:k])


def test_bfs_visits_start_neighbours_first(seven_graph):
    order = seven_graph.bfs(7)
    neighbours = [w for w in seven_graph.vertices() if seven_graph.has_edge(7, w)]
    assert order[1 : 1 + len(neighbours)] == neighbours


def test_disconnected_vertex_not_reached():
    graph = build(3, [(0, 1)])
    assert graph.bfs(0) == [0, 1]
    assert graph.dfs_iterative(2) == [2]


def test_traversal_from_unknown_vertex(small_graph):
    with pytest.raises(IndexError):
        small_graph.bfs(9)