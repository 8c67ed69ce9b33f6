import pytest

from dsworkbook.list_graph import Edge, ListGraph

WEIGHTED = [
    ("a", "b", 29), ("a", "f", 10), ("b", "c", 16), ("b", "g", 15), ("c", "d", 12),
    ("d", "e", 22), ("d", "g", 18), ("e", "f", 27), ("e", "g", 25),
]


def build(edges, weighted=True):
    graph = ListGraph()
    for name in "abcdefg":
        graph.add_vertex(name)
    for v1, v2, w in edges:
        graph.add_edge(v1, v2, w if weighted else None)
    return graph


@pytest.fixture
def graph():
    return build(WEIGHTED)


@pytest.fixture
def plain():
    return build(WEIGHTED, weighted=False)


def test_vertices_and_edges_keep_order(graph):
    assert graph.vertices() == list("abcdefg")
    assert graph.edges() == [Edge(v1, v2, w) for v1, v2, w in WEIGHTED]


def test_incident_lists_both_ends(graph):
    assert [name for name, _ in graph.incident("a")] == ["b", "f"]
    assert graph.incident("a")[0][1] is graph.incident("b")[0][1]


def test_format_weighted_first_line(graph):
    assert graph.format().splitlines()[0] == "[a] : [b, 29] [f, 10]"


def test_format_unweighted_has_line_per_vertex(plain):
    lines = plain.format().splitlines()
    assert len(lines) == 7
    assert lines[0] == "[a] : [b] [f]"


def test_edge_str_uses_source_format():
    assert str(Edge("a", "f", 10)) == "[af10]"


def test_bfs_from_e(plain):
    assert plain.bfs("e") == list("edfgcab")


@pytest.mark.parametrize("start", list("abcdefg"))
def test_dfs_iterative_matches_recursive(plain, start):
    assert plain.dfs_iterative(start) == plain.dfs_recursive(start)


@pytest.mark.parametrize("start", list("abcdefg"))
def test_traversals_cover_all_vertices(plain, start):
    for order in (plain.dfs_recursive(start), plain.bfs(start)):
        assert order[0] == start
        assert sorted(order) == plain.vertices()


def test_dfs_steps_follow_edges(plain):
    order = plain.dfs_recursive("f")
    assert order == list("fabcdeg")
    for k, v in enumerate(order[1:], start=1):
        neighbours = {name for name, _ in plain.incident(v)}
        assert len(neighbours & set(order[:k])) >= 1


def test_edges_by_weight_sorted(graph):
    ordered = graph.edges_by_weight()
    assert [e.weight for e in ordered] == sorted(w for _, _, w in WEIGHTED)
    assert set(ordered) == set(graph.edges())
    assert ordered[0] == Edge("a", "f", 10)


def test_edges_by_weight_leaves_insertion_order(graph):
    graph.edges_by_weight()
    assert graph.edges()[0] == Edge("a", "b", 29)


def test_edges_by_weight_requires_weights(plain):
    with pytest.raises(ValueError):
        plain.edges_by_weight()


def test_duplicate_vertex_rejected(graph):
    with pytest.raises(ValueError):
        graph.add_vertex("a")


def test_edge_to_unknown_vertex_rejected(graph):
    with pytest.raises(KeyError):
        graph.add_edge("a", "z", 1)
    assert len(graph.edges()) == len(WEIGHTED)


def test_traversal_from_unknown_vertex(graph):
    with pytest.raises(KeyError):
        graph.dfs_iterative("z")