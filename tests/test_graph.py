import pytest

from coursenet.graph import Graph

DEMO_EDGES = [(0, 1), (1, 2), (2, 3), (1, 3), (1, 4), (4, 3), (0, 4)]
EXERCISE_EDGES = [(0, 1), (1, 2), (2, 3), (2, 5), (3, 5), (4, 3), (0, 4)]
SMALL_EDGES = [(0, 1), (1, 2), (0, 3), (0, 2)]
TREE_EDGES = [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (4, 6)]


def build(vertices, edges):
    graph = Graph()
    for _ in range(vertices):
        graph.add_vertex()
    for i, j in edges:
        graph.add_edge(i, j)
    return graph


def test_counts_of_small_graph():
    graph = build(4, SMALL_EDGES)
    assert graph.vertex_count() == 4
    assert graph.edge_count() == len(SMALL_EDGES)
    assert len(graph) == 4


def test_add_vertex_returns_new_label():
    graph = Graph()
    assert [graph.add_vertex() for _ in range(3)] == [0, 1, 2]


def test_duplicate_edge_is_ignored():
    graph = build(4, SMALL_EDGES)
    graph.add_edge(1, 0)
    assert graph.edge_count() == len(SMALL_EDGES)


def test_delete_edge_both_directions():
    graph = build(4, SMALL_EDGES)
    graph.delete_edge(2, 0)
    assert not graph.are_adjacent(0, 2)
    assert not graph.are_adjacent(2, 0)
    assert graph.edge_count() == len(SMALL_EDGES) - 1
    graph.delete_edge(2, 0)
    assert graph.edge_count() == len(SMALL_EDGES) - 1


def test_adjacency_is_symmetric():
    graph = build(4, SMALL_EDGES)
    for i, j in SMALL_EDGES:
        assert graph.are_adjacent(i, j)
        assert graph.are_adjacent(j, i)
    assert not graph.are_adjacent(1, 3)


def test_edge_list_matches_input():
    graph = build(4, SMALL_EDGES)
    expected = sorted((min(i, j), max(i, j)) for i, j in SMALL_EDGES)
    assert graph.edge_list() == expected


def test_bfs_demo_order():
    graph = build(5, DEMO_EDGES)
    assert graph.bfs_order(2) == [2, 1, 3, 0, 4]


def test_bfs_distances_never_decrease():
    graph = build(6, EXERCISE_EDGES)
    order = graph.bfs_order(4)
    assert order[0] == 4
    assert sorted(order) == list(range(6))
    lengths = [graph.shortest_path_length(4, v) for v in order]
    assert lengths == sorted(lengths)


def test_dfs_exercise_order():
    graph = build(6, EXERCISE_EDGES)
    assert graph.dfs_order(4) == [4, 3, 5, 2, 1, 0]


def test_dfs_recursive_exercise_order():
    graph = build(6, EXERCISE_EDGES)
    assert graph.dfs_recursive_order(4) == [4, 0, 1, 2, 3, 5]


@pytest.mark.parametrize("source", range(5))
def test_recursive_dfs_enters_from_visited_vertex(source):
    graph = build(5, DEMO_EDGES)
    order = graph.dfs_recursive_order(source)
    assert sorted(order) == list(range(5))
    for position, vertex in enumerate(order[1:], start=1):
        assert any(graph.are_adjacent(vertex, earlier) for earlier in order[:position])


def test_search_stays_in_component():
    graph = build(4, [(0, 1)])
    assert sorted(graph.bfs_order(0)) == [0, 1]
    assert sorted(graph.dfs_order(1)) == [0, 1]
    assert graph.dfs_recursive_order(3) == [3]


@pytest.mark.parametrize(
    "vertices, edges, source, target",
    [(5, DEMO_EDGES, 0, 3), (6, EXERCISE_EDGES, 4, 2), (7, TREE_EDGES, 0, 6)],
)
def test_shortest_path_is_valid(vertices, edges, source, target):
    graph = build(vertices, edges)
    path = graph.shortest_path(source, target)
    assert path[0] == source
    assert path[-1] == target
    assert all(graph.are_adjacent(a, b) for a, b in zip(path, path[1:]))
    assert len(path) == graph.shortest_path_length(source, target) + 1


def test_shortest_path_to_self():
    graph = build(3, [(0, 1)])
    assert graph.shortest_path(1, 1) == [1]
    assert graph.shortest_path_length(1, 1) == 0


def test_unreachable_target():
    graph = build(4, [(0, 1)])
    assert graph.shortest_path(0, 3) == []
    assert graph.shortest_path_length(0, 3) is None


def test_shortest_path_length_across_edge():
    graph = build(6, EXERCISE_EDGES)
    assert graph.shortest_path_length(5, 2) == 1


def test_diameter_is_largest_distance():
    graph = build(7, TREE_EDGES)
    largest = max(
        graph.shortest_path_length(i, j) for i in range(7) for j in range(7)
    )
    assert graph.diameter() == largest


def test_diameter_of_disconnected_graph():
    graph = build(3, [(0, 1)])
    assert graph.diameter() is None


def test_vertices_at_distance_partition():
    graph = build(7, TREE_EDGES)
    seen = []
    for distance in range(7):
        layer = graph.vertices_at_distance(0, distance)
        assert layer == sorted(layer)
        assert all(graph.shortest_path_length(0, v) == distance for v in layer)
        seen.extend(layer)
    assert sorted(seen) == list(range(7))


def test_vertices_at_distance_beyond_reach():
    graph = build(7, TREE_EDGES)
    assert graph.vertices_at_distance(0, 100) == []


def test_bad_vertices_raise():
    graph = build(2, [])
    with pytest.raises(IndexError):
        graph.add_edge(0, 2)
    with pytest.raises(IndexError):
        graph.add_edge(-1, 0)
    with pytest.raises(IndexError):
        graph.bfs_order(5)
    with pytest.raises(IndexError):
        graph.shortest_path(0, 9)