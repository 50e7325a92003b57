import pytest

from graphalgos.algorithms import UnionFind, bfs, dfs, dijkstra, kruskal, prim
from graphalgos.graph import Graph, Neighbor


@pytest.fixture
def sample():
    g = Graph(6)
    g.add_edge(0, 1, 4)
    g.add_edge(0, 2, 3)
    g.add_edge(1, 2, 1)
    g.add_edge(1, 3, 2)
    g.add_edge(2, 3, 4)
    g.add_edge(3, 4, 2)
    g.add_edge(4, 5, 6)
    return g


def _edges(g):
    return {(u, n.vertex, n.weight) for u in range(g.num_vertices) for n in g.neighbors(u)}


def _total_entries(g):
    return sum(g.neighbor_count(i) for i in range(g.num_vertices))


def test_bfs(sample):
    tree = bfs(sample, 0)
    assert tree.neighbor_count(0) > 0
    assert tree.neighbor_count(5) == 0


def test_bfs_edges(sample):
    tree = bfs(sample, 0)
    assert _edges(tree) == {(0, 1, 4), (0, 2, 3), (1, 3, 2), (3, 4, 2), (4, 5, 6)}
    assert tree.neighbors(0) == (Neighbor(1, 4), Neighbor(2, 3))


def test_dfs(sample):
    tree = dfs(sample, 0)
    assert tree.neighbor_count(0) > 0
    assert tree.neighbor_count(5) == 0


def test_dfs_edges(sample):
    tree = dfs(sample, 0)
    assert _edges(tree) == {(0, 1, 4), (1, 2, 1), (2, 3, 4), (3, 4, 2), (4, 5, 6)}


def test_dijkstra(sample):
    tree = dijkstra(sample, 0)
    assert tree.neighbor_count(0) > 0
    assert tree.neighbor_count(5) == 0


def test_dijkstra_edges(sample):
    tree = dijkstra(sample, 0)
    assert _edges(tree) == {
        (0, 1, 4),
        (0, 2, 3),
        (2, 3, 4),
        (1, 3, 2),
        (3, 4, 2),
        (4, 5, 6),
    }


def test_prim(sample):
    tree = prim(sample)
    assert _total_entries(tree) == 2 * (tree.num_vertices - 1)


def test_kruskal(sample):
    tree = kruskal(sample)
    assert _total_entries(tree) == 2 * (tree.num_vertices - 1)


def test_spanning_trees_agree(sample):
    expected = {(1, 2, 1), (1, 3, 2), (3, 4, 2), (0, 2, 3), (4, 5, 6)}
    for tree in (prim(sample), kruskal(sample)):
        undirected = {(min(u, v), max(u, v), w) for u, v, w in _edges(tree)}
        assert undirected == expected


def test_traversals_unreachable_vertex():
    g = Graph(4)
    g.add_edge(0, 1, 1)
    g.add_edge(2, 3, 1)
    for algorithm in (bfs, dfs, dijkstra):
        tree = algorithm(g, 0)
        assert _edges(tree) == {(0, 1, 1)}


def test_prim_only_spans_component_of_zero():
    g = Graph(4)
    g.add_edge(0, 1, 5)
    g.add_edge(2, 3, 1)
    assert _edges(prim(g)) == {(0, 1, 5), (1, 0, 5)}


def test_kruskal_builds_forest():
    g = Graph(4)
    g.add_edge(0, 1, 5)
    g.add_edge(2, 3, 1)
    assert _edges(kruskal(g)) == {(0, 1, 5), (1, 0, 5), (2, 3, 1), (3, 2, 1)}


def test_prim_on_empty_graph():
    assert prim(Graph(0)).num_vertices == 0


@pytest.mark.parametrize("algorithm", [bfs, dfs, dijkstra])
def test_invalid_source(sample, algorithm):
    with pytest.raises(ValueError):
        algorithm(sample, 6)
    with pytest.raises(ValueError):
        algorithm(sample, -1)


def test_union_find():
    sets = UnionFind(5)
    assert [sets.find(i) for i in range(5)] == [0, 1, 2, 3, 4]
    sets.unite(0, 1)
    sets.unite(3, 4)
    assert sets.find(0) == sets.find(1)
    assert sets.find(3) == sets.find(4)
    assert sets.find(1) != sets.find(3)
    sets.unite(1, 4)
    assert len({sets.find(i) for i in (0, 1, 3, 4)}) == 1
    assert sets.find(2) == 2


def test_union_find_out_of_range():
    sets = UnionFind(2)
    with pytest.raises(IndexError):
        sets.find(2)