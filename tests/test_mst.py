import pytest

from dsakit.mst import Edge, kruskal, prim

KRUSKAL_EDGES = [
    Edge(0, 1, 7),
    Edge(0, 2, 4),
    Edge(0, 4, 5),
    Edge(1, 4, 4),
    Edge(1, 3, 2),
    Edge(2, 3, 5),
    Edge(2, 4, 3),
    Edge(3, 4, 3),
]

PRIM_GRAPH = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]


def _spans(tree, vertex_count):
    parents = list(range(vertex_count))

    def find(v):
        while parents[v] != v:
            v = parents[v]
        return v

    for edge in tree:
        a, b = find(edge.source), find(edge.destination)
        if a == b:
            return False
        parents[a] = b
    return len({find(v) for v in range(vertex_count)}) == 1


def _matrix_from_edges(edges, size):
    matrix = [[0] * size for _ in range(size)]
    for edge in edges:
        matrix[edge.source][edge.destination] = edge.cost
        matrix[edge.destination][edge.source] = edge.cost
    return matrix


def test_kruskal_source_example():
    tree = kruskal(KRUSKAL_EDGES, 5)
    assert len(tree) == 4
    assert _spans(tree, 5)
    assert sum(edge.cost for edge in tree) == 12
    assert [edge.cost for edge in tree] == sorted(edge.cost for edge in tree)


def test_kruskal_picks_cheapest_edge_first():
    tree = kruskal(KRUSKAL_EDGES, 5)
    assert tree[0] == Edge(1, 3, 2)


def test_kruskal_trivial_graphs():
    assert kruskal([], 1) == []
    assert kruskal([], 0) == []


def test_kruskal_disconnected_raises():
    with pytest.raises(ValueError):
        kruskal([Edge(0, 1, 1)], 3)


def test_kruskal_vertex_out_of_range_raises():
    with pytest.raises(ValueError):
        kruskal([Edge(0, 5, 1)], 3)


def test_prim_source_example():
    tree = prim(PRIM_GRAPH)
    assert len(tree) == 4
    assert _spans(tree, 5)
    assert [edge.destination for edge in tree] == [1, 2, 3, 4]
    assert sum(edge.cost for edge in tree) == 16
    for edge in tree:
        assert PRIM_GRAPH[edge.source][edge.destination] == edge.cost


def test_prim_total_independent_of_start():
    totals = {sum(edge.cost for edge in prim(PRIM_GRAPH, start)) for start in range(5)}
    assert len(totals) == 1


def test_prim_and_kruskal_agree_on_total_cost():
    matrix = _matrix_from_edges(KRUSKAL_EDGES, 5)
    prim_total = sum(edge.cost for edge in prim(matrix))
    kruskal_total = sum(edge.cost for edge in kruskal(KRUSKAL_EDGES, 5))
    assert prim_total == kruskal_total


def test_prim_disconnected_raises():
    with pytest.raises(ValueError):
        prim([[0, 1, 0], [1, 0, 0], [0, 0, 0]])


def test_prim_rejects_bad_input():
    with pytest.raises(ValueError):
        prim([[0, 1], [1]])
    with pytest.raises(ValueError):
        prim(PRIM_GRAPH, start=7)