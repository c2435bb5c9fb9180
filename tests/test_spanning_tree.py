"""
Unit tests for Prim, Kruskal and the disjoint-set union behind Kruskal.
"""

from pathlib import Path

from adjacency_list_graph import AdjacencyListGraph
from graph_io import create_graph
from spanning_tree import KruskalEngine, PrimEngine
from union_find import DisjointSetUnion


SAMPLE_GRAPH = Path(__file__).parent.parent / "graphs" / "graph.txt"


def square() -> AdjacencyListGraph:
    """Edges 0-1 (1), 1-2 (2), 2-3 (1), 0-3 (4)."""
    return AdjacencyListGraph.from_matrix(
        [
            [0, 1, 0, 4],
            [1, 0, 2, 0],
            [0, 2, 0, 1],
            [4, 0, 1, 0],
        ]
    )


def test_prim_and_kruskal_on_square():
    g = square()

    assert g.prim() == 4
    assert g.kruskal() == 4


def test_prim_and_kruskal_on_sample_graph():
    g = create_graph(SAMPLE_GRAPH)

    assert g.is_undirected_graph() is True
    assert PrimEngine().total_weight(g) == 33
    assert KruskalEngine().total_weight(g) == 33


def test_directed_graph_soft_fails_to_zero(caplog):
    """A graph missing reverse edges gets 0 rather than an exception."""
    g = AdjacencyListGraph.from_matrix([[0, 5], [0, 0]])

    with caplog.at_level("WARNING"):
        assert g.prim() == 0
        assert g.kruskal() == 0

    assert "not undirected" in caplog.text


def test_empty_graph_has_zero_weight():
    g = AdjacencyListGraph(0)

    assert g.prim() == 0
    assert g.kruskal() == 0


def test_disconnected_graph_prim_spans_vertex_zero_component_only():
    # 0-1 (3) and 2-3 (5)
    g = AdjacencyListGraph.from_matrix(
        [
            [0, 3, 0, 0],
            [3, 0, 0, 0],
            [0, 0, 0, 5],
            [0, 0, 5, 0],
        ]
    )

    assert g.prim() == 3
    assert g.kruskal() == 8


def test_weight_one_helper_graph():
    g = AdjacencyListGraph(4)
    for u, v in [(0, 1), (1, 2), (2, 3), (3, 0), (0, 2)]:
        g._add_undirected_edge(u, v)

    assert g.prim() == 3
    assert g.kruskal() == 3


def test_dsu_find_and_union():
    dsu = DisjointSetUnion(5)

    assert dsu.union(0, 1) is True
    assert dsu.union(2, 1) is True
    assert dsu.union(0, 2) is False
    assert dsu.find(0) == dsu.find(2) == 1
    assert dsu.find(3) == 3
    assert dsu.find(4) != dsu.find(0)


def test_dsu_compresses_paths():
    dsu = DisjointSetUnion(4)
    dsu.union(0, 1)
    dsu.union(1, 2)
    dsu.union(2, 3)
    # chain 0 -> 1 -> 2 -> 3 before compression
    assert dsu.parent[0] == 1

    assert dsu.find(0) == 3
    assert dsu.parent[0] == 3
    assert dsu.parent[1] == 3
    assert dsu.parent[3] == -1
