"""
Unit tests for Floyd-Warshall and Bellman-Ford, checked against Dijkstra.
"""

from pathlib import Path

import pytest

from adjacency_list_graph import AdjacencyListGraph
from bellman_ford_engine import BellmanFordEngine
from floyd_warshall_engine import FloydWarshallEngine
from graph import NEGATIVE_CYCLE, UNREACHABLE
from graph_io import create_graph


SAMPLE_GRAPH = Path(__file__).parent.parent / "graphs" / "graph.txt"


def non_negative_graphs():
    return [
        create_graph(SAMPLE_GRAPH),
        AdjacencyListGraph.from_matrix([[0, 1, 4], [0, 0, 2], [0, 0, 0]]),
        AdjacencyListGraph.from_matrix(
            [
                [0, 3, 0, 0],
                [0, 0, 0, 1],
                [2, 0, 0, 0],
                [0, 5, 0, 0],
            ]
        ),
        AdjacencyListGraph(2),
    ]


@pytest.mark.parametrize("graph", non_negative_graphs())
def test_all_algorithms_agree_on_non_negative_weights(graph):
    """Dijkstra, Floyd-Warshall and Bellman-Ford give identical distance vectors."""
    for start in range(graph.vertex_count):
        expected = graph.dijkstra(start)
        assert graph.floyd_warshall(start) == expected
        assert graph.bellman_ford(start) == expected


def test_floyd_warshall_all_pairs_matrix():
    # 0 -> 1 (3), 1 -> 2 (1), 2 -> 0 (2)
    g = AdjacencyListGraph.from_matrix([[0, 3, 0], [0, 0, 1], [2, 0, 0]])

    dist = FloydWarshallEngine().all_pairs(g)

    assert dist == [
        [0, 3, 4],
        [3, 0, 1],
        [2, 5, 0],
    ]


def test_floyd_warshall_keeps_unreachable_sentinel():
    g = AdjacencyListGraph.from_matrix([[0, 7], [0, 0]])

    assert g.floyd_warshall(1) == [UNREACHABLE, 0]
    assert g.floyd_warshall(0) == [0, 7]


def test_floyd_warshall_handles_negative_edges():
    # 0 -> 1 (4), 0 -> 2 (5), 2 -> 1 (-3)
    g = AdjacencyListGraph.from_matrix([[0, 4, 5], [0, 0, 0], [0, -3, 0]])

    assert g.floyd_warshall(0) == [0, 2, 5]


def test_bellman_ford_handles_negative_edges():
    g = AdjacencyListGraph.from_matrix([[0, 4, 5], [0, 0, 0], [0, -3, 0]])

    assert BellmanFordEngine().distances(g, 0) == [0, 2, 5]


def test_bellman_ford_reports_negative_cycle():
    # 0 -> 1 (-1), 1 -> 2 (-1), 2 -> 0 (-1)
    g = AdjacencyListGraph.from_matrix([[0, -1, 0], [0, 0, -1], [-1, 0, 0]])

    assert g.bellman_ford(0) == [NEGATIVE_CYCLE] * 3
    assert g.bellman_ford(2) == [-1, -1, -1]


def test_bellman_ford_ignores_unreachable_negative_cycle():
    # 0 -> 1 (2); 2 <-> 3 with weight -1 is never reached from 0
    g = AdjacencyListGraph.from_matrix(
        [
            [0, 2, 0, 0],
            [0, 0, 0, 0],
            [0, 0, 0, -1],
            [0, 0, -1, 0],
        ]
    )

    assert g.bellman_ford(0) == [0, 2, UNREACHABLE, UNREACHABLE]
    assert g.bellman_ford(2) == [NEGATIVE_CYCLE] * 4


def test_single_vertex_graph():
    g = AdjacencyListGraph(1)

    assert g.dijkstra(0) == [0]
    assert g.floyd_warshall(0) == [0]
    assert g.bellman_ford(0) == [0]
