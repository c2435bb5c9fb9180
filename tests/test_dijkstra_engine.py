"""
Unit tests for SimpleDijkstraEngine using AdjacencyListGraph.
"""

import math
from pathlib import Path

from adjacency_list_graph import AdjacencyListGraph
from dijkstra_engine import SimpleDijkstraEngine
from graph import UNREACHABLE
from graph_io import create_graph


SAMPLE_GRAPH = Path(__file__).parent.parent / "graphs" / "graph.txt"


def test_dijkstra_basic_paths():
    # 0 -> 1 (1), 0 -> 2 (4), 1 -> 2 (2)
    g = AdjacencyListGraph.from_matrix([[0, 1, 4], [0, 0, 2], [0, 0, 0]])

    dist = SimpleDijkstraEngine().distances(g, 0)

    assert dist[0] == 0
    assert dist[1] == 1
    # Shortest 0->2 is 0->1->2 with cost 3
    assert dist[2] == 3


def test_dijkstra_unreachable_vertex_is_sentinel():
    g = AdjacencyListGraph.from_matrix([[0, 2, 0], [0, 0, 0], [0, 0, 0]])

    dist = g.dijkstra(0)

    assert dist == [0, 2, UNREACHABLE]
    assert math.isinf(dist[2])


def test_dijkstra_on_sample_graph():
    g = create_graph(SAMPLE_GRAPH)

    assert g.dijkstra(0) == [0, 7, 9, 20, 20, 11]
    assert g.dijkstra(2) == [9, 10, 0, 11, 11, 2]


def test_dijkstra_satisfies_triangle_inequality():
    """No edge can still shorten a finite distance."""
    g = create_graph(SAMPLE_GRAPH)

    for start in range(g.vertex_count):
        dist = g.dijkstra(start)
        assert dist[start] == 0
        for u in range(g.vertex_count):
            for edge in g.edges(u):
                assert dist[edge.target] <= dist[u] + edge.weight


def test_dijkstra_self_loop_and_duplicate_edges():
    g = AdjacencyListGraph(3)
    g._add_undirected_edge(0, 1)
    g._add_undirected_edge(0, 1)
    g._add_undirected_edge(1, 1)

    assert g.dijkstra(1) == [1, 0, UNREACHABLE]
