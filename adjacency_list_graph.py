"""
Concrete directed, weighted graph implementation.

Implements the Graph interface with a list of per-vertex edge lists and
exposes every structural query and algorithm as a method.

Start-vertex policy shared by dfs, bfs, dijkstra, floyd_warshall and
bellman_ford: a negative start raises IndexViolation, a start at or beyond
vertex_count returns an empty list.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, TextIO, Tuple

from graph import Edge, Graph
from errors import IndexViolation, LoadError
from weight_matrix import read_weight_matrix
from dijkstra_engine import SimpleDijkstraEngine
from floyd_warshall_engine import FloydWarshallEngine
from bellman_ford_engine import BellmanFordEngine
from spanning_tree import KruskalEngine, PrimEngine, is_undirected
import traversal

logger = logging.getLogger(__name__)


class AdjacencyListGraph(Graph):
    """
    Directed, weighted graph backed by vertex -> [(weight, target), ...] lists.

    Duplicate edges between the same pair are kept as separate entries.
    """

    def __init__(self, vertex_count: int = 0) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex_count must be non-negative, got {vertex_count}")
        self._adj: List[List[Edge]] = [[] for _ in range(vertex_count)]

    # --- Construction --------------------------------------------------------

    @classmethod
    def from_vertex_count(cls, n: int) -> AdjacencyListGraph:
        """Graph with n vertices and no edges."""
        return cls(n)

    @classmethod
    def from_matrix(cls, rows: Sequence[Sequence[int]]) -> AdjacencyListGraph:
        """
        Build from a square weight matrix: nonzero rows[i][j] is edge i -> j.
        """
        n = len(rows)
        if any(len(row) != n for row in rows):
            raise ValueError("weight matrix must be square")

        graph = cls(n)
        for i, row in enumerate(rows):
            for j, weight in enumerate(row):
                if weight:
                    graph._adj[i].append(Edge(weight, j))
        return graph

    @classmethod
    def from_weight_matrix(cls, source: TextIO) -> AdjacencyListGraph:
        """
        Read a graph in weight-matrix text format from a stream.

        Raises LoadError on unreadable or malformed input; the error's
        `graph` attribute holds an empty graph.
        """
        try:
            rows = read_weight_matrix(source)
        except LoadError as exc:
            exc.graph = cls()
            raise
        graph = cls.from_matrix(rows)
        logger.debug(f"loaded graph with {graph.vertex_count} vertices and {graph.count_edges()} edges")
        return graph

    def _add_undirected_edge(self, u: int, v: int) -> None:
        """Add u -> v and v -> u, both with weight 1."""
        self._adj[u].append(Edge(1, v))
        self._adj[v].append(Edge(1, u))

    def clear(self) -> None:
        """Drop every vertex and edge."""
        self._adj = []

    # --- Graph interface -----------------------------------------------------

    @property
    def vertex_count(self) -> int:
        return len(self._adj)

    def edges(self, vertex: int) -> List[Edge]:
        return list(self._adj[vertex])  # defensive copy

    # --- Structural queries --------------------------------------------------

    def count_edges(self) -> int:
        """Number of stored directed edges; an undirected edge counts twice."""
        return sum(len(edges) for edges in self._adj)

    def count_in_out_degrees(self) -> List[Tuple[int, int]]:
        """(in-degree, out-degree) for every vertex."""
        in_degree = [0] * self.vertex_count
        for edges in self._adj:
            for edge in edges:
                in_degree[edge.target] += 1
        return [(in_degree[v], len(self._adj[v])) for v in range(self.vertex_count)]

    def is_undirected_graph(self) -> bool:
        return is_undirected(self)

    # --- Traversal -----------------------------------------------------------

    def _accepts_start(self, start: int) -> bool:
        if start < 0:
            raise IndexViolation(start, self.vertex_count)
        return start < self.vertex_count

    def dfs(self, start: int) -> List[int]:
        if not self._accepts_start(start):
            return []
        return traversal.depth_first_order(self, start)

    def bfs(self, start: int) -> List[int]:
        if not self._accepts_start(start):
            return []
        return traversal.breadth_first_order(self, start)

    def has_cycle(self) -> bool:
        return traversal.has_cycle(self)

    def is_connected(self) -> bool:
        """Strong connectivity: every vertex reaches every other vertex."""
        return traversal.is_connected(self)

    def count_weakly_connected_components(self) -> int:
        """Components of the graph with edge directions ignored."""
        undirected = AdjacencyListGraph(self.vertex_count)
        for u, edges in enumerate(self._adj):
            for edge in edges:
                undirected._add_undirected_edge(u, edge.target)
        return traversal.count_components(undirected)

    # --- Shortest paths ------------------------------------------------------

    def dijkstra(self, start: int) -> List[float]:
        """Distances from start; weights must be non-negative."""
        if not self._accepts_start(start):
            return []
        return SimpleDijkstraEngine().distances(self, start)

    def floyd_warshall(self, start: int) -> List[float]:
        if not self._accepts_start(start):
            return []
        return FloydWarshallEngine().distances(self, start)

    def bellman_ford(self, start: int) -> List[float]:
        """Distances from start, or all NEGATIVE_CYCLE if a negative cycle is reachable."""
        if not self._accepts_start(start):
            return []
        return BellmanFordEngine().distances(self, start)

    # --- Minimum spanning tree -----------------------------------------------

    def prim(self) -> int:
        return PrimEngine().total_weight(self)

    def kruskal(self) -> int:
        return KruskalEngine().total_weight(self)
