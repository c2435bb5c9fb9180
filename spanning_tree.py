"""
Minimum-spanning-tree weight by Prim and Kruskal.

Both engines only make sense on undirected graphs (every edge stored in both
directions with the same weight). Given anything else they log a warning and
return 0 instead of raising; callers that need to tell this apart from a
genuine zero-weight tree should check is_undirected_graph() first.
"""

import heapq
import logging
from typing import List, Tuple

from graph import Graph
from algorithms import SpanningTreeEngine
from union_find import DisjointSetUnion

logger = logging.getLogger(__name__)


def is_undirected(graph: Graph) -> bool:
    """
    True if every edge (w, u -> v) has a matching (w, v -> u).

    Each vertex's edges are hashed once, so duplicates and self-loops give
    the same answer as scanning the reverse adjacency list edge by edge.
    """
    reverse_lookup = [set(graph.edges(v)) for v in range(graph.vertex_count)]
    for u in range(graph.vertex_count):
        for edge in graph.edges(u):
            if (edge.weight, u) not in reverse_lookup[edge.target]:
                return False
    return True


class PrimEngine(SpanningTreeEngine):
    """
    Lazy Prim from vertex 0 with a heap of (weight, vertex) candidates.

    Weights must be non-negative. Only the component containing vertex 0 is
    spanned.
    """

    def total_weight(self, graph: Graph) -> int:
        if not is_undirected(graph):
            logger.warning("prim: graph is not undirected, returning 0")
            return 0
        if graph.vertex_count == 0:
            return 0

        cost = 0
        in_tree = [False] * graph.vertex_count
        pq: List[Tuple[int, int]] = [(0, 0)]

        while pq:
            weight, vertex = heapq.heappop(pq)
            if in_tree[vertex]:
                continue
            in_tree[vertex] = True
            cost += weight

            for edge in graph.edges(vertex):
                if not in_tree[edge.target]:
                    heapq.heappush(pq, (edge.weight, edge.target))

        return cost


class KruskalEngine(SpanningTreeEngine):
    """
    Kruskal over all stored edges sorted by (weight, u, v).

    Each undirected edge appears twice in the edge list; the second copy is
    rejected by the disjoint-set check. On a disconnected graph the result is
    the weight of the minimum spanning forest.
    """

    def total_weight(self, graph: Graph) -> int:
        if not is_undirected(graph):
            logger.warning("kruskal: graph is not undirected, returning 0")
            return 0

        edge_list = sorted(
            (edge.weight, u, edge.target)
            for u in range(graph.vertex_count)
            for edge in graph.edges(u)
        )

        cost = 0
        dsu = DisjointSetUnion(graph.vertex_count)
        for weight, u, v in edge_list:
            if dsu.union(u, v):
                cost += weight

        return cost
