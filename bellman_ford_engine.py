"""
Bellman-Ford single-source shortest paths with negative-cycle detection.
"""

import logging
from typing import List

from graph import Graph, NEGATIVE_CYCLE, UNREACHABLE
from algorithms import ShortestPathEngine

logger = logging.getLogger(__name__)


class BellmanFordEngine(ShortestPathEngine):
    """
    Bellman-Ford relaxation over every edge, V - 1 times.

    Negative weights are allowed. If any edge can still be relaxed after the
    V - 1 passes, a negative cycle is reachable and the result is a list of
    NEGATIVE_CYCLE (-1) of length V instead of distances.
    """

    def distances(self, graph: Graph, source: int) -> List[float]:
        n = graph.vertex_count
        dist: List[float] = [UNREACHABLE] * n
        dist[source] = 0

        for _ in range(n - 1):
            for u in range(n):
                # Relaxing from an unreachable vertex would only add to infinity.
                if dist[u] == UNREACHABLE:
                    continue
                for edge in graph.edges(u):
                    alt = dist[u] + edge.weight
                    if alt < dist[edge.target]:
                        dist[edge.target] = alt

        for u in range(n):
            if dist[u] == UNREACHABLE:
                continue
            for edge in graph.edges(u):
                if dist[u] + edge.weight < dist[edge.target]:
                    logger.warning(f"negative cycle reachable from vertex {source} (edge {u} -> {edge.target})")
                    return [NEGATIVE_CYCLE] * n

        return dist
