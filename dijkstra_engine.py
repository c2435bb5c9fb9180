"""
Heap-based DijkstraEngine implementation.

Uses Python's heapq to compute single-source shortest paths over any Graph
implementation that satisfies the Graph interface.
"""

from typing import List
import heapq

from graph import Graph, UNREACHABLE
from algorithms import ShortestPathEngine


class SimpleDijkstraEngine(ShortestPathEngine):
    """
    Single-source Dijkstra using a binary heap.

    Edge weights must be non-negative; this is not checked.

    Complexity:
        O(E log V) over the vertices reachable from the source.
    """

    def distances(self, graph: Graph, source: int) -> List[float]:
        dist: List[float] = [UNREACHABLE] * graph.vertex_count
        dist[source] = 0
        pq = [(0, source)]  # priority queue of (distance, vertex)

        while pq:
            d_u, u = heapq.heappop(pq)

            # Skip outdated entries
            if d_u != dist[u]:
                continue

            for edge in graph.edges(u):
                alt = d_u + edge.weight
                if alt < dist[edge.target]:
                    dist[edge.target] = alt
                    heapq.heappush(pq, (alt, edge.target))

        return dist
