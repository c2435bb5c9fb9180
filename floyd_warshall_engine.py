"""
All-pairs shortest paths by Floyd-Warshall.
"""

from typing import List

from graph import Graph, UNREACHABLE
from algorithms import ShortestPathEngine


class FloydWarshallEngine(ShortestPathEngine):
    """
    Floyd-Warshall over the whole graph; O(V^3) time, O(V^2) memory.

    `distances` computes the full matrix and returns only the source row.
    """

    def all_pairs(self, graph: Graph) -> List[List[float]]:
        """
        Shortest-path cost between every ordered pair of vertices.

        Returns:
            dist[i][j] = cost(i -> j), UNREACHABLE where no path exists.
        """
        n = graph.vertex_count
        dist: List[List[float]] = [[UNREACHABLE] * n for _ in range(n)]

        for i in range(n):
            for edge in graph.edges(i):
                dist[i][edge.target] = edge.weight
            dist[i][i] = 0

        for k in range(n):
            row_k = dist[k]
            for i in range(n):
                d_ik = dist[i][k]
                if d_ik == UNREACHABLE:
                    continue
                row_i = dist[i]
                for j in range(n):
                    if row_k[j] == UNREACHABLE:
                        continue
                    alt = d_ik + row_k[j]
                    if alt < row_i[j]:
                        row_i[j] = alt

        return dist

    def distances(self, graph: Graph, source: int) -> List[float]:
        return self.all_pairs(graph)[source]
