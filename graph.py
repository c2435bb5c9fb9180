"""
Weighted graph abstraction over integer vertices.

Vertices are 0 .. vertex_count - 1.
Edges are directed: u -> v with integer weight. Undirected graphs store both
directions explicitly.
"""

from abc import ABC, abstractmethod
import math
from typing import NamedTuple, Sequence, Tuple


# Distance reported for vertices that cannot be reached from the source.
UNREACHABLE = math.inf

# Bellman-Ford fills its whole result with this value when a negative cycle is found.
NEGATIVE_CYCLE = -1


class Edge(NamedTuple):
    """Outgoing edge stored in a vertex's adjacency list."""

    weight: int
    target: int


class Graph(ABC):
    """Directed, weighted graph over integer vertices."""

    @property
    @abstractmethod
    def vertex_count(self) -> int:
        """Number of vertices in the graph."""
        raise NotImplementedError

    @abstractmethod
    def edges(self, vertex: int) -> Sequence[Edge]:
        """
        Outgoing edges of a vertex, in insertion order.

        Returns: list[Edge]
        """
        raise NotImplementedError

    def adjacency(self) -> Tuple[Tuple[Edge, ...], ...]:
        """Read-only snapshot of every vertex's outgoing edges."""
        return tuple(tuple(self.edges(v)) for v in range(self.vertex_count))
