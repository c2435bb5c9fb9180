"""
Algorithm interfaces for the graph library.

Keeps shortest-path and spanning-tree algorithms separate from the graph
storage so each can be swapped or tested on its own.
"""

from abc import ABC, abstractmethod
from typing import List

from graph import Graph


class ShortestPathEngine(ABC):
    """
    Interface for single-source shortest-path computation.
    """

    @abstractmethod
    def distances(self, graph: Graph, source: int) -> List[float]:
        """
        Compute shortest-path costs from source to every vertex.

        Returns:
            List indexed by vertex; UNREACHABLE where no path exists.
        """
        raise NotImplementedError


class SpanningTreeEngine(ABC):
    """
    Interface for minimum-spanning-tree weight computation on undirected graphs.
    """

    @abstractmethod
    def total_weight(self, graph: Graph) -> int:
        """
        Total weight of the minimum spanning tree.

        Returns 0 when the graph does not store both directions of every edge.
        """
        raise NotImplementedError
