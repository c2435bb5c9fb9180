"""
Exceptions raised by the graph library.
"""

from typing import Optional

from graph import Graph


class GraphError(Exception):
    """Base class for graph library errors."""


class LoadError(GraphError):
    """
    Weight-matrix source was unreadable or malformed.

    `graph` holds the empty graph the load fell back to, so callers that want
    to carry on can do so without hiding the failure.
    """

    def __init__(self, message: str, graph: Optional[Graph] = None) -> None:
        super().__init__(message)
        self.graph = graph


class IndexViolation(GraphError, IndexError):
    """Start vertex was negative."""

    def __init__(self, vertex: int, vertex_count: int) -> None:
        super().__init__(f"vertex {vertex} is out of range for a graph with {vertex_count} vertices")
        self.vertex = vertex
        self.vertex_count = vertex_count
