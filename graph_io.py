"""
File loading and plain-text rendering for graphs and their results.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple, Union

from adjacency_list_graph import AdjacencyListGraph
from errors import LoadError
from graph import Edge, Graph, UNREACHABLE

logger = logging.getLogger(__name__)


def create_graph(filename: Union[str, Path]) -> AdjacencyListGraph:
    """
    Load a graph from a weight-matrix file.

    Raises LoadError if the file cannot be opened or is malformed; the
    exception's `graph` attribute is an empty graph.
    """
    path = Path(filename)
    try:
        with path.open() as f:
            graph = AdjacencyListGraph.from_weight_matrix(f)
    except LoadError as exc:
        raise LoadError(f"{path}: {exc}", graph=exc.graph) from exc
    except OSError as exc:
        raise LoadError(f"cannot open {path}: {exc.strerror or exc}", graph=AdjacencyListGraph()) from exc

    logger.debug(f"loaded {path} ({graph.vertex_count} vertices, {graph.count_edges()} edges)")
    return graph


def format_edge(edge: Edge) -> str:
    return f"({edge.weight}, {edge.target})"


def format_adjacency(graph: Graph) -> List[str]:
    """One line per vertex: `i -> (weight, target)  (weight, target)  `."""
    lines = []
    for vertex, edges in enumerate(graph.adjacency()):
        lines.append(f"{vertex} -> " + "".join(f"{format_edge(e)}  " for e in edges))
    return lines


def format_distance(distance: float) -> str:
    return "inf" if distance == UNREACHABLE else str(distance)


def format_path(vertices: Iterable[int]) -> str:
    """Space-separated vertex ids, as printed for DFS/BFS orders."""
    return "".join(f"{v}  " for v in vertices)


def format_degrees(degrees: Sequence[Tuple[int, int]]) -> List[str]:
    lines = ["Vertex  (In, Out):"]
    for vertex, (in_degree, out_degree) in enumerate(degrees):
        lines.append(f"  {vertex}     ({in_degree}, {out_degree})")
    return lines


def format_distances(distances: Sequence[float]) -> List[str]:
    lines = ["Vertex  Distance from source:"]
    for vertex, distance in enumerate(distances):
        lines.append(f"  {vertex}     {format_distance(distance)}")
    return lines


def display(graph: Graph) -> None:
    """Print the adjacency list."""
    for line in format_adjacency(graph):
        print(line)


def print_degrees(degrees: Sequence[Tuple[int, int]]) -> None:
    for line in format_degrees(degrees):
        print(line)


def print_distances(distances: Sequence[float]) -> None:
    for line in format_distances(distances):
        print(line)
