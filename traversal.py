"""
Traversal-based queries: DFS, BFS, cycle detection, connectivity.

Depth-first walks use an explicit stack of (vertex, edge iterator) frames
instead of recursion, so graph size is not limited by the interpreter's
recursion depth. The visiting order is the same as the recursive form:
neighbours in adjacency-list order, backtracking when a vertex is exhausted.
"""

from collections import deque
from typing import Iterator, List, Tuple

from graph import Edge, Graph


def _depth_first(graph: Graph, start: int, visited: List[bool]) -> Iterator[int]:
    """
    Yield vertices reachable from start in DFS order, skipping and marking
    entries of `visited`. The caller owns `visited` so it can be shared
    across several walks.
    """
    visited[start] = True
    yield start
    stack: List[Tuple[int, Iterator[Edge]]] = [(start, iter(graph.edges(start)))]

    while stack:
        _, pending = stack[-1]
        for edge in pending:
            if not visited[edge.target]:
                visited[edge.target] = True
                yield edge.target
                stack.append((edge.target, iter(graph.edges(edge.target))))
                break
        else:
            stack.pop()


def depth_first_order(graph: Graph, start: int) -> List[int]:
    """Vertices reachable from start, in depth-first visiting order."""
    visited = [False] * graph.vertex_count
    return list(_depth_first(graph, start, visited))


def breadth_first_order(graph: Graph, start: int) -> List[int]:
    """
    Vertices reachable from start, in breadth-first dequeue order.

    Vertices are marked when enqueued, so nothing is queued twice.
    """
    visited = [False] * graph.vertex_count
    order: List[int] = []
    queue = deque([start])
    visited[start] = True

    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for edge in graph.edges(vertex):
            if not visited[edge.target]:
                visited[edge.target] = True
                queue.append(edge.target)

    return order


def has_cycle(graph: Graph) -> bool:
    """
    True if the directed graph contains a cycle (self-loops included).

    Classic white/gray/black colouring: an edge into a vertex that is still
    on the current DFS path closes a cycle. A vertex leaves the path only
    once all of its outgoing edges have been explored.
    """
    n = graph.vertex_count
    visited = [False] * n
    on_path = [False] * n

    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        on_path[root] = True
        stack: List[Tuple[int, Iterator[Edge]]] = [(root, iter(graph.edges(root)))]

        while stack:
            vertex, pending = stack[-1]
            for edge in pending:
                if on_path[edge.target]:
                    return True
                if not visited[edge.target]:
                    visited[edge.target] = True
                    on_path[edge.target] = True
                    stack.append((edge.target, iter(graph.edges(edge.target))))
                    break
            else:
                on_path[vertex] = False
                stack.pop()

    return False


def is_connected(graph: Graph) -> bool:
    """
    True if a DFS from every vertex reaches all vertices.

    This is strong connectivity checked the expensive way, O(V * (V + E)).
    """
    n = graph.vertex_count
    return all(len(depth_first_order(graph, v)) == n for v in range(n))


def count_components(graph: Graph) -> int:
    """
    Number of DFS launches needed to visit every vertex.

    On a graph that stores both directions of each edge this is the number
    of connected components.
    """
    visited = [False] * graph.vertex_count
    count = 0
    for vertex in range(graph.vertex_count):
        if not visited[vertex]:
            count += 1
            deque(_depth_first(graph, vertex, visited), maxlen=0)
    return count
