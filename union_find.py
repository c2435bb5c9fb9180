"""
Disjoint-set union over vertices 0 .. n-1.
"""

from typing import List


class DisjointSetUnion:
    """
    Array-backed disjoint sets with path compression (no rank heuristic).

    parent[v] == -1 marks v as the root of its set.
    """

    def __init__(self, n: int) -> None:
        self.parent: List[int] = [-1] * n

    def find(self, v: int) -> int:
        """Representative of v's set; points every vertex on the path at it."""
        root = v
        while self.parent[root] >= 0:
            root = self.parent[root]

        while v != root:
            next_v = self.parent[v]
            self.parent[v] = root
            v = next_v

        return root

    def union(self, x: int, y: int) -> bool:
        """
        Attach x's root under y's root.

        Returns False if x and y were already in the same set.
        """
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False
        self.parent[root_x] = root_y
        return True
