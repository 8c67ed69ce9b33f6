"""Minimum spanning trees: Kruskal with a disjoint set, and Prim."""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterable

from .list_graph import Edge, ListGraph


class DisjointSet:
    """Items grouped into sets, each represented by the root of a parent chain."""

    def __init__(self, items: Iterable[Hashable] = ()) -> None:
        self._parent: dict[Hashable, Hashable | None] = {item: None for item in items}

    def add(self, item: Hashable) -> None:
        self._parent.setdefault(item, None)

    def find(self, item: Hashable) -> Hashable:
        """Return the representative of the set holding ``item``."""
        if item not in self._parent:
            raise KeyError(f"unknown item: {item!r}")
        while (parent := self._parent[item]) is not None:
            item = parent
        return item

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if already joined."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        self._parent[root_b] = root_a
        return True


def kruskal(graph: ListGraph) -> list[Edge]:
    """Return the edges of a minimum spanning tree, in the order chosen."""
    vertices = graph.vertices()
    needed = max(len(vertices) - 1, 0)
    sets = DisjointSet(vertices)
    tree: list[Edge] = []
    for edge in graph.edges_by_weight():
        if len(tree) == needed:
            break
        if sets.union(edge.v1, edge.v2):
            tree.append(edge)
    if len(tree) < needed:
        raise ValueError("graph is not connected")
    return tree


def prim(graph: ListGraph, start: str) -> list[str]:
    """Return the vertices in the order Prim's algorithm adds them."""
    graph.incident(start)
    vertices = graph.vertices()
    dist = {name: math.inf for name in vertices}
    dist[start] = 0
    visited: set[str] = set()
    order: list[str] = []
    for _ in vertices:
        candidates = [name for name in vertices if name not in visited]
        u = min(candidates, key=dist.__getitem__)
        visited.add(u)
        order.append(u)
        for other, edge in graph.incident(u):
            if edge.weight is None:
                raise ValueError("every edge needs a weight")
            if other not in visited and dist[other] > edge.weight:
                dist[other] = edge.weight
    return order