"""Undirected graphs stored as adjacency lists of incident edges."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Edge:
    """An undirected edge between two named vertices, optionally weighted."""

    v1: str
    v2: str
    weight: Optional[int] = None

    def __str__(self) -> str:
        weight = "" if self.weight is None else self.weight
        return f"[{self.v1}{self.v2}{weight}]"


class ListGraph:
    """Named vertices, each keeping its incident edges in insertion order."""

    def __init__(self) -> None:
        self._incidence: dict[str, list[tuple[str, Edge]]] = {}
        self._edges: list[Edge] = []

    def add_vertex(self, name: str) -> None:
        if name in self._incidence:
            raise ValueError(f"vertex already exists: {name!r}")
        self._incidence[name] = []

    def _require(self, name: str) -> list[tuple[str, Edge]]:
        try:
            return self._incidence[name]
        except KeyError:
            raise KeyError(f"no such vertex: {name!r}") from None

    def add_edge(self, v1: str, v2: str, weight: Optional[int] = None) -> Edge:
        """Connect ``v1`` and ``v2`` and return the new edge."""
        first, second = self._require(v1), self._require(v2)
        edge = Edge(v1, v2, weight)
        self._edges.append(edge)
        first.append((v2, edge))
        second.append((v1, edge))
        return edge

    def vertices(self) -> list[str]:
        return list(self._incidence)

    def edges(self) -> list[Edge]:
        """Return the edges in the order they were added."""
        return list(self._edges)

    def incident(self, name: str) -> list[tuple[str, Edge]]:
        """Return (neighbour, edge) pairs for ``name`` in insertion order."""
        return list(self._require(name))

    def format(self) -> str:
        """Render each vertex followed by its neighbours (and weights)."""
        lines = []
        for name, entries in self._incidence.items():
            parts = [
                f"[{other}]" if edge.weight is None else f"[{other}, {edge.weight}]"
                for other, edge in entries
            ]
            lines.append(" ".join([f"[{name}] :", *parts]))
        return "\n".join(lines)

    def _neighbours(self, name: str) -> list[str]:
        return [other for other, _ in self._incidence[name]]

    def dfs_recursive(self, start: str) -> list[str]:
        """Depth-first order from ``start`` following insertion order."""
        self._require(start)
        order: list[str] = []
        visited: set[str] = set()

        def visit(v: str) -> None:
            visited.add(v)
            order.append(v)
            for w in self._neighbours(v):
                if w not in visited:
                    visit(w)

        visit(start)
        return order

    def dfs_iterative(self, start: str) -> list[str]:
        """Depth-first order from ``start`` driven by an explicit stack."""
        self._require(start)
        stack = [start]
        visited = {start}
        order = [start]
        while stack:
            nxt = next((w for w in self._neighbours(stack[-1]) if w not in visited), None)
            if nxt is None:
                stack.pop()
            else:
                visited.add(nxt)
                order.append(nxt)
                stack.append(nxt)
        return order

    def bfs(self, start: str) -> list[str]:
        """Breadth-first order from ``start`` following insertion order."""
        self._require(start)
        visited = {start}
        order = [start]
        queue = deque([start])
        while queue:
            for w in self._neighbours(queue.popleft()):
                if w not in visited:
                    visited.add(w)
                    order.append(w)
                    queue.append(w)
        return order

    def edges_by_weight(self) -> list[Edge]:
        """Return the edges ordered by weight using selection sort."""
        edges = list(self._edges)
        if any(edge.weight is None for edge in edges):
            raise ValueError("every edge needs a weight")
        for i in range(len(edges) - 1):
            least = min(range(i, len(edges)), key=lambda j: edges[j].weight)
            edges[i], edges[least] = edges[least], edges[i]
        return edges