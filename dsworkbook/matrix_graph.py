"""Undirected graphs stored as adjacency matrices, with DFS and BFS."""

from __future__ import annotations

from collections import deque

DEFAULT_CAPACITY = 10


class MatrixGraph:
    """An undirected, unweighted graph on numbered vertices.

    Vertices are numbered consecutively from ``first``. At most
    ``capacity`` vertices can be added.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, first: int = 0) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._first = first
        self._matrix: list[list[int]] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def first(self) -> int:
        return self._first

    def __len__(self) -> int:
        return len(self._matrix)

    def add_vertex(self) -> int:
        """Add a vertex and return its number."""
        if len(self._matrix) >= self._capacity:
            raise OverflowError("graph is full")
        for row in self._matrix:
            row.append(0)
        self._matrix.append([0] * (len(self._matrix) + 1))
        return self._first + len(self._matrix) - 1

    def _index(self, vertex: int) -> int:
        if not self._first <= vertex < self._first + len(self._matrix):
            raise IndexError(f"no such vertex: {vertex}")
        return vertex - self._first

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        i, j = self._index(u), self._index(v)
        self._matrix[i][j] = self._matrix[j][i] = 1

    def has_edge(self, u: int, v: int) -> bool:
        return bool(self._matrix[self._index(u)][self._index(v)])

    def vertices(self) -> list[int]:
        """Return the vertex numbers in ascending order."""
        return list(range(self._first, self._first + len(self._matrix)))

    def rows(self) -> list[list[int]]:
        """Return a copy of the adjacency matrix."""
        return [list(row) for row in self._matrix]

    def format(self) -> str:
        """Render the matrix, each entry preceded by a space, one row per line."""
        return "\n".join("".join(f" {x}" for x in row) for row in self._matrix)

    def _neighbours(self, vertex: int) -> list[int]:
        row = self._matrix[self._index(vertex)]
        return [w for w, flag in zip(self.vertices(), row) if flag]

    def dfs_recursive(self, start: int) -> list[int]:
        """Depth-first order from ``start``, lower-numbered neighbours first."""
        self._index(start)
        order: list[int] = []
        visited: set[int] = set()

        def visit(v: int) -> None:
            visited.add(v)
            order.append(v)
            for w in self._neighbours(v):
                if w not in visited:
                    visit(w)

        visit(start)
        return order

    def dfs_iterative(self, start: int) -> list[int]:
        """Depth-first order from ``start`` driven by an explicit stack."""
        self._index(start)
        stack = [start]
        visited = {start}
        order = [start]
        while stack:
            top = stack[-1]
            nxt = next((w for w in self._neighbours(top) if w not in visited), None)
            if nxt is None:
                stack.pop()
            else:
                visited.add(nxt)
                order.append(nxt)
                stack.append(nxt)
        return order

    def bfs(self, start: int) -> list[int]:
        """Breadth-first order from ``start``, lower-numbered neighbours first."""
        self._index(start)
        visited = {start}
        order = [start]
        queue = deque([start])
        while queue:
            v = queue.popleft()
            for w in self._neighbours(v):
                if w not in visited:
                    visited.add(w)
                    order.append(w)
                    queue.append(w)
        return order