"""Single-source and all-pairs shortest paths on adjacency matrices."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

INF = 1000
"""Weight that marks a missing edge."""

_SEPARATOR = "=" * 32

Matrix = list[list[int]]


@dataclass(frozen=True)
class DijkstraStep:
    """Distances and visited flags as they stood before one selection."""

    step: int
    distances: tuple[int, ...]
    visited: tuple[bool, ...]

    def __str__(self) -> str:
        dist = "".join(" * " if d >= INF else f"{d:2d} " for d in self.distances)
        flags = "".join("T  " if seen else "F  " for seen in self.visited)
        return f"STEP {self.step}. {dist}\nvisit : {flags}"


def _size(graph: Sequence[Sequence[int]]) -> int:
    n = len(graph)
    if any(len(row) != n for row in graph):
        raise ValueError("the weight matrix must be square")
    return n


def dijkstra(graph: Sequence[Sequence[int]], start: int) -> tuple[list[int], list[DijkstraStep]]:
    """Return the shortest distances from ``start`` and the state at every step.

    ``graph`` holds edge weights, with ``INF`` where there is no edge.
    """
    n = _size(graph)
    if not 0 <= start < n:
        raise IndexError(f"no such vertex: {start}")
    dist = list(graph[start])
    visited = [False] * n
    visited[start] = True
    steps: list[DijkstraStep] = []
    for number in range(1, n + 1):
        steps.append(DijkstraStep(number, tuple(dist), tuple(visited)))
        candidates = [i for i, seen in enumerate(visited) if not seen and dist[i] < 2 * INF]
        u = min(candidates, key=dist.__getitem__, default=0)
        visited[u] = True
        for v, weight in enumerate(graph[u]):
            if not visited[v] and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist, steps


def floyd(graph: Sequence[Sequence[int]]) -> Matrix:
    """Return the matrix of shortest distances between every pair of vertices."""
    n = _size(graph)
    dist = [list(row) for row in graph]
    for k in range(n):
        through = dist[k]
        for row in dist:
            via = row[k]
            for j in range(n):
                if via + through[j] < row[j]:
                    row[j] = via + through[j]
    return dist


def format_distances(graph: Sequence[Sequence[int]]) -> str:
    """Render a weight matrix between separator lines, ``*`` marking INF."""
    rows = [
        "".join("  * " if value >= INF else f"{value:3d} " for value in row)
        for row in graph
    ]
    return "\n".join([_SEPARATOR, *rows, _SEPARATOR])