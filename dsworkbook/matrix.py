"""Small integer matrices: random generation, transpose, product, display."""

from __future__ import annotations

import random
from collections.abc import Sequence

Matrix = list[list[int]]


def random_matrix(size: int = 3, rng: random.Random | None = None) -> Matrix:
    """Return a square matrix of random entries between -9 and 9."""
    if size < 0:
        raise ValueError("size must not be negative")
    if rng is None:
        rng = random.Random()

    def entry() -> int:
        return rng.randrange(10) if rng.randrange(2) == 0 else -rng.randrange(10)

    return [[entry() for _ in range(size)] for _ in range(size)]


def transpose(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return the transpose of ``matrix``."""
    return [list(column) for column in zip(*matrix)]


def multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the matrix product a x b."""
    if any(len(row) != len(b) for row in a):
        raise ValueError("column count of a must equal row count of b")
    columns = transpose(b)
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render each row between bars, entries three characters wide."""
    return "\n".join(
        " |" + "".join(f"{value:3d} " for value in row) + "|" for row in matrix
    )