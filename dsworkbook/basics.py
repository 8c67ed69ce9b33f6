"""Introductory exercises: arithmetic, grading, digit loops and brute force."""

from __future__ import annotations

import random
from collections.abc import Iterable
from itertools import product

WEIGHT_RANGE = range(1, 11)


def describe_sum(char: str, a: int, b: int) -> str:
    """Return the sum line followed by a line naming the character."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return f"{a} + {b} = {a + b}\nInput character is {char}."


def shortfall(price: int, count: int, money: int) -> int:
    """Return how much money is missing to buy ``count`` items, or 0."""
    total = price * count
    return total - money if money < total else 0


def _check_score(score: int) -> None:
    if not 0 <= score <= 100:
        raise ValueError(f"wrong input: {score}")


def letter_grade(score: int) -> str:
    """Grade a 0-100 score as A, B, C, D or F."""
    _check_score(score)
    if score >= 90:
        return "A"
    if score >= 80:
        return "B"
    if score >= 70:
        return "C"
    if score >= 60:
        return "D"
    return "F"


def grade_band(score: int) -> str:
    """Grade a 0-100 score as A, B, C or the combined band "D or F"."""
    _check_score(score)
    if score >= 90:
        return "A"
    if score >= 80:
        return "B"
    if score >= 70:
        return "C"
    return "D or F"


def digits_low_first(value: int) -> list[int]:
    """Return the decimal digits of ``value``, least significant first.

    Digits of a negative number carry its sign; zero has no digits.
    """
    sign = -1 if value < 0 else 1
    magnitude = abs(value)
    digits: list[int] = []
    while magnitude:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(sign * digit)
    return digits


def even_odd_sums(n: int) -> tuple[int, int]:
    """Return the sums of the even and of the odd numbers in 1..n."""
    return sum(range(2, n + 1, 2)), sum(range(1, n + 1, 2))


def weight_combinations(target: int) -> list[tuple[int, int, int]]:
    """Find counts (i, j, k), each 1-10, with 2i + 3j + 5k equal to ``target``."""
    return [
        (i, j, k)
        for i, j, k in product(WEIGHT_RANGE, repeat=3)
        if 2 * i + 3 * j + 5 * k == target
    ]


def random_array(size: int = 10, rng: random.Random | None = None) -> list[int]:
    """Return ``size`` random integers between 1 and 100 inclusive."""
    if size < 0:
        raise ValueError("size must not be negative")
    if rng is None:
        rng = random.Random()
    return [rng.randint(1, 100) for _ in range(size)]


def find_max(values: Iterable[int]) -> int:
    """Return the largest value; raise ValueError when there is none."""
    items = list(values)
    if not items:
        raise ValueError("find_max() of an empty sequence")
    largest = items[0]
    for item in items[1:]:
        if item > largest:
            largest = item
    return largest