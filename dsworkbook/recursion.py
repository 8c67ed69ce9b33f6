"""Classic recursive functions: sums, digits, gcd, Fibonacci, Hanoi, powers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


def recursive_sum(n: int) -> int:
    """Return 1 + 2 + ... + n, computed recursively."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return 1 if n == 1 else n + recursive_sum(n - 1)


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")


def digits_high_first(n: int) -> list[int]:
    """Return the decimal digits of ``n``, most significant first."""
    _require_non_negative(n)
    head = digits_high_first(n // 10) if n // 10 > 0 else []
    return [*head, n % 10]


def digits_low_first(n: int) -> list[int]:
    """Return the decimal digits of ``n``, least significant first."""
    _require_non_negative(n)
    tail = digits_low_first(n // 10) if n // 10 > 0 else []
    return [n % 10, *tail]


def recursive_max(values: Iterable[int]) -> int:
    """Return the largest value, found by recursing over the prefix."""
    items = list(values)
    if not items:
        raise ValueError("recursive_max() of an empty sequence")

    def largest_upto(k: int) -> int:
        if k == 0:
            return items[0]
        best = largest_upto(k - 1)
        return items[k] if best < items[k] else best

    return largest_upto(len(items) - 1)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    return a if b == 0 else gcd(b, a % b)


def fibonacci(n: int) -> tuple[int, int]:
    """Return the n-th Fibonacci number and the number of calls it took."""
    _require_non_negative(n)
    calls = 0

    def fib(k: int) -> int:
        nonlocal calls
        calls += 1
        if k < 2:
            return k
        return fib(k - 2) + fib(k - 1)

    return fib(n), calls


@dataclass(frozen=True)
class HanoiMove:
    """One disk moved from one peg to another."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Disk {self.disk} : Move from {self.source} to {self.target}."


def hanoi(disks: int, source: str = "A", spare: str = "B", target: str = "C") -> list[HanoiMove]:
    """Return the moves that carry ``disks`` disks from ``source`` to ``target``."""
    if disks < 1:
        raise ValueError("at least one disk is needed")
    if disks == 1:
        return [HanoiMove(1, source, target)]
    return [
        *hanoi(disks - 1, source, target, spare),
        HanoiMove(disks, source, target),
        *hanoi(disks - 1, spare, source, target),
    ]


def factorial_iterative(n: int) -> int:
    """Return n! with a loop."""
    _require_non_negative(n)
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def factorial_recursive(n: int) -> int:
    """Return n! recursively; n must be at least 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return 1 if n == 1 else n * factorial_recursive(n - 1)


def power(x: int, n: int) -> int:
    """Return x**n by repeated squaring."""
    _require_non_negative(n)
    if n == 0:
        return 1
    if n % 2 == 0:
        return power(x * x, n // 2)
    return x * power(x * x, (n - 1) // 2)