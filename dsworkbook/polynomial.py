"""Polynomials stored densely (all coefficients) or sparsely (nonzero terms)."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from itertools import groupby
from operator import attrgetter


@dataclass(frozen=True)
class DensePolynomial:
    """Coefficients listed from the highest degree down to the constant."""

    coefficients: tuple[int, ...]

    def __post_init__(self) -> None:
        coefficients = tuple(self.coefficients)
        if not coefficients:
            raise ValueError("a polynomial needs at least one coefficient")
        object.__setattr__(self, "coefficients", coefficients)

    def degree(self) -> int:
        return len(self.coefficients) - 1

    def __add__(self, other: object) -> DensePolynomial:
        if not isinstance(other, DensePolynomial):
            return NotImplemented
        width = max(len(self.coefficients), len(other.coefficients))
        left = (0,) * (width - len(self.coefficients)) + self.coefficients
        right = (0,) * (width - len(other.coefficients)) + other.coefficients
        return DensePolynomial(tuple(x + y for x, y in zip(left, right)))

    def __str__(self) -> str:
        exponents = range(self.degree(), -1, -1)
        return " + ".join(f"{c:2d}x^{e}" for c, e in zip(self.coefficients, exponents))


@dataclass(frozen=True)
class Term:
    """A single coefficient-exponent pair."""

    coef: int
    expon: int


@dataclass(frozen=True)
class SparsePolynomial:
    """Terms held in strictly decreasing order of exponent."""

    terms: tuple[Term, ...] = ()

    def __post_init__(self) -> None:
        terms = tuple(self.terms)
        if any(t.expon < 0 for t in terms):
            raise ValueError("exponents must not be negative")
        if any(a.expon <= b.expon for a, b in zip(terms, terms[1:])):
            raise ValueError("terms must be in strictly decreasing exponent order")
        object.__setattr__(self, "terms", terms)

    def __add__(self, other: object) -> SparsePolynomial:
        if not isinstance(other, SparsePolynomial):
            return NotImplemented
        merged = heapq.merge(self.terms, other.terms, key=lambda t: -t.expon)
        result = []
        for expon, group in groupby(merged, key=attrgetter("expon")):
            coef = sum(t.coef for t in group)
            if coef:
                result.append(Term(coef, expon))
        return SparsePolynomial(tuple(result))

    def __str__(self) -> str:
        if not self.terms:
            return "0"
        return " + ".join(f"{t.coef:2d}x^{t.expon}" for t in self.terms)