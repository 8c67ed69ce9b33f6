import math

import pytest

from dsworkbook.recursion import (
    HanoiMove,
    digits_high_first,
    digits_low_first,
    factorial_iterative,
    factorial_recursive,
    fibonacci,
    gcd,
    hanoi,
    power,
    recursive_max,
    recursive_sum,
)


@pytest.mark.parametrize("n", [1, 2, 10, 100])
def test_recursive_sum_closed_form(n):
    assert recursive_sum(n) == n * (n + 1) // 2


def test_recursive_sum_rejects_zero():
    with pytest.raises(ValueError):
        recursive_sum(0)


@pytest.mark.parametrize("n", [0, 5, 10, 4321, 90210])
def test_digit_orders(n):
    high = digits_high_first(n)
    assert int("".join(map(str, high))) == n
    assert digits_low_first(n) == list(reversed(high))


def test_digits_reject_negative():
    with pytest.raises(ValueError):
        digits_high_first(-1)


def test_recursive_max():
    values = [3, 17, -2, 17, 9]
    assert recursive_max(values) == max(values)
    with pytest.raises(ValueError):
        recursive_max([])


@pytest.mark.parametrize("a,b", [(12, 18), (17, 5), (0, 9), (100, 75)])
def test_gcd_matches_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)


def test_fibonacci_base_cases():
    assert fibonacci(0) == (0, 1)
    assert fibonacci(1) == (1, 1)


@pytest.mark.parametrize("n", range(2, 15))
def test_fibonacci_recurrences(n):
    value, calls = fibonacci(n)
    v1, c1 = fibonacci(n - 1)
    v2, c2 = fibonacci(n - 2)
    assert value == v1 + v2
    assert calls == c1 + c2 + 1


def test_hanoi_single_disk_text():
    moves = hanoi(1)
    assert [str(m) for m in moves] == ["Disk 1 : Move from A to C."]


@pytest.mark.parametrize("disks", [1, 2, 3, 4, 6])
def test_hanoi_moves_are_legal(disks):
    moves = hanoi(disks, "A", "B", "C")
    assert len(moves) == 2**disks - 1
    pegs = {"A": list(range(disks, 0, -1)), "B": [], "C": []}
    for move in moves:
        assert isinstance(move, HanoiMove)
        disk = pegs[move.source].pop()
        assert disk == move.disk
        assert not pegs[move.target] or pegs[move.target][-1] > disk
        pegs[move.target].append(disk)
    assert pegs["C"] == list(range(disks, 0, -1))


def test_hanoi_rejects_zero():
    with pytest.raises(ValueError):
        hanoi(0)


@pytest.mark.parametrize("n", [1, 2, 5, 12])
def test_factorials_agree(n):
    assert factorial_iterative(n) == math.factorial(n)
    assert factorial_recursive(n) == math.factorial(n)


def test_factorial_edges():
    assert factorial_iterative(0) == math.factorial(0)
    with pytest.raises(ValueError):
        factorial_recursive(0)
    with pytest.raises(ValueError):
        factorial_iterative(-3)


@pytest.mark.parametrize("x,n", [(2, 0), (2, 10), (3, 7), (-5, 3), (7, 1)])
def test_power_matches_operator(x, n):
    assert power(x, n) == x**n


def test_power_rejects_negative_exponent():
    with pytest.raises(ValueError):
        power(2, -1)