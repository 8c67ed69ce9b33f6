"""Stack applications: bracket matching, palindromes and postfix notation."""

from __future__ import annotations

import string

from .stack import Stack

_OPENING_FOR = {")": "(", "}": "{", "]": "["}
_OPERATORS = frozenset("+-*/")
_PRECEDENCE = {"(": 0, ")": 0, "+": 1, "-": 1, "*": 2, "/": 2}


def brackets_balanced(text: str) -> bool:
    """Return True when every (), {} and [] in ``text`` is properly nested."""
    stack: Stack[str] = Stack(capacity=max(len(text), 1))
    for ch in text:
        if ch in "({[":
            stack.push(ch)
        elif ch in _OPENING_FOR:
            if stack.is_empty() or stack.pop() != _OPENING_FOR[ch]:
                return False
    return stack.is_empty()


def letters_only(text: str) -> str:
    """Keep the ASCII letters of ``text``, lower-cased."""
    return "".join(ch.lower() for ch in text if ch in string.ascii_letters)


def is_palindrome(text: str) -> bool:
    """Return True when the letters of ``text`` read the same both ways.

    Case and every character that is not an ASCII letter are ignored.
    """
    letters = letters_only(text)
    half = len(letters) // 2
    stack: Stack[str] = Stack(capacity=max(half, 1))
    for ch in letters[:half]:
        stack.push(ch)
    for ch in letters[half + len(letters) % 2:]:
        if stack.pop() != ch:
            return False
    return stack.is_empty()


def precedence(op: str) -> int:
    """Return the binding strength of an operator or parenthesis."""
    try:
        return _PRECEDENCE[op]
    except KeyError:
        raise ValueError(f"not an operator: {op!r}") from None


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression to postfix; whitespace is skipped."""
    stack: Stack[str] = Stack(capacity=len(infix) + 1)
    output: list[str] = []
    for ch in infix:
        if ch.isspace():
            continue
        if ch in _OPERATORS:
            while not stack.is_empty() and precedence(ch) <= precedence(stack.peek()):
                output.append(stack.pop())
            stack.push(ch)
        elif ch == "(":
            stack.push(ch)
        elif ch == ")":
            while True:
                if stack.is_empty():
                    raise ValueError("unmatched ')'")
                top = stack.pop()
                if top == "(":
                    break
                output.append(top)
        else:
            output.append(ch)
    while not stack.is_empty():
        top = stack.pop()
        if top == "(":
            raise ValueError("unmatched '('")
        output.append(top)
    return "".join(output)


def _truncating_divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def evaluate_postfix(postfix: str) -> int:
    """Evaluate a postfix expression of single-digit operands.

    Division truncates toward zero.
    """
    stack: Stack[int] = Stack(capacity=len(postfix) + 1)
    for ch in postfix:
        if ch.isspace():
            continue
        if ch in _OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {ch!r} lacks operands")
            right = stack.pop()
            left = stack.pop()
            if ch == "+":
                stack.push(left + right)
            elif ch == "-":
                stack.push(left - right)
            elif ch == "*":
                stack.push(left * right)
            else:
                if right == 0:
                    raise ZeroDivisionError("division by zero")
                stack.push(_truncating_divide(left, right))
        elif ch in string.digits:
            stack.push(int(ch))
        else:
            raise ValueError(f"invalid operand: {ch!r}")
    if len(stack) != 1:
        raise ValueError("malformed postfix expression")
    return stack.pop()