"""Infix-to-postfix conversion and postfix evaluation."""

from __future__ import annotations

import string
from collections.abc import Iterable

_LETTERS = frozenset(string.ascii_letters)
_PRECEDENCE = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1}


def precedence(operator: str) -> int:
    """Return the binding strength of ``operator``, or -1 for anything else."""
    return _PRECEDENCE.get(operator, -1)


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression over single-letter operands to postfix.

    Operators of equal precedence, ``^`` included, group from the left.
    Any character that is neither a letter nor a parenthesis is handled
    as an operator.
    """
    stack: list[str] = []
    output: list[str] = []
    for char in expression:
        if char in _LETTERS:
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
        else:
            while stack and precedence(char) <= precedence(stack[-1]):
                output.append(stack.pop())
            stack.append(char)
    output.extend(reversed(stack))
    return "".join(output)


def _truncating_division(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


def evaluate_postfix(expression: str, operands: Iterable[int]) -> int:
    """Evaluate a postfix expression whose letters take ``operands`` in turn.

    Each operator applies the top of the stack to the element beneath it
    (``top op below``); division truncates toward zero. Characters that
    are neither letters nor ``+ - * /`` are ignored.
    """
    values = iter(operands)
    stack: list[int] = []
    for char in expression:
        if char.isalpha():
            try:
                stack.append(next(values))
            except StopIteration:
                raise ValueError("not enough operands for the expression") from None
        elif char in "+-*/":
            if len(stack) < 2:
                raise ValueError(f"operator {char!r} lacks operands")
            top = stack.pop()
            below = stack.pop()
            if char == "+":
                stack.append(top + below)
            elif char == "-":
                stack.append(top - below)
            elif char == "*":
                stack.append(top * below)
            else:
                if below == 0:
                    raise ZeroDivisionError("division by zero")
                stack.append(_truncating_division(top, below))
    if not stack:
        raise ValueError("expression yields no value")
    return stack[-1]