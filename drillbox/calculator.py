"""Four-function calculator working on floating-point numbers."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence


def add(num1: float, num2: float) -> float:
    """Return the sum of two numbers."""
    return num1 + num2


def sub(num1: float, num2: float) -> float:
    """Return the difference of two numbers."""
    return num1 - num2


def mul(num1: float, num2: float) -> float:
    """Return the product of two numbers."""
    return num1 * num2


def div(num1: float, num2: float) -> float:
    """Return the quotient, following IEEE rules for a zero divisor."""
    if num2 == 0:
        if num1 == 0 or math.isnan(num1):
            return math.nan
        return math.copysign(math.inf, num1 * math.copysign(1.0, num2))
    return num1 / num2


_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
}


def calculate(num1: float, num2: float, operation: str) -> float:
    """Apply the operation named by one of '+', '-', '*' or '/'."""
    try:
        func = _OPERATIONS[operation]
    except KeyError:
        raise ValueError(f"unknown operation: {operation!r}") from None
    return func(num1, num2)


def _ask_number(prompt: str) -> float:
    while True:
        try:
            return float(input(prompt).strip())
        except ValueError:
            continue


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for two numbers and an operation, then print the result."""
    try:
        num1 = _ask_number("Type the first number: ")
        num2 = _ask_number("Type the second number: ")
        operation = input("Choose one of the following operations: ").strip()[:1]
    except EOFError:
        return 1
    try:
        result = calculate(num1, num2, operation)
    except ValueError:
        return 0
    print(format(result, "g"))
    return 0