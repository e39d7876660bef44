"""Show a factorial together with its expansion."""

from __future__ import annotations

import math
from collections.abc import Sequence


def factorial_expansion(number: int) -> str:
    """Return a line such as '3! = 3 x 2 x 1 = 6'."""
    if number < 1:
        raise ValueError("number must be higher than 0")
    terms = " x ".join(str(i) for i in range(number, 0, -1))
    return f"{number}! = {terms} = {math.factorial(number)}"


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for a positive number and print its factorial."""
    try:
        while True:
            try:
                number = int(input("Type any number higher than 0: ").strip())
            except ValueError:
                continue
            if number > 0:
                break
    except EOFError:
        return 1
    print(factorial_expansion(number))
    return 0