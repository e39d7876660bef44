"""Multiplication table from 0 to 9 for a non-negative number."""

from __future__ import annotations

from collections.abc import Sequence


def multiplication_table(number: float) -> list[str]:
    """Return the lines 'i x number = product' for i from 0 to 9."""
    if number < 0:
        raise ValueError("number must be equal or higher than 0")
    shown = format(number, "g")
    return [f"{i} x {shown} = {format(number * i, 'g')}" for i in range(10)]


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for a non-negative number and print its table."""
    try:
        while True:
            try:
                number = float(input("Type any number equal or higher than 0: ").strip())
            except ValueError:
                continue
            if number >= 0:
                break
    except EOFError:
        return 1
    print(f"Multiplication table of {format(number, 'g')}")
    for line in multiplication_table(number):
        print(line)
    return 0