"""Reverse the order of the digits of a number."""

from __future__ import annotations

from collections.abc import Sequence


def reverse_number(number: int) -> int:
    """Return the digits reversed; zero for numbers that are not positive."""
    if number <= 0:
        return 0
    return int(str(number)[::-1])


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for a number of at least three digits and print it reversed."""
    try:
        while True:
            try:
                number = int(
                    input("Type any positive number that has at least 3 digits: ").strip()
                )
            except ValueError:
                continue
            if number >= 100:
                break
    except EOFError:
        return 1
    print(f"{number} reversed is {reverse_number(number)}")
    return 0