"""Pick the larger of two numbers."""

from __future__ import annotations

from collections.abc import Sequence


def largest(num1: float, num2: float) -> float:
    """Return the larger number, the second one when they tie."""
    return num1 if num1 > num2 else num2


def _ask_number(prompt: str) -> float:
    while True:
        try:
            return float(input(prompt).strip())
        except ValueError:
            continue


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for two numbers and print the larger."""
    try:
        num1 = _ask_number("Type the first number: ")
        num2 = _ask_number("Type the second number: ")
    except EOFError:
        return 1
    print(f"The largest number is {format(largest(num1, num2), 'g')}")
    return 0