"""Rotate a list of numbers to the right."""

from __future__ import annotations

from collections.abc import Sequence

SIZE = 10


def rotate_right(numbers: Sequence[int], steps: int) -> list[int]:
    """Return a copy rotated right by the given steps; no-op for steps <= 0."""
    items = list(numbers)
    if not items or steps <= 0:
        return items
    shift = steps % len(items)
    return items[-shift:] + items[:-shift] if shift else items


def format_numbers(numbers: Sequence[int]) -> str:
    """Return the numbers as '[a, b, c]'."""
    return "[" + ", ".join(str(n) for n in numbers) + "]"


def _ask_in_range(prompt: str, low: int, high: int) -> int:
    while True:
        try:
            value = int(input(prompt).strip())
        except ValueError:
            continue
        if low <= value <= high:
            return value


def main(argv: Sequence[str] | None = None) -> int:
    """Read ten numbers, rotate them and print the result."""
    try:
        numbers = [
            _ask_in_range(f"Type any number from 0-100 for the #{i} entry: ", 0, 100)
            for i in range(1, SIZE + 1)
        ]
        steps = _ask_in_range(
            "How many steps do you want to rotate the array to the right? Type 1-9: ",
            1,
            9,
        )
    except EOFError:
        return 1
    print(format_numbers(rotate_right(numbers, steps)))
    return 0