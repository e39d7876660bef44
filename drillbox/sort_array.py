"""Sort five numbers in ascending or descending order."""

from __future__ import annotations

import enum
from collections.abc import Sequence

SIZE = 5


class SortMode(enum.Enum):
    """Order in which to sort, keyed by its letter."""

    ASCENDING = "a"
    DESCENDING = "d"


_LABELS = {
    SortMode.ASCENDING: "ASCENDING ORDER",
    SortMode.DESCENDING: "DESCENDING ORDER",
}


def sort_numbers(numbers: Sequence[int], mode: SortMode | str) -> list[int]:
    """Return the numbers sorted in the given mode ('a', 'd' or a SortMode)."""
    mode = SortMode(mode)
    return sorted(numbers, reverse=mode is SortMode.DESCENDING)


def format_array(numbers: Sequence[int]) -> str:
    """Return the numbers as '[a, b, c]'."""
    return "[" + ", ".join(str(n) for n in numbers) + "]"


def _ask_mode() -> SortMode:
    while True:
        letter = input("Do you want to sort ASC or DESC? Type A or D: ").strip()[:1].lower()
        try:
            return SortMode(letter)
        except ValueError:
            continue


def _ask_int(prompt: str) -> int:
    while True:
        try:
            return int(input(prompt).strip())
        except ValueError:
            continue


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for a sort order and five numbers, then print them before and after."""
    try:
        mode = _ask_mode()
        print(f"The array will be sorted in {_LABELS[mode]}")
        numbers = [
            _ask_int(f"Type any number for the #{i} input: ") for i in range(1, SIZE + 1)
        ]
    except EOFError:
        return 1
    print(format_array(numbers))
    print(format_array(sort_numbers(numbers, mode)))
    return 0