"""Map the numbers 1 to 7 onto the days of the week."""

from __future__ import annotations

from collections.abc import Sequence

DAYS = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")


def day_name(number: int) -> str:
    """Return the day for a number from 1 (Sunday) to 7 (Saturday)."""
    if not 1 <= number <= len(DAYS):
        raise ValueError("Invalid input!")
    return DAYS[number - 1]


def describe_day(number: int) -> str:
    """Return the sentence naming the day a number represents."""
    return f"The number {number} represents the day {day_name(number)}"


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for a number from 1 to 7 and print its day."""
    try:
        while True:
            try:
                number = int(input("Type any number from 1-7: ").strip())
            except ValueError:
                continue
            if 1 <= number <= 7:
                break
    except EOFError:
        return 1
    print(describe_day(number))
    return 0