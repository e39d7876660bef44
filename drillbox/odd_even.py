"""Tell whether a whole number is even or odd."""

from __future__ import annotations

from collections.abc import Sequence

_PARITY_NAMES = ("even", "odd")


def parity(number: int) -> str:
    """Return 'even' or 'odd' for a whole number."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected a whole number, got {number!r}")
    remainder = abs(number) % 2
    return _PARITY_NAMES[remainder]


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for a number and print whether it is even or odd."""
    try:
        while True:
            try:
                number = int(input("Type a number: ").strip())
                break
            except ValueError:
                continue
    except EOFError:
        return 1
    print(f"The number {number} is {parity(number)}")
    return 0