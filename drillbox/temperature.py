"""Convert temperatures between Celsius and Fahrenheit."""

from __future__ import annotations

from collections.abc import Sequence


def fahrenheit_to_celsius(temp: float) -> float:
    """Convert degrees Fahrenheit to Celsius."""
    return (5.0 / 9.0) * (temp - 32)


def celsius_to_fahrenheit(temp: float) -> float:
    """Convert degrees Celsius to Fahrenheit."""
    return (temp * 1.8) + 32


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for a scale and a value, then print the conversion."""
    try:
        while True:
            mode = input("Is this Celsius or Fahrenheit? Type C or F: ").strip()[:1].lower()
            if mode in ("c", "f"):
                break
        while True:
            try:
                temp = float(input("Type any number value: ").strip())
                break
            except ValueError:
                continue
    except EOFError:
        return 1
    if mode == "c":
        print(f"{format(temp, 'g')} ºC is {format(celsius_to_fahrenheit(temp), 'g')} ºF")
    else:
        print(f"{format(temp, 'g')} ºF is {format(fahrenheit_to_celsius(temp), 'g')} ºC")
    return 0