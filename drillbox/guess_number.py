"""Guess a random number from 1 to 100 with hints."""

from __future__ import annotations

import random
from collections.abc import Sequence

CLOSE_RANGE = 15


def check_guess(guess: int, answer: int) -> str:
    """Return the hint for a guess against the answer."""
    if guess == answer:
        return f"Congratulations! You found that the answer is {answer}"
    if answer < guess <= answer + CLOSE_RANGE:
        return "Ooh, close! Just a little lower..."
    if answer - CLOSE_RANGE <= guess < answer:
        return "Almost there! Try going slightly higher..."
    if guess > answer:
        return "That's too high! Try something lower."
    return "That's too low! Try a much higher number."


def main(argv: Sequence[str] | None = None) -> int:
    """Play one round until the number is found."""
    answer = random.randint(1, 100)
    print(answer)
    guess = None
    try:
        while guess != answer:
            try:
                guess = int(input("Type any number between 1-100: ").strip())
            except ValueError:
                continue
            print(check_guess(guess, answer))
    except EOFError:
        return 1
    return 0