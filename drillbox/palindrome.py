"""Reverse a word and tell whether it is a palindrome."""

from __future__ import annotations

from collections.abc import Sequence


def reverse_word(word: str) -> str:
    """Return the word backwards."""
    return word[::-1]


def is_palindrome(word: str) -> bool:
    """Return whether the word reads the same backwards."""
    return reverse_word(word) == word


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for a word and report whether it is a palindrome."""
    try:
        word = input("Type any word or numbers to verify if it's a palindrome or not: ")
    except EOFError:
        return 1
    print(f'The word "{word}" backwards is "{reverse_word(word)}"')
    if is_palindrome(word):
        print("This means it's a palindrome!")
    else:
        print("It's not a palindrome...")
    return 0