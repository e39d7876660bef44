"""Count the vowels and consonants in a line of text."""

from __future__ import annotations

from collections.abc import Sequence

VOWELS = frozenset("aeiou")


def is_vowel(character: str) -> bool:
    """Return whether the character is a lower-case vowel."""
    return character in VOWELS


def count_letters(text: str) -> tuple[int, int]:
    """Return (vowels, consonants) among the ASCII letters of the text."""
    vowels = consonants = 0
    for character in text.lower():
        if character.isascii() and character.isalpha():
            if is_vowel(character):
                vowels += 1
            else:
                consonants += 1
    return vowels, consonants


def main(argv: Sequence[str] | None = None) -> int:
    """Read a line and print its vowel and consonant counts."""
    try:
        text = input("Type anything and press ENTER: ")
    except EOFError:
        return 1
    vowels, consonants = count_letters(text)
    print(f"Vowels: {vowels}")
    print(f"Consonants: {consonants}")
    return 0