import io
import random

import pytest

from drillbox.guess_number import check_guess, main


def test_correct_guess():
    assert check_guess(42, 42) == "Congratulations! You found that the answer is 42"


@pytest.mark.parametrize(
    "offset, message",
    [
        (1, "Ooh, close! Just a little lower..."),
        (15, "Ooh, close! Just a little lower..."),
        (16, "That's too high! Try something lower."),
        (-1, "Almost there! Try going slightly higher..."),
        (-15, "Almost there! Try going slightly higher..."),
        (-16, "That's too low! Try a much higher number."),
    ],
)
def test_hint_boundaries(offset, message):
    assert check_guess(50 + offset, 50) == message


def test_main_plays_until_found(monkeypatch, capsys):
    monkeypatch.setattr(random, "randint", lambda low, high: 42)
    monkeypatch.setattr("sys.stdin", io.StringIO("10\nabc\n50\n42\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "That's too low! Try a much higher number." in out
    assert "Ooh, close! Just a little lower..." in out
    assert out.rstrip().endswith("Congratulations! You found that the answer is 42")