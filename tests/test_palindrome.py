import io

import pytest

from drillbox.palindrome import is_palindrome, main, reverse_word


def test_reverse_word():
    assert reverse_word("abc") == "cba"


@pytest.mark.parametrize("word", ["", "a", "hello world", "12345"])
def test_reverse_twice_is_identity(word):
    assert reverse_word(reverse_word(word)) == word


@pytest.mark.parametrize("word", ["racecar", "level", "12321", "", "x"])
def test_palindromes(word):
    assert is_palindrome(word) is True


@pytest.mark.parametrize("word", ["hello", "ab", "Level"])
def test_non_palindromes(word):
    assert is_palindrome(word) is False


def test_main_palindrome(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("level\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert 'The word "level" backwards is "level"' in out
    assert "This means it's a palindrome!" in out


def test_main_not_palindrome(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("ab\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert 'The word "ab" backwards is "ba"' in out
    assert "It's not a palindrome..." in out