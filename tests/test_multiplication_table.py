import io

import pytest

from drillbox.multiplication_table import main, multiplication_table


def test_has_ten_rows_starting_at_zero():
    table = multiplication_table(7)
    assert len(table) == 10
    assert table[0] == "0 x 7 = 0"


def test_rows_are_consistent():
    for i, line in enumerate(multiplication_table(7)):
        left, product = line.split(" = ")
        assert left == f"{i} x 7"
        assert float(product) == i * 7


def test_fractional_number_formatting():
    assert multiplication_table(2.5)[1] == "1 x 2.5 = 2.5"


def test_negative_raises():
    with pytest.raises(ValueError):
        multiplication_table(-1)


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("-3\n3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    lines = out.split("Multiplication table of 3\n", 1)[1].splitlines()
    assert lines == multiplication_table(3)