import io
import math

import pytest

from drillbox.calculator import add, calculate, div, main, mul, sub


def test_add_is_commutative():
    assert add(2.5, 4.0) == add(4.0, 2.5)


def test_sub_undoes_add():
    assert sub(add(10.0, 3.5), 3.5) == 10.0


def test_div_undoes_mul():
    assert div(mul(6.0, 3.0), 3.0) == 6.0


@pytest.mark.parametrize(
    "operation, func",
    [("+", add), ("-", sub), ("*", mul), ("/", div)],
)
def test_calculate_dispatches(operation, func):
    assert calculate(9.0, 4.0, operation) == func(9.0, 4.0)


def test_division_by_zero_gives_signed_infinity():
    assert div(1.0, 0.0) == math.inf
    assert div(-1.0, 0.0) == -math.inf


def test_zero_over_zero_is_nan():
    result = div(0.0, 0.0)
    assert repr(result) == "nan"
    assert math.isnan(result) is True


def test_unknown_operation_raises():
    with pytest.raises(ValueError):
        calculate(1.0, 2.0, "%")


def test_main_prints_result(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n5\n-\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.strip().endswith("0")


def test_main_unknown_operation_prints_no_result(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n5\n?\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.endswith("Choose one of the following operations: ")