import io
import sys

import pytest

from shtools.numparse import InvalidNumber
from shtools.sumbase import main, parse_number, sum_numbers


def test_parse_decimal():
    assert parse_number("42", 10) == 42
    assert parse_number("  -7", 10) == -7
    assert parse_number("+8", 10) == 8


def test_parse_ignores_trailing_text():
    assert parse_number("12abc", 10) == 12


def test_parse_other_bases():
    assert parse_number("ff", 16) == 0xFF
    assert parse_number("0x1f", 16) == 0x1F
    assert parse_number("0x", 16) == 0
    assert parse_number("010", 0) == 0o10
    assert parse_number("101", 2) == 0b101


@pytest.mark.parametrize("text", ["abc", "", "-", "  "])
def test_parse_invalid(text):
    with pytest.raises(InvalidNumber):
        parse_number(text, 10)


def test_parse_range():
    assert parse_number(str(-(2**63)), 10) == -(2**63)
    with pytest.raises(InvalidNumber):
        parse_number(str(2**63), 10)


def test_parse_bad_base():
    with pytest.raises(InvalidNumber):
        parse_number("1", 37)


def test_sum_numbers_ignoring():
    assert sum_numbers(["5", "x"], 10, True) == 5


def test_sum_numbers_strict_raises():
    with pytest.raises(InvalidNumber):
        sum_numbers(["5", "x"], 10, False)


def test_sum_numbers_wraps():
    assert sum_numbers([str(2**63 - 1), "1"]) == -(2**63)


def test_main_operands(capsys):
    assert main(["1", "2"]) == 0
    assert capsys.readouterr().out == "3\n"


def test_main_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\n4\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "7\n"


def test_main_delimiter_options(capsys):
    assert main(["-d", "5"]) == 0
    assert capsys.readouterr().out == "5"
    assert main(["-z", "5"]) == 0
    assert capsys.readouterr().out == "5\0"


def test_main_invalid_number(capsys):
    assert main(["x"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "invalid number given" in captured.err


def test_main_ignore_invalid(capsys):
    assert main(["-i", "x", "4"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "4\n"
    assert "invalid number given" in captured.err


def test_main_base_option_is_rejected(capsys):
    assert main(["-b", "16"]) == 1
    assert "Try 'sumbase -h'" in capsys.readouterr().err