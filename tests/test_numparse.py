import math

import pytest

from shtools.numparse import (
    InvalidNumber,
    parse_float,
    parse_integer,
    parse_signed,
    parse_unsigned,
)


def test_base_detection():
    assert parse_integer("0x10") == parse_integer("16") == parse_integer("020")
    assert parse_integer("ff", 16) == parse_integer("0xff")
    assert parse_integer("0xff", 16) == parse_integer("255")


def test_sign_and_leading_whitespace():
    assert parse_integer(" -7") == -parse_integer("7")
    assert parse_integer("+42") == parse_integer("42")


def test_empty_text_is_zero():
    assert parse_integer("") == 0


@pytest.mark.parametrize("text", ["12a", "08", "0x", " ", "1 ", "+", "1_0", "abc"])
def test_invalid_integers(text):
    with pytest.raises(InvalidNumber):
        parse_integer(text)


def test_invalid_base():
    with pytest.raises(InvalidNumber):
        parse_integer("1", 1)
    with pytest.raises(InvalidNumber):
        parse_integer("1", 37)


def test_invalid_number_is_value_error():
    with pytest.raises(ValueError):
        parse_signed("nope")


def test_signed_ranges():
    assert parse_signed("127", 8) == 127
    assert parse_signed("-128", 8) == -128
    with pytest.raises(InvalidNumber):
        parse_signed("128", 8)
    assert parse_signed(str(2**63 - 1)) == 2**63 - 1
    with pytest.raises(InvalidNumber):
        parse_signed(str(2**63))


def test_unsigned_wraps_negative():
    assert parse_unsigned("-1") == 2**64 - 1
    assert parse_unsigned("-1", 8) == 255


def test_unsigned_ranges():
    assert parse_unsigned(str(2**64 - 1)) == 2**64 - 1
    with pytest.raises(InvalidNumber):
        parse_unsigned(str(2**64))
    with pytest.raises(InvalidNumber):
        parse_unsigned("256", 8)


def test_parse_float_values():
    assert parse_float("1.5") == 1.5
    assert parse_float("0x1p4") == parse_float("16")
    assert parse_float("  2e3") == parse_float("2000")
    assert parse_float("inf") == math.inf
    assert parse_float("-Infinity") == -math.inf
    assert math.isnan(parse_float("nan"))


@pytest.mark.parametrize("text", ["1e400", "1_0", "1.5 ", "1e", "x", "."])
def test_parse_float_errors(text):
    with pytest.raises(InvalidNumber):
        parse_float(text)