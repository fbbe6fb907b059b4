import io

import pytest

from shtools import charcodes


def _stdin(data):
    return io.TextIOWrapper(io.BytesIO(data), encoding="utf-8")


def test_ascii_codes_in_each_base():
    assert charcodes.char_codes("A", 10) == ["65"]
    assert charcodes.char_codes("A", 16) == ["41"]
    assert charcodes.char_codes("A", 8) == ["101"]


def test_whitespace_is_skipped():
    assert charcodes.char_codes("a b\n", 10) == charcodes.char_codes("ab", 10)


def test_round_trip_through_int_chars():
    codes = charcodes.char_codes("hi!", 10)
    assert charcodes.int_chars(" ".join(codes)) == b"h\ni\n!\n"


def test_high_bytes_are_signed_and_round_trip():
    codes = charcodes.char_codes(b"\xff", 10)
    assert int(codes[0]) < 0
    assert charcodes.int_chars(codes[0]) == b"\xff\n"


def test_hex_of_negative_is_twos_complement():
    hex_code = charcodes.char_codes(b"\x80", 16)[0]
    dec_code = charcodes.char_codes(b"\x80", 10)[0]
    assert int(hex_code, 16) == int(dec_code) & 0xFFFFFFFF


def test_unsupported_base():
    with pytest.raises(ValueError):
        charcodes.char_codes("A", 2)


def test_int_chars_stops_at_non_integer():
    assert charcodes.int_chars("65 abc 66") == charcodes.int_chars("65")


def test_int_chars_stops_on_overflow():
    assert charcodes.int_chars("65 99999999999 66") == charcodes.int_chars("65")


def test_char2hex_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", _stdin(b"AB"))
    assert charcodes.char2hex_main([]) == 0
    expected = "".join(c + "\n" for c in charcodes.char_codes("AB", 16))
    assert capsys.readouterr().out == expected


def test_char2dec_and_char2oct_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", _stdin(b"z"))
    assert charcodes.char2dec_main([]) == 0
    assert capsys.readouterr().out == charcodes.char_codes("z", 10)[0] + "\n"
    monkeypatch.setattr("sys.stdin", _stdin(b"z"))
    assert charcodes.char2oct_main([]) == 0
    assert capsys.readouterr().out == charcodes.char_codes("z", 8)[0] + "\n"


def test_int2char_main(monkeypatch):
    out = io.TextIOWrapper(io.BytesIO(), encoding="utf-8")
    monkeypatch.setattr("sys.stdin", _stdin(b"104 105"))
    monkeypatch.setattr("sys.stdout", out)
    assert charcodes.int2char_main([]) == 0
    out.flush()
    assert out.buffer.getvalue() == charcodes.int_chars("104 105")