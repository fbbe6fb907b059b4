"""Convert between characters and their numeric codes."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

_C_SPACE = b" \t\n\v\f\r"
_FORMATS = {10: "d", 16: "x", 8: "o"}
_INTEGER = re.compile(rb"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _as_bytes(text: str | bytes) -> bytes:
    if isinstance(text, str):
        return text.encode("utf-8", "surrogateescape")
    return bytes(text)


def char_codes(text: str | bytes, base: int = 10) -> list[str]:
    """Return the code of each non-whitespace byte of ``text`` in base 10, 16 or 8.

    Bytes are signed; negative codes are shown in two's complement in bases 16 and 8.
    """
    try:
        spec = _FORMATS[base]
    except KeyError:
        raise ValueError(f"unsupported base: {base}") from None
    codes = []
    for byte in _as_bytes(text):
        if byte in _C_SPACE:
            continue
        value = byte - 256 if byte >= 128 else byte
        if base != 10:
            value &= 0xFFFFFFFF
        codes.append(format(value, spec))
    return codes


def int_chars(text: str | bytes) -> bytes:
    """Return, for each leading whitespace-separated integer, its low byte and a newline.

    Reading stops at the first token that is not an integer or does not fit in 32 bits.
    """
    data = _as_bytes(text)
    out = bytearray()
    pos = 0
    while (match := _INTEGER.match(data, pos)) is not None:
        value = int(match.group(1))
        if not _INT_MIN <= value <= _INT_MAX:
            break
        out += bytes((value & 0xFF,)) + b"\n"
        pos = match.end()
    return bytes(out)


def _read_stdin() -> bytes:
    stream = getattr(sys.stdin, "buffer", None)
    if stream is not None:
        return stream.read()
    return _as_bytes(sys.stdin.read())


def _print_codes(base: int) -> int:
    sys.stdout.write("".join(code + "\n" for code in char_codes(_read_stdin(), base)))
    return 0


def char2dec_main(argv: Sequence[str] | None = None) -> int:
    """Print the decimal code of each character on standard input."""
    return _print_codes(10)


def char2hex_main(argv: Sequence[str] | None = None) -> int:
    """Print the hexadecimal code of each character on standard input."""
    return _print_codes(16)


def char2oct_main(argv: Sequence[str] | None = None) -> int:
    """Print the octal code of each character on standard input."""
    return _print_codes(8)


def int2char_main(argv: Sequence[str] | None = None) -> int:
    """Print the character for each integer on standard input."""
    data = int_chars(_read_stdin())
    stream = getattr(sys.stdout, "buffer", None)
    if stream is None:
        sys.stdout.write(data.decode("latin-1"))
        return 0
    sys.stdout.flush()
    stream.write(data)
    stream.flush()
    return 0