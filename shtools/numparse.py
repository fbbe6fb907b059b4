"""Strict number parsing in the manner of the C ``strto*`` family.

The whole text must be consumed; leading whitespace and a sign are allowed.
"""

from __future__ import annotations

import math
import re

_C_SPACE = " \t\n\v\f\r"
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_FLOAT_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_FLOAT_HEX = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?"
)
_FLOAT_SPECIAL = re.compile(r"([+-]?)(?:(inf(?:inity)?)|(nan(?:\([0-9A-Za-z_]*\))?))", re.I)

_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1


class InvalidNumber(ValueError):
    """Raised when a text is not a valid number or is out of range."""


def _magnitude(text: str, base: int) -> tuple[int, int]:
    """Return ``(sign, magnitude)`` for an integer written in ``text``."""
    if base != 0 and not 2 <= base <= 36:
        raise InvalidNumber(f"invalid base: {base}")
    if text == "":
        return 1, 0

    rest = text.lstrip(_C_SPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]

    lowered = rest.lower()
    has_hex_prefix = (
        lowered.startswith("0x") and len(lowered) > 2 and lowered[2] in _DIGITS[:16]
    )
    if base == 0:
        if has_hex_prefix:
            base, rest = 16, rest[2:]
        elif lowered.startswith("0"):
            base = 8
        else:
            base = 10
    elif base == 16 and has_hex_prefix:
        rest = rest[2:]

    valid = _DIGITS[:base]
    if not rest or any(ch not in valid for ch in rest.lower()):
        raise InvalidNumber(f"invalid number: {text!r}")
    return sign, int(rest, base)


def parse_integer(text: str, base: int = 0) -> int:
    """Parse an integer of any size; ``base`` 0 detects ``0x`` and leading-zero octal."""
    sign, magnitude = _magnitude(text, base)
    return sign * magnitude


def parse_signed(text: str, bits: int = 64) -> int:
    """Parse a signed integer that must fit in ``bits`` bits."""
    value = parse_integer(text)
    low, high = -(2 ** (bits - 1)), 2 ** (bits - 1) - 1
    if not low <= value <= high:
        raise InvalidNumber(f"number out of range: {text!r}")
    return value


def parse_unsigned(text: str, bits: int = 64) -> int:
    """Parse an unsigned integer of ``bits`` bits.

    As with ``strtoul``, a negative value wraps around modulo ``2**bits``.
    """
    sign, magnitude = _magnitude(text, 0)
    limit = 2**bits - 1
    if bits >= 64:
        if magnitude > limit:
            raise InvalidNumber(f"number out of range: {text!r}")
    else:
        value = sign * magnitude
        if not _LONG_MIN <= value <= _LONG_MAX or value > limit:
            raise InvalidNumber(f"number out of range: {text!r}")
    return (sign * magnitude) % (limit + 1)


def parse_float(text: str) -> float:
    """Parse a floating-point number, including hex floats, ``inf`` and ``nan``."""
    if text == "":
        return 0.0
    rest = text.lstrip(_C_SPACE)

    special = _FLOAT_SPECIAL.fullmatch(rest)
    if special:
        negative = special.group(1) == "-"
        value = math.inf if special.group(2) else math.nan
        return -value if negative else value

    if _FLOAT_HEX.fullmatch(rest):
        negative = rest.startswith("-")
        body = rest.lstrip("+-")
        try:
            value = float.fromhex(body)
        except OverflowError as exc:
            raise InvalidNumber(f"number out of range: {text!r}") from exc
        return -value if negative else value

    if _FLOAT_DECIMAL.fullmatch(rest):
        value = float(rest)
        if math.isinf(value):
            raise InvalidNumber(f"number out of range: {text!r}")
        return value

    raise InvalidNumber(f"invalid number: {text!r}")