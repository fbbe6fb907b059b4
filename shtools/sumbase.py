"""Sum integers written in a given base."""

from __future__ import annotations

import getopt
import itertools
import sys
from collections.abc import Iterable, Sequence

from shtools.numparse import InvalidNumber
from shtools.records import inputs

PROG = "sumbase"

USAGE = (
    "Usage: " + PROG + " [OPTION]... [NUMBER]...\n"
    "Sum integers in the given base.\n"
    "\n"
    "With no NUMBER, read standard input.\n"
    "\n"
    "  -b BASE   base to use (default: 10)\n"
    "  -d        do not print the delimiter unless on a terminal\n"
    "  -h        display this help and exit\n"
    "  -i        ignore invalid numbers\n"
    "  -z        line delimiter is NUL, not newline\n"
    "  -0        line delimiter is NUL, not newline\n"
)

_C_SPACE = " \t\n\v\f\r"
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_LLONG_MIN = -(2**63)
_LLONG_MAX = 2**63 - 1


class _OutOfRange(InvalidNumber):
    pass


def _wrap(value: int) -> int:
    return (value - _LLONG_MIN) % 2**64 + _LLONG_MIN


def parse_number(text: str, base: int = 10) -> int:
    """Parse the leading integer of ``text``; trailing characters are ignored.

    Raises InvalidNumber if no digits are found or the value does not fit in
    a signed 64-bit integer.
    """
    if base != 0 and not 2 <= base <= 36:
        raise InvalidNumber(f"invalid base: {base}")
    rest = text.lstrip(_C_SPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]

    lowered = rest.lower()
    hex_prefix = lowered.startswith("0x") and lowered[2:3] != "" and lowered[2] in _DIGITS[:16]
    if base in (0, 16) and hex_prefix:
        base, lowered = 16, lowered[2:]
    elif base == 0:
        base = 8 if lowered.startswith("0") else 10

    valid = _DIGITS[:base]
    digits = "".join(itertools.takewhile(lambda ch: ch in valid, lowered))
    if not digits:
        raise InvalidNumber("invalid number given")
    value = sign * int(digits, base)
    if not _LLONG_MIN <= value <= _LLONG_MAX:
        raise _OutOfRange("Numerical result out of range")
    return value


def sum_numbers(texts: Iterable[str], base: int = 10, ignore_invalid: bool = False) -> int:
    """Return the sum of ``texts`` as a wrapping signed 64-bit integer.

    Invalid numbers count as 0 when ``ignore_invalid`` is set, otherwise
    InvalidNumber is raised.
    """
    total = 0
    for text in texts:
        try:
            total += parse_number(text, base)
        except InvalidNumber:
            if not ignore_invalid:
                raise
    return _wrap(total)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sumbase command and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        opts, operands = getopt.gnu_getopt(args, "dhiz0")
    except getopt.GetoptError as exc:
        sys.stderr.write(f"{PROG}: {exc.msg}\n")
        sys.stderr.write(f"Try '{PROG} -h' for more information.\n")
        return 1

    no_delim = ignore = False
    delim = "\n"
    for flag, _ in opts:
        if flag == "-d":
            no_delim = True
        elif flag == "-h":
            sys.stdout.write(USAGE)
            return 0
        elif flag == "-i":
            ignore = True
        else:
            delim = "\0"

    total = 0
    for text in inputs(operands, delim=delim):
        try:
            total += parse_number(text)
        except _OutOfRange as exc:
            sys.stderr.write(f"strtoll: {exc}\n")
            if not ignore:
                return 1
        except InvalidNumber:
            sys.stderr.write(f"{PROG}: invalid number given\n")
            if not ignore:
                return 1
    total = _wrap(total)

    tty = sys.stdout.isatty()
    if not no_delim:
        sys.stdout.write(f"{total}{chr(10) if tty else delim}")
    else:
        sys.stdout.write(f"{total}\n" if tty else f"{total}")
    return 0