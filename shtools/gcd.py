"""Greatest common divisors of pairs of numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from shtools.numparse import InvalidNumber, parse_unsigned


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b``.

    ``gcd(a, 0)`` is ``a``. ``gcd(0, b)`` for positive ``b`` is undefined here
    and raises ValueError.
    """
    if b == 0:
        return a
    if a == 0:
        raise ValueError(f"gcd(0, {b}) is undefined")
    while b:
        a, b = b, a % b
    return a


def main(argv: Sequence[str] | None = None) -> int:
    """Print the gcd of each consecutive pair of arguments; an odd last one is ignored."""
    args = sys.argv[1:] if argv is None else list(argv)
    for first, second in zip(args[0::2], args[1::2]):
        try:
            a, b = parse_unsigned(first), parse_unsigned(second)
        except InvalidNumber:
            sys.stderr.write("invalid argument\n")
            return 1
        try:
            result = gcd(a, b)
        except ValueError as exc:
            sys.stderr.write(f"gcd: {exc}\n")
            return 1
        sys.stdout.write(f"gcd({a}, {b}) = {result}\n")
    return 0