"""Factorise numbers into primes."""

from __future__ import annotations

import getopt
import sys
from collections.abc import Sequence

from shtools.numparse import InvalidNumber, parse_unsigned

PROG = "factorise"

USAGE = (
    "Usage: factorise [OPTION]... [NUMBER]...\n"
    "Factorise numbers similar to GNU factor, but faster.\n"
    "\n"
    "  -g        emulate GNU factor\n"
    "  -h        display this help and exit\n"
)


def factorise(n: int) -> list[tuple[int, int]]:
    """Return the prime factors of ``n`` as ascending ``(prime, exponent)`` pairs.

    Raises ValueError for numbers below 2.
    """
    if n < 2:
        raise ValueError("invalid argument")
    factors = []
    rest = n
    candidate = 2
    while candidate * candidate <= rest:
        count = 0
        while rest % candidate == 0:
            rest //= candidate
            count += 1
        if count:
            factors.append((candidate, count))
        candidate += 1 if candidate == 2 else 2
    if rest > 1:
        factors.append((rest, 1))
    return factors


def format_factors(n: int) -> str:
    """Return one ``n: prime exponent`` line per prime factor."""
    return "".join(f"{n}: {prime} {exponent}\n" for prime, exponent in factorise(n))


def format_gnu(n: int) -> str:
    """Return the factorisation in the style of GNU factor.

    Numbers below 2 give just ``n:`` with no line end.
    """
    if n < 2:
        return f"{n}:"
    primes = (str(p) for p, exponent in factorise(n) for _ in range(exponent))
    return f"{n}: {' '.join(primes)}\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the factorise command and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        opts, operands = getopt.gnu_getopt(args, "gh")
    except getopt.GetoptError as exc:
        sys.stderr.write(f"{PROG}: {exc.msg}\n")
        sys.stderr.write("Try 'factorise -h' for more information.\n")
        return 1

    gnu = False
    for flag, _ in opts:
        if flag == "-g":
            gnu = True
        elif flag == "-h":
            sys.stdout.write(USAGE)
            return 0

    for text in operands:
        try:
            number = parse_unsigned(text)
        except InvalidNumber:
            sys.stderr.write("invalid number\n")
            return 1
        if gnu:
            sys.stdout.write(format_gnu(number))
        elif number < 2:
            sys.stdout.write("invalid argument\n")
            return 1
        else:
            sys.stdout.write(format_factors(number))
    return 0