"""Map numbers to Fizz, Buzz, Wizz and friends."""

from __future__ import annotations

import getopt
import sys
from collections.abc import Sequence

from shtools.numparse import InvalidNumber, parse_unsigned

PROG = "fizzbuzz"

DIVISORS: tuple[tuple[int, str], ...] = (
    (3, "Fizz"),
    (5, "Buzz"),
    (7, "Wizz"),
    (9, "Triss"),
    (11, "Yennefer"),
    (13, "Mario"),
    (15, "Claire"),
    (17, "Peach"),
)

USAGE = (
    "Usage: " + PROG + " [OPTION]... [NUMBER]...\n"
    "Map given numbers to Fizz, Buzz, Wizz...\n"
    "\n"
    "  -h        display this help and exit\n"
    "  -p        prepend each line with the number being mapped\n"
)


def fizzbuzz(n: int) -> str:
    """Return the names of every divisor of ``n`` in order, or ``n`` itself if none."""
    names = "".join(name for divisor, name in DIVISORS if n % divisor == 0)
    return names or str(n)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the fizzbuzz command and return its exit status.

    Options are checked as numbers too, ahead of the operands, so any option
    other than -h makes the run fail.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        opts, operands = getopt.gnu_getopt(args, "hp")
    except getopt.GetoptError as exc:
        sys.stderr.write(f"{PROG}: {exc.msg}\n")
        sys.stderr.write(f"Try '{PROG} -h' for more information.\n")
        return 1

    prepend = False
    for flag, _ in opts:
        if flag == "-h":
            sys.stdout.write(USAGE)
            return 0
        prepend = True

    for text in [flag for flag, _ in opts] + operands:
        try:
            number = parse_unsigned(text)
        except InvalidNumber:
            sys.stderr.write(f'given string "{text}" is not a valid number.\n')
            return 1
        prefix = f"{number}: " if prepend else ""
        sys.stdout.write(f"{prefix}{fizzbuzz(number)}\n")
    return 0