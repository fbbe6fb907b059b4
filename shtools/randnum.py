"""Generate cryptographically secure 64-bit random numbers."""

from __future__ import annotations

import getopt
import os
import sys
from collections.abc import Iterator, Sequence

from shtools.numparse import InvalidNumber, parse_signed

PROG = "rand"

USAGE = (
    "Usage: " + PROG + " [OPTION]...\n"
    "Generate cryptographically secure 64-bit random numbers on Linux 3.17 or later.\n"
    "\n"
    "On Linux 3.19 or later, " + PROG
    + " might not immediately react to SIGINT depending on CPU load.\n"
    "\n"
    "  -h         display this help and exit\n"
    "  -n COUNT   count of random numbers to generate\n"
    "  -s         generate a signed number\n"
    "\n"
    "Exit Codes\n"
    "   0         Succeeded\n"
    "   1         Interrupted during random number generation\n"
    "   2         An error occurred\n"
)


def random_numbers(count: int = 1, signed: bool = False) -> Iterator[int]:
    """Yield ``count`` secure random 64-bit integers, signed or unsigned."""
    for _ in range(count):
        yield int.from_bytes(os.urandom(8), sys.byteorder, signed=signed)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the rand command and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        opts, _ = getopt.gnu_getopt(args, "hn:s")
    except getopt.GetoptError as exc:
        sys.stderr.write(f"{PROG}: {exc.msg}\n")
        sys.stderr.write(f"Try '{PROG} -h' for more information.\n")
        return 1

    count = 1
    signed = False
    for flag, value in opts:
        if flag == "-h":
            sys.stdout.write(USAGE)
            return 0
        if flag == "-n":
            try:
                parsed = parse_signed(value)
            except InvalidNumber:
                sys.stderr.write(f"{PROG}: invalid number given\n")
                return 1
            count = (parsed + 2**31) % 2**32 - 2**31
        elif flag == "-s":
            signed = True

    try:
        for number in random_numbers(count, signed):
            sys.stdout.write(f"{number}\n")
    except KeyboardInterrupt:
        return 1
    except OSError:
        return 2
    return 0