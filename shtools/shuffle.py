"""Repeat a random permutation of input lines forever."""

from __future__ import annotations

import getopt
import random
import sys
from collections.abc import Iterator, Sequence

from shtools.numparse import InvalidNumber, parse_unsigned
from shtools.records import read_records

PROG = "shufr"

USAGE = (
    "Usage: shufr [OPTION]... [FILE]...\n"
    "Repeat a random permutation of the input lines to standard output.\n"
    "\n"
    "With no FILE, read standard input.\n"
    "\n"
    "This program is not suitable for cryptographic use.\n"
    "\n"
    "  -h        display this help and exit\n"
    "  -l COUNT  output at most COUNT lines\n"
    "  -n COUNT  make sure the last COUNT lines have different indices\n"
    "  -r        ignored\n"
    "  -z        line delimiter is NUL, not newline\n"
    "  -0        line delimiter is NUL, not newline\n"
)


def _history_cycles(lines: list[str], nsame: int, rng: random.Random) -> Iterator[str]:
    n = len(lines)
    size = nsame * 2
    history = [-1] * size
    while True:
        picks = []
        while len(picks) < nsame:
            r = rng.randrange(n)
            if r in history:
                picks = []
                continue
            history[nsame + len(picks)] = r
            picks.append(r)
        for i, r in enumerate(picks):
            history[i] = r
            yield lines[r]
        history[nsame:] = [-1] * nsame
        history[:nsame] = history[1:nsame + 1]


def repeat_shuffled(
    lines: Sequence[str], nsame: int = 2, rng: random.Random | None = None
) -> Iterator[str]:
    """Yield lines from a shuffled copy of ``lines`` endlessly.

    Any ``nsame`` consecutive lines come from different input positions. If
    there are fewer lines than ``nsame``, they are yielded once and then
    ValueError is raised. Not suitable for cryptographic use.
    """
    rng = rng or random.Random()
    pool = list(lines)
    n = len(pool)
    if n == 0:
        raise ValueError("no lines to repeat")
    for i in range(n):
        r = rng.randrange(n)
        pool[i], pool[r] = pool[r], pool[i]

    if n < nsame:
        yield from pool
        raise ValueError(f"input line count ({n}) is less than nsame ({nsame})")
    if nsame < 2:
        while True:
            yield pool[rng.randrange(n)]
    if nsame == n:
        while True:
            yield from pool
    yield from _history_cycles(pool, nsame, rng)


def _read_lines(files: Sequence[str], delim: str) -> list[str]:
    if not files:
        return list(read_records(sys.stdin, delim))
    lines: list[str] = []
    for path in files:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            lines.extend(read_records(handle, delim))
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Run the shufr command and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        opts, operands = getopt.gnu_getopt(args, "hl:n:rz0")
    except getopt.GetoptError as exc:
        sys.stderr.write(f"{PROG}: {exc.msg}\n")
        sys.stderr.write("Try 'shufr -h' for more information.\n")
        return 1

    limit: int | None = None
    nsame = 2
    delim = "\n"
    for flag, value in opts:
        if flag == "-h":
            sys.stdout.write(USAGE)
            return 0
        if flag in ("-l", "-n"):
            try:
                number = parse_unsigned(value) & 0xFFFFFFFF
            except InvalidNumber:
                sys.stderr.write(f"{PROG}: invalid number given to option {flag}\n")
                return 1
            if flag == "-l":
                limit = number
            else:
                nsame = number
        elif flag in ("-z", "-0"):
            delim = "\0"

    if limit == 0:
        return 0

    try:
        lines = _read_lines(operands, delim)
    except OSError as exc:
        sys.stderr.write(f"{PROG}: {exc.filename}: {exc.strerror}\n")
        return 1
    if not lines:
        sys.stderr.write(f"{PROG}: no lines to repeat\n")
        return 1

    printed = 0
    try:
        for line in repeat_shuffled(lines, nsame):
            sys.stdout.write(line + delim)
            printed += 1
            if limit is not None and printed == limit:
                return 0
    except ValueError as exc:
        sys.stderr.write(f"{PROG}: {exc}\n")
        return 1
    return 0