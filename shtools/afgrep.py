"""Search for a fixed string with a required alignment inside each line."""

from __future__ import annotations

import getopt
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from shtools.numparse import InvalidNumber, parse_unsigned
from shtools.records import read_records
from shtools.textutil import rfind

PROG = "afgrep"

USAGE = (
    "Usage: " + PROG + " [OPTION]... [FIXEDSTR] [FILE]...\n"
    "Search for FIXEDSTR with given alignment in each FILE.\n"
    "\n"
    "With no FILE, read standard input.\n"
    "To include stdin in the files list, use /dev/stdin.\n"
    "\n"
    "If none of -aex is given, search without alignment.\n"
    "\n"
    "  -a         FIXEDSTR must appear at the beginning of the line\n"
    "  -b COUNT   FIXEDSTR must appear at offset COUNT bytes from the\n"
    "             beginning/end depending on which one of -ae is active.\n"
    "             OFFSET must be an unsigned integer. ignored if -a or -e\n"
    "             not given.\n"
    "  -e         FIXEDSTR must appear at the end of the line\n"
    "  -h         display this help and exit\n"
    "  -i         ignore case\n"
    "  -m COUNT   output at max COUNT lines\n"
    "  -o         print only the matching part, not the whole line\n"
    "  -q         suppress stdout\n"
    "  -v         invert matches\n"
    "  -x         FIXEDSTR must be the whole line\n"
    "  -z         line delimiter is NUL, not newline\n"
    "  -0         line delimiter is NUL, not newline\n"
)

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


@dataclass
class AlignedSearch:
    """A fixed-string search with optional alignment constraints."""

    pattern: str
    begin: bool = False
    end: bool = False
    whole: bool = False
    offset: int = 0
    ignore_case: bool = False
    invert: bool = False
    _needle: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._needle = self._fold(self.pattern)

    def _fold(self, text: str) -> str:
        return text.translate(_ASCII_LOWER) if self.ignore_case else text

    def _aligned(self, hay: str, first: int) -> tuple[bool, int]:
        size = len(hay)
        if not (self.begin or self.end or self.whole):
            return True, first
        if self.whole and size == len(self._needle):
            return True, first
        if self.offset <= size:
            if self.begin and hay.startswith(self._needle, self.offset):
                return True, self.offset
            if self.end:
                limit = size - self.offset
                found = rfind(hay, self._needle, limit)
                if found is not None and found == limit - 1:
                    return True, found
        return False, first

    def match(self, line: str) -> int | None:
        """Return where the reported match starts in ``line``, or None if the line is not selected.

        Lines that do not contain the pattern at all are never selected, even when inverted.
        An empty pattern selects every line.
        """
        if not self.pattern:
            return 0
        hay = self._fold(line)
        first = hay.find(self._needle)
        if first < 0:
            return None
        selected, where = self._aligned(hay, first)
        if self.invert:
            return None if selected else first
        return where if selected else None


def _records(files: Sequence[str], delim: str) -> Iterator[str]:
    if not files:
        yield from read_records(sys.stdin, delim)
        return
    for path in files:
        try:
            handle = open(path, encoding="utf-8", errors="surrogateescape", newline="")
        except FileNotFoundError:
            sys.stderr.write(f"{PROG}: {path}: No such file or directory\n")
            continue
        except OSError as exc:
            sys.stderr.write(f"{PROG}: {path}: Could not open file: fopen: {exc.strerror}\n")
            continue
        with handle:
            yield from read_records(handle, delim)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the afgrep command and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        opts, operands = getopt.gnu_getopt(args, "ab:ehim:oqvxz0")
    except getopt.GetoptError as exc:
        sys.stderr.write(f"{PROG}: {exc.msg}\n")
        sys.stderr.write("Try 'afgrep -h' for more information.\n")
        return 127

    settings = {"begin": False, "end": False, "whole": False, "offset": 0,
                "ignore_case": False, "invert": False}
    delim = "\n"
    limit = 0
    only = quiet = False

    for flag, value in opts:
        if flag == "-a":
            settings["begin"] = True
        elif flag == "-b":
            try:
                settings["offset"] = parse_unsigned(value) & 0xFFFFFFFF
            except InvalidNumber:
                sys.stderr.write(f"{PROG}: invalid number given to option -o\n")
                return 1
        elif flag == "-e":
            settings["end"] = True
        elif flag == "-h":
            sys.stdout.write(USAGE)
            return 0
        elif flag == "-i":
            settings["ignore_case"] = True
        elif flag == "-m":
            try:
                limit = parse_unsigned(value)
            except InvalidNumber:
                sys.stderr.write(f"{PROG}: invalid number given to option -m\n")
                return 1
        elif flag == "-o":
            only = True
        elif flag == "-q":
            quiet = True
        elif flag == "-v":
            settings["invert"] = True
        elif flag == "-x":
            settings["whole"] = True
        elif flag in ("-z", "-0"):
            delim = "\0"

    if not operands:
        sys.stderr.write(f"{PROG}: no pattern given\n")
        return 1

    pattern, *files = operands
    search = AlignedSearch(pattern, **settings)
    matched = False
    count = 0

    for line in _records(files, delim):
        where = search.match(line)
        if where is None:
            continue
        matched = True
        count += 1
        if limit and count > limit:
            return 0
        if quiet:
            continue
        if only:
            if pattern:
                sys.stdout.write(line[where:where + len(pattern)] + delim)
        else:
            sys.stdout.write(line + delim)

    return 0 if matched else 1