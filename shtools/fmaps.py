"""Map input lines through KEY=VALUE mappings."""

from __future__ import annotations

import getopt
import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

from shtools.records import read_records

PROG = "fmaps"

USAGE = (
    "Usage: fmaps [OPTION]... [MAPPING]...\n"
    "Map standard input according to the given mappings. A MAPPING is in the form [KEY][SEP][VAL].\n"
    "\n"
    "If -d, -e or -s are not given, read the respective environment variables DEF, END and SEP.\n"
    "\n"
    "  -d DEF    set the default output to DEF\n"
    "  -e END    set the end-of-line string to END. default is \\n\n"
    "  -h        display this help and exit\n"
    "  -s SEP    set the mapping separator to SEP. default is =\n"
    "  -z        line delimiter is NUL, not newline\n"
    "  -0        line delimiter is NUL, not newline\n"
)


def parse_mappings(args: Sequence[str], sep: str = "=") -> list[tuple[str, str]]:
    """Split each ``KEY<sep>VALUE`` argument at the first ``sep``.

    Raises ValueError if an argument does not contain ``sep``.
    """
    mappings = []
    for arg in args:
        index = arg.find(sep)
        if index < 0:
            raise ValueError("MAPPING does not contain SEP")
        mappings.append((arg[:index], arg[index + len(sep):]))
    return mappings


@dataclass
class Mapper:
    """Maps lines to values; unmapped lines give the default, or themselves."""

    mappings: Sequence[tuple[str, str]] = field(default_factory=list)
    default: str | None = None
    end: str = "\n"

    def map(self, line: str) -> str:
        """Return the output for ``line``, followed by the end string."""
        for key, value in self.mappings:
            if line == key:
                return value + self.end
        return (line if self.default is None else self.default) + self.end


def main(argv: Sequence[str] | None = None) -> int:
    """Run the fmaps command over standard input and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        opts, operands = getopt.gnu_getopt(args, "d:e:hs:z0")
    except getopt.GetoptError as exc:
        sys.stderr.write(f"{PROG}: {exc.msg}\n")
        sys.stderr.write("Try 'fmaps -h' for more information.\n")
        return 1

    default = end = sep = None
    delim = "\n"
    for flag, value in opts:
        if flag == "-d":
            default = value
        elif flag == "-e":
            end = value
        elif flag == "-h":
            sys.stdout.write(USAGE)
            return 0
        elif flag == "-s":
            sep = value
        elif flag in ("-z", "-0"):
            delim = "\0"

    if default is None:
        default = os.environ.get("DEF")
    if end is None:
        end = os.environ.get("END", "\n")
    if sep is None:
        sep = os.environ.get("SEP", "=")

    try:
        mapper = Mapper(parse_mappings(operands, sep), default, end)
    except ValueError as exc:
        sys.stderr.write(f"{PROG}: {exc}\n")
        return 1

    for record in read_records(sys.stdin, delim):
        if not record and delim == "\0":
            sys.stdout.write(end)
        else:
            sys.stdout.write(mapper.map(record))
    return 0