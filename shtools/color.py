"""Wrap text in terminal colour escape sequences."""

from __future__ import annotations

import shutil
import sys
from collections.abc import Sequence

PROG = "color"

COLORS: dict[str, str] = {
    "black": "\x1b[0;30m",
    "red": "\x1b[0;31m",
    "green": "\x1b[0;32m",
    "orange": "\x1b[0;33m",
    "blue": "\x1b[0;34m",
    "purple": "\x1b[0;35m",
    "cyan": "\x1b[0;36m",
    "lgray": "\x1b[0;37m",
    "lgrey": "\x1b[0;37m",
    "dgray": "\x1b[1;30m",
    "dgrey": "\x1b[1;30m",
    "lred": "\x1b[1;31m",
    "lgreen": "\x1b[1;32m",
    "yellow": "\x1b[1;33m",
    "lblue": "\x1b[1;34m",
    "lpurple": "\x1b[1;35m",
    "lcyan": "\x1b[1;36m",
    "white": "\x1b[1;37m",
}

CLEAR = "\x1b[0m"


def color_code(name: str) -> str:
    """Return the escape sequence for colour ``name``; raise ValueError if unknown."""
    try:
        return COLORS[name]
    except KeyError:
        names = ", ".join(sorted(COLORS))
        raise ValueError(f"incorrect color given. color must be one of: {names}.") from None


def main(argv: Sequence[str] | None = None) -> int:
    """Print the arguments, or standard input, in the given colour."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        sys.stdout.write(f"{PROG}: no argument given\n")
        return 1
    try:
        code = color_code(args[0])
    except ValueError as exc:
        sys.stdout.write(f"{PROG}: {exc}\n")
        return 1

    sys.stdout.write(code)
    if len(args) == 1:
        sys.stdout.flush()
        shutil.copyfileobj(sys.stdin, sys.stdout)
    else:
        for text in args[1:]:
            sys.stdout.write(text + "\n")
    sys.stdout.write(CLEAR)
    return 0