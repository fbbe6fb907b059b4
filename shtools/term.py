"""Small terminal helpers: fill the screen, flush input, query pending bytes."""

from __future__ import annotations

import array
import fcntl
import itertools
import shutil
import sys
import termios
from collections.abc import Sequence


def fill(words: Sequence[str], count: int) -> str:
    """Return ``count`` words taken cyclically from ``words``, concatenated."""
    return "".join(itertools.islice(itertools.cycle(words), max(count, 0)))


def bytes_available(fd: int) -> int:
    """Return how many bytes can be read from ``fd`` without blocking."""
    buf = array.array("i", [0])
    fcntl.ioctl(fd, termios.FIONREAD, buf, True)
    return buf[0]


def _write_fill(words: Sequence[str], count: int) -> int:
    try:
        sys.stdout.write(fill(words, count))
        sys.stdout.flush()
    except OSError:
        return 1
    return 0


def fillline_main(argv: Sequence[str] | None = None) -> int:
    """Repeat the arguments until as many have been printed as the terminal is wide."""
    args = sys.argv[1:] if argv is None else list(argv)
    size = shutil.get_terminal_size()
    return _write_fill(args, size.columns)


def fillterm_main(argv: Sequence[str] | None = None) -> int:
    """Repeat the arguments until as many have been printed as the terminal has cells."""
    args = sys.argv[1:] if argv is None else list(argv)
    size = shutil.get_terminal_size()
    return _write_fill(args, size.columns * size.lines)


def flushterm_main(argv: Sequence[str] | None = None) -> int:
    """Discard pending terminal input and output; return 1 on failure."""
    try:
        termios.tcflush(sys.stdin.fileno(), termios.TCIOFLUSH)
    except (OSError, ValueError, termios.error):
        return 1
    return 0


def fionread_main(argv: Sequence[str] | None = None) -> int:
    """Print the number of bytes waiting on standard input.

    Exits 0 if there are some, 1 if there are none and 125 if the query fails.
    """
    try:
        count = bytes_available(sys.stdin.fileno())
    except (OSError, ValueError):
        sys.stdout.write("0\n")
        return 125
    sys.stdout.write(f"{count}\n")
    return 1 if count == 0 else 0