"""Print, repeat and discard text."""

from __future__ import annotations

import itertools
import os
import select
import sys
from collections.abc import Iterator, Sequence

from shtools.numparse import InvalidNumber, parse_unsigned

_PIPE_BUF = getattr(select, "PIPE_BUF", 512)
_DISCARD_CHUNK = 2048


def join_words(words: Sequence[str]) -> str:
    """Join ``words`` with single spaces."""
    return " ".join(words)


def repeat_words(words: Sequence[str], end: str) -> Iterator[str]:
    """Yield the joined ``words`` followed by ``end`` forever; nothing if ``words`` is empty."""
    if not words:
        return
    yield from itertools.repeat(join_words(words) + end)


def _args(argv: Sequence[str] | None) -> list[str]:
    return sys.argv[1:] if argv is None else list(argv)


def puts_main(argv: Sequence[str] | None = None) -> int:
    """Print each argument on its own line."""
    args = _args(argv)
    if not args:
        sys.stderr.write("puts: no argument given\n")
        return 1
    sys.stdout.write("".join(arg + "\n" for arg in args))
    return 0


def _repeat_count(prog: str, text: str, count: str, end: str) -> int:
    try:
        n = parse_unsigned(count)
    except InvalidNumber:
        sys.stderr.write(f"{prog}: invalid number given\n")
        return 1
    for _ in range(n):
        sys.stdout.write(text + end)
    return 0


def putsn_main(argv: Sequence[str] | None = None) -> int:
    """Print a string (empty if only a count is given) on COUNT lines."""
    args = _args(argv)
    if len(args) == 1:
        args = ["", args[0]]
    elif len(args) != 2:
        sys.stderr.write("putsn: exactly 1 or 2 arguments are accepted\n")
        return 1
    return _repeat_count("putsn", args[0], args[1], "\n")


def fputs_main(argv: Sequence[str] | None = None) -> int:
    """Print the arguments joined by spaces, with no line end."""
    args = _args(argv)
    if not args:
        sys.stderr.write("fputs: no argument given\n")
        return 1
    sys.stdout.write(join_words(args))
    return 0


def fputsn_main(argv: Sequence[str] | None = None) -> int:
    """Print a string COUNT times with nothing in between."""
    args = _args(argv)
    if len(args) != 2:
        sys.stderr.write("fputsn: exactly 2 arguments are accepted\n")
        return 1
    return _repeat_count("fputsn", args[0], args[1], "")


def _repeat(argv: Sequence[str] | None, end: str) -> int:
    try:
        for chunk in repeat_words(_args(argv), end):
            sys.stdout.write(chunk)
    except (BrokenPipeError, KeyboardInterrupt):
        pass
    return 0


def repeatline_main(argv: Sequence[str] | None = None) -> int:
    """Print the joined arguments as a line, forever."""
    return _repeat(argv, "\n")


def repeatnull_main(argv: Sequence[str] | None = None) -> int:
    """Print the joined arguments followed by NUL, forever."""
    return _repeat(argv, "\0")


def repeatstr_main(argv: Sequence[str] | None = None) -> int:
    """Print the joined arguments with nothing in between, forever."""
    return _repeat(argv, "")


def one_main(argv: Sequence[str] | None = None) -> int:
    """Write 0xFF bytes to standard output forever."""
    data = b"\xff" * _PIPE_BUF
    fd = sys.stdout.fileno()
    try:
        while True:
            os.write(fd, data)
    except (BrokenPipeError, KeyboardInterrupt):
        pass
    return 0


def flushline_main(argv: Sequence[str] | None = None) -> int:
    """Discard standard input up to and including the next newline."""
    sys.stdin.readline()
    return 0


def flushstdin_main(argv: Sequence[str] | None = None) -> int:
    """Discard everything remaining on standard input."""
    stream = getattr(sys.stdin, "buffer", sys.stdin)
    while stream.read(_DISCARD_CHUNK):
        pass
    return 0