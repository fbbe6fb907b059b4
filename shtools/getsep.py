"""Guess whether input is newline- or NUL-separated."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import IO

_CHUNK_SIZE = 4096


def detect_separator(stream: IO) -> str:
    """Return ``\\0`` if ``stream`` contains a NUL character, otherwise ``\\n``.

    The result is the two-character escape, as a shell would write it.
    """
    while chunk := stream.read(_CHUNK_SIZE):
        nul = b"\0" if isinstance(chunk, bytes) else "\0"
        if nul in chunk:
            return "\\0"
    return "\\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the separator of stdin, or of each file given."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        sys.stdout.write(detect_separator(sys.stdin.buffer))
        return 0
    for path in args:
        try:
            handle = open(path, "rb")
        except OSError as exc:
            sys.stderr.write(f"open: {exc.strerror}\n")
            continue
        with handle:
            sys.stdout.write(detect_separator(handle))
    return 0