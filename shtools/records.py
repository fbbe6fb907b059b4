"""Reading delimiter-separated records from streams or argument lists."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import IO, AnyStr

_CHUNK_SIZE = 65536


def _same_kind(delim: str | bytes, sample: str | bytes) -> str | bytes:
    if isinstance(sample, bytes) and isinstance(delim, str):
        return delim.encode()
    if isinstance(sample, str) and isinstance(delim, bytes):
        return delim.decode()
    return delim


def read_records(stream: IO[AnyStr], delim: str | bytes = "\n") -> Iterator[AnyStr]:
    """Yield the records of ``stream`` separated by ``delim``, without the delimiter.

    A delimiter at the very end does not start an extra empty record.
    """
    buffer = None
    separator = delim
    while chunk := stream.read(_CHUNK_SIZE):
        if buffer is None:
            buffer = chunk[:0]
            separator = _same_kind(delim, chunk)
        buffer += chunk
        *complete, buffer = buffer.split(separator)
        yield from complete
    if buffer:
        yield buffer


def inputs(
    args: Iterable[str] | None,
    stream: IO[str] | None = None,
    delim: str = "\n",
) -> Iterator[str]:
    """Yield ``args`` if any were given, otherwise the records of ``stream`` (stdin)."""
    items = list(args or ())
    if items:
        yield from items
    else:
        yield from read_records(sys.stdin if stream is None else stream, delim)