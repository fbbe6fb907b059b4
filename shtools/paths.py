"""Filesystem path helpers: creating parents, squeezing slashes."""

from __future__ import annotations

import os
import re

_SLASHES = re.compile("/+")


def make_parents(path: str, mode: int = 0o755) -> None:
    """Create every parent directory of ``path``, ignoring failures."""
    for index, char in enumerate(path):
        if index and char == "/":
            try:
                os.mkdir(path[:index], mode)
            except OSError:
                pass


def make_file(path: str, mode: int = 0o755) -> None:
    """Create ``path`` as a file, with its parents, ignoring failures."""
    make_parents(path, mode)
    try:
        fd = os.open(path, os.O_CREAT | os.O_RDONLY, mode)
    except OSError:
        return
    os.close(fd)


def make_dir(path: str, mode: int = 0o755) -> None:
    """Create ``path`` as a directory, with its parents, ignoring failures."""
    make_parents(path, mode)
    try:
        os.mkdir(path, mode)
    except OSError:
        pass


def squeeze_slashes(path: str) -> str:
    """Collapse runs of slashes and drop a trailing slash."""
    squeezed = _SLASHES.sub("/", path)
    return squeezed[:-1] if squeezed.endswith("/") else squeezed


def dir_slash(path: str) -> str | None:
    """Return ``path`` with a slash appended if it is a directory; None if it does not exist."""
    try:
        is_dir = os.path.isdir(path) if os.path.exists(path) else None
    except OSError:
        return None
    if is_dir is None:
        return None
    return path + "/" if is_dir else path