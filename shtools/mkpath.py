"""Create files or the parent directories of paths."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

from shtools.paths import make_file, make_parents

_MODE = 0o755


def _each(argv: Sequence[str] | None, action: Callable[[str, int], object]) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    for path in args:
        try:
            action(path, _MODE)
        except OSError:
            pass
    return 0


def mkfile_main(argv: Sequence[str] | None = None) -> int:
    """Create each path as a file, along with its missing parent directories."""
    return _each(argv, make_file)


def mkparent_main(argv: Sequence[str] | None = None) -> int:
    """Create the missing parent directories of each path."""
    return _each(argv, make_parents)