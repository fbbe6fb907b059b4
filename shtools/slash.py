"""Normalise slashes in paths and mark directories with a trailing slash."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from shtools.paths import dir_slash, squeeze_slashes
from shtools.records import inputs


def slash(path: str) -> str:
    """Squeeze repeated slashes, drop a trailing one, and re-add it for directories."""
    squeezed = squeeze_slashes(path)
    marked = dir_slash(squeezed)
    return squeezed if marked is None else marked


def main(argv: Sequence[str] | None = None) -> int:
    """Print each argument (or each stdin line) through :func:`slash`."""
    args = sys.argv[1:] if argv is None else list(argv)
    for path in inputs(args):
        sys.stdout.write(slash(path) + "\n")
    return 0