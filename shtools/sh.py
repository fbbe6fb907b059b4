"""Small predicates and helpers for shell scripts."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Iterable, Sequence

from shtools.numparse import InvalidNumber, parse_signed
from shtools.textutil import has_prefix, has_suffix

_LLONG_MAX = 2**63 - 1
_DECIMAL = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def select_args(args: Sequence[str], begin: int, end: int, step: int) -> list[str]:
    """Return the items of ``args`` from index ``begin``, at most ``end`` of them, every ``step``-th.

    A negative ``end`` means no limit. Raises ValueError for a negative
    ``begin`` or a zero ``step``.
    """
    if begin < 0:
        raise ValueError("start index lies before the first argument")
    if step == 0:
        raise ValueError("increment must not be zero")
    selected = list(args[begin:])
    if end >= 0:
        selected = selected[:end]
    return selected[::abs(step)]


def contains_any(text: str, needles: Iterable[str]) -> bool:
    """Return whether ``text`` contains at least one of ``needles``."""
    return any(needle in text for needle in needles)


def contains_all(text: str, needles: Iterable[str]) -> bool:
    """Return whether ``text`` contains every one of ``needles``."""
    return all(needle in text for needle in needles)


def equals_any(text: str, candidates: Iterable[str]) -> bool:
    """Return whether ``text`` equals one of ``candidates``."""
    return any(text == candidate for candidate in candidates)


def prefixes_any(text: str, prefixes: Iterable[str]) -> bool:
    """Return whether ``text`` starts with one of ``prefixes``."""
    return any(has_prefix(text, prefix) for prefix in prefixes)


def suffixes_any(text: str, suffixes: Iterable[str]) -> bool:
    """Return whether ``text`` ends with one of ``suffixes``."""
    return any(has_suffix(text, suffix) for suffix in suffixes)


def raw_name(path: str) -> str:
    """Return ``path`` without everything from its last dot on."""
    head, dot, _ = path.rpartition(".")
    return head if dot else path


def raw_extension(path: str) -> str:
    """Return what follows the last dot of ``path``, or ``path`` itself if it has none."""
    _, dot, tail = path.rpartition(".")
    return tail if dot else path


def verbose_enabled(value: str | None) -> bool:
    """Return whether ``value`` is a whole decimal integer greater than zero."""
    if value is None:
        return False
    match = _DECIMAL.fullmatch(value)
    if match is None:
        return False
    number = int(match.group(1))
    return 0 < number <= _LLONG_MAX


def _args(argv: Sequence[str] | None) -> list[str]:
    return sys.argv[1:] if argv is None else list(argv)


def argn_main(argv: Sequence[str] | None = None) -> int:
    """Print selected arguments, each followed by a NUL character."""
    args = _args(argv)
    if len(args) < 3:
        sys.stderr.write("argn: at least 3 arguments are required\n")
        return 1
    try:
        begin, end, step = (parse_signed(text) for text in args[:3])
    except InvalidNumber:
        sys.stderr.write("argn: invalid number given\n")
        return 1
    try:
        selected = select_args(args, begin + 3, end, step)
    except ValueError as exc:
        sys.stderr.write(f"argn: {exc}\n")
        return 1
    sys.stdout.write("".join(arg + "\0" for arg in selected))
    return 0


def _assert_uid(argv: Sequence[str] | None, want_root: bool, message: str) -> int:
    args = _args(argv)
    if (os.geteuid() == 0) == want_root:
        return 0
    sys.stderr.write("".join(args) if args else message)
    return 1


def assertroot_main(argv: Sequence[str] | None = None) -> int:
    """Exit 0 when running as root, else print the arguments (or a default) and exit 1."""
    return _assert_uid(argv, True, "This script must be run as root.\n")


def assertnonroot_main(argv: Sequence[str] | None = None) -> int:
    """Exit 0 when not running as root, else print the arguments (or a default) and exit 1."""
    return _assert_uid(argv, False, "This script must not be run as root.\n")


def contains_main(argv: Sequence[str] | None = None) -> int:
    """Exit 0 if the first argument contains any of the others."""
    args = _args(argv)
    return 0 if args and contains_any(args[0], args[1:]) else 1


def containsall_main(argv: Sequence[str] | None = None) -> int:
    """Exit 0 if the first argument contains all of the others."""
    args = _args(argv)
    return 0 if not args or contains_all(args[0], args[1:]) else 1


def equals_main(argv: Sequence[str] | None = None) -> int:
    """Exit 0 if the first argument equals any of the others."""
    args = _args(argv)
    return 0 if args and equals_any(args[0], args[1:]) else 1


def prefixes_main(argv: Sequence[str] | None = None) -> int:
    """Exit 0 if the first argument starts with any of the others."""
    args = _args(argv)
    return 0 if args and prefixes_any(args[0], args[1:]) else 1


def suffixes_main(argv: Sequence[str] | None = None) -> int:
    """Exit 0 if the first argument ends with any of the others."""
    args = _args(argv)
    return 0 if args and suffixes_any(args[0], args[1:]) else 1


def evalverbose_main(argv: Sequence[str] | None = None) -> int:
    """Print ``set -x`` when SHELL_VERBOSE is a positive integer."""
    if verbose_enabled(os.environ.get("SHELL_VERBOSE")):
        sys.stdout.write("set -x\n")
    return 0


def rawname_main(argv: Sequence[str] | None = None) -> int:
    """Print each argument without its extension."""
    for path in _args(argv):
        sys.stdout.write(raw_name(path) + "\n")
    return 0


def rawextension_main(argv: Sequence[str] | None = None) -> int:
    """Print the extension of each argument."""
    for path in _args(argv):
        sys.stdout.write(raw_extension(path) + "\n")
    return 0


def argc_main(argv: Sequence[str] | None = None) -> int:
    """Print the number of arguments."""
    sys.stdout.write(f"{len(_args(argv))}\n")
    return 0