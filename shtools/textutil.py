"""Small string predicates and searches used by the command-line tools."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def has_prefix(s: str | None, prefix: str | None) -> bool:
    """Return whether ``s`` starts with ``prefix``.

    Two missing strings count as a match; one missing string does not.
    """
    if s is None:
        return prefix is None
    if prefix is None:
        return False
    return s.startswith(prefix)


def has_prefix_n(s: str | None, prefix: str | None, n: int) -> bool:
    """Like :func:`has_prefix`, but only the first ``n`` characters count."""
    if s is None:
        return prefix is None
    if prefix is None:
        return False
    if n <= 0:
        return True
    return s[:n].startswith(prefix[:n])


def has_suffix(s: str | None, suffix: str | None) -> bool:
    """Return whether ``s`` ends with ``suffix``."""
    if s is None:
        return suffix is None
    if suffix is None:
        return False
    return s.endswith(suffix)


def has_suffix_n(s: str | None, suffix: str | None, n: int) -> bool:
    """Like :func:`has_suffix`, but only the last ``n`` characters count."""
    if s is None:
        return suffix is None
    if suffix is None:
        return False
    if n <= 0:
        return True
    return s[-n:].endswith(suffix[-n:])


def _rfind(haystack: str, needle: str, end: int | None) -> int | None:
    if not needle:
        return 0
    if end is None:
        end = len(haystack)
    if end <= 0:
        return None
    # A match may start anywhere before ``end`` and run past it.
    index = haystack.rfind(needle, 0, end - 1 + len(needle))
    return None if index < 0 else index


def rfind(haystack: str | None, needle: str | None, end: int | None = None) -> int | None:
    """Return the start of the last occurrence of ``needle`` beginning before ``end``.

    ``end`` defaults to the length of ``haystack``. An empty needle matches at 0.
    Returns None when there is no match or either string is missing.
    """
    if haystack is None or needle is None:
        return None
    return _rfind(haystack, needle, end)


def rfind_casefold(
    haystack: str | None, needle: str | None, end: int | None = None
) -> int | None:
    """Case-insensitive (ASCII) variant of :func:`rfind`."""
    if haystack is None or needle is None:
        return None
    return _rfind(_ascii_lower(haystack), _ascii_lower(needle), end)


def all_match(
    s: Sequence[Any] | None, predicate: Callable[[Any], Any], n: int | None = None
) -> bool:
    """Return whether every item of ``s`` (or of its first ``n`` items) satisfies ``predicate``."""
    if s is None:
        return False
    items = s if n is None else s[:n]
    return all(predicate(item) for item in items)