import pytest

from shtools.textutil import (
    all_match,
    has_prefix,
    has_prefix_n,
    has_suffix,
    has_suffix_n,
    rfind,
    rfind_casefold,
)

PAIRS = [
    ("abcdef", "abc"),
    ("abc", "abcdef"),
    ("abc", ""),
    ("", ""),
    ("", "a"),
    ("xyz", "xyz"),
    ("hello", "help"),
    ("filename.txt", ".txt"),
]


@pytest.mark.parametrize("s,prefix", PAIRS)
def test_has_prefix_agrees_with_startswith(s, prefix):
    assert has_prefix(s, prefix) == s.startswith(prefix)


@pytest.mark.parametrize("s,suffix", PAIRS)
def test_has_suffix_agrees_with_endswith(s, suffix):
    assert has_suffix(s, suffix) == s.endswith(suffix)


def test_missing_strings():
    assert has_prefix(None, None) is True
    assert has_prefix(None, "a") is False
    assert has_prefix("a", None) is False
    assert has_suffix(None, None) is True
    assert has_suffix("a", None) is False


def test_has_prefix_n_limits_comparison():
    assert has_prefix_n("abcdef", "abcxyz", 3) is True
    assert has_prefix_n("abcdef", "abcxyz", 4) is False
    assert has_prefix_n("a", "ab", 2) is False
    assert has_prefix_n("anything", "other", 0) is True


def test_has_suffix_n_limits_comparison():
    assert has_suffix_n("xxabc", "yyabc", 3) is True
    assert has_suffix_n("xxabc", "yyabc", 4) is False
    assert has_suffix_n("bc", "abc", 3) is False


@pytest.mark.parametrize(
    "haystack,needle",
    [("abcabc", "abc"), ("aaaa", "aa"), ("xyz", "y"), ("abc", "abc")],
)
def test_rfind_finds_last(haystack, needle):
    index = rfind(haystack, needle)
    assert index == haystack.rfind(needle)
    assert haystack[index:].startswith(needle)


def test_rfind_respects_end():
    haystack = "abcabc"
    assert rfind(haystack, "abc", 3) == haystack.find("abc")
    assert rfind(haystack, "abc", 0) is None


def test_rfind_missing_and_empty():
    assert rfind("abc", "z") is None
    assert rfind(None, "a") is None
    assert rfind("abc", "") == 0


def test_rfind_casefold():
    assert rfind_casefold("xABcabc", "ABC") == "xabcabc".rfind("abc")
    assert rfind_casefold("xABc", "abc") == "xabc".find("abc")
    assert rfind_casefold("xyz", "abc") is None


def test_all_match():
    assert all_match("123", str.isdigit) is True
    assert all_match("12a", str.isdigit) is False
    assert all_match("12a", str.isdigit, 2) is True
    assert all_match(None, str.isdigit) is False
    assert all_match([2, 4, 6], lambda x: x % 2 == 0) is True