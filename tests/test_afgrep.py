import io
import sys

import pytest

from shtools.afgrep import AlignedSearch, main


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("hello\nworld\nbell\n")
    return str(path)


def test_unaligned_match_points_at_pattern():
    line = "hello"
    where = AlignedSearch("ell").match(line)
    assert line[where:where + 3] == "ell"


def test_absent_pattern_is_not_selected():
    assert AlignedSearch("xyz").match("hello") is None


def test_begin_with_offset():
    assert AlignedSearch("lo", begin=True, offset=3).match("hello") == 3


def test_begin_misaligned():
    assert AlignedSearch("he", begin=True, offset=1).match("hehe") is None


def test_whole_line():
    line = "abc"
    where = AlignedSearch("abc", whole=True).match(line)
    assert line[where:] == line
    assert AlignedSearch("abc", whole=True).match("abcd") is None


def test_end_single_character():
    line = "hello"
    assert AlignedSearch("o", end=True).match(line) == len(line) - 1


def test_end_with_offset():
    line = "hello"
    offset = 1
    assert AlignedSearch("l", end=True, offset=offset).match(line) == len(line) - 1 - offset


def test_offset_past_line_end_is_not_selected():
    assert AlignedSearch("h", begin=True, offset=10).match("hello") is None


def test_invert_selects_misaligned_lines_only():
    line = "hello"
    where = AlignedSearch("lo", begin=True, invert=True).match(line)
    assert line[where:where + 2] == "lo"
    assert AlignedSearch("he", begin=True, invert=True).match(line) is None
    assert AlignedSearch("zz", begin=True, invert=True).match(line) is None


def test_ignore_case():
    line = "hello"
    where = AlignedSearch("ELL", ignore_case=True).match(line)
    assert line[where:where + 3].upper() == "ELL"
    assert AlignedSearch("ELL").match(line) is None


def test_empty_pattern_selects_everything():
    assert AlignedSearch("").match("anything") == 0


def test_main_prints_matching_lines(sample, capsys):
    assert main(["ell", sample]) == 0
    assert capsys.readouterr().out == "hello\nbell\n"


def test_main_only_matching_part(sample, capsys):
    assert main(["-o", "ell", sample]) == 0
    assert capsys.readouterr().out == "ell\nell\n"


def test_main_limit(sample, capsys):
    assert main(["-m", "1", "ell", sample]) == 0
    assert capsys.readouterr().out == "hello\n"


def test_main_quiet(sample, capsys):
    assert main(["-q", "ell", sample]) == 0
    assert capsys.readouterr().out == ""


def test_main_no_match_returns_one(sample, capsys):
    assert main(["nothing", sample]) == 1
    assert capsys.readouterr().out == ""


def test_main_no_pattern(capsys):
    assert main([]) == 1
    assert "no pattern given" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    missing = str(tmp_path / "missing")
    assert main(["x", missing]) == 1
    assert "No such file or directory" in capsys.readouterr().err


def test_main_nul_delimiter_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("ab\0cd\0"))
    assert main(["-z", "a"]) == 0
    assert capsys.readouterr().out == "ab\0"


def test_main_invalid_option(capsys):
    assert main(["-k", "x"]) == 127
    assert "Try 'afgrep -h'" in capsys.readouterr().err


def test_main_invalid_number(capsys):
    assert main(["-m", "abc", "x"]) == 1
    assert "invalid number given to option -m" in capsys.readouterr().err


def test_main_help(capsys):
    assert main(["-h"]) == 0
    assert capsys.readouterr().out.startswith("Usage: afgrep")