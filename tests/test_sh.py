from unittest import mock

import pytest

from shtools import sh


def test_select_args_from_begin_with_step():
    assert sh.select_args(["a", "b", "c", "d", "e"], 1, -1, 2) == ["b", "d"]


def test_select_args_limits_count():
    args = ["a", "b", "c", "d"]
    assert sh.select_args(args, 0, 2, 1) == args[:2]


def test_select_args_negative_step_uses_magnitude():
    args = ["a", "b", "c", "d", "e"]
    assert sh.select_args(args, 0, -1, -2) == sh.select_args(args, 0, -1, 2)


def test_select_args_zero_step_rejected():
    with pytest.raises(ValueError):
        sh.select_args(["a"], 0, -1, 0)


def test_select_args_negative_begin_rejected():
    with pytest.raises(ValueError):
        sh.select_args(["a"], -1, -1, 1)


def test_argn_main_outputs_nul_terminated(capsys):
    assert sh.argn_main(["0", "-1", "1", "x", "y"]) == 0
    assert capsys.readouterr().out == "x\0y\0"


def test_argn_main_too_few_arguments(capsys):
    assert sh.argn_main(["1"]) == 1
    assert "at least 3 arguments are required" in capsys.readouterr().err


def test_argn_main_invalid_number(capsys):
    assert sh.argn_main(["abc", "1", "1", "x"]) == 1
    assert "invalid number given" in capsys.readouterr().err


def test_contains_any_and_all():
    assert sh.contains_any("hello", ["xyz", "ell"]) is True
    assert sh.contains_any("hello", ["xyz"]) is False
    assert sh.contains_any("hello", []) is False
    assert sh.contains_all("hello", []) is True
    assert sh.contains_all("hello", ["he", "lo"]) is True
    assert sh.contains_all("hello", ["he", "z"]) is False


def test_contains_mains():
    assert sh.contains_main(["hello", "ell"]) == 0
    assert sh.contains_main(["hello", "z"]) == 1
    assert sh.contains_main([]) == 1
    assert sh.containsall_main(["hello", "h", "o"]) == 0
    assert sh.containsall_main(["hello", "h", "z"]) == 1
    assert sh.containsall_main([]) == 0


def test_equals():
    assert sh.equals_any("a", ["b", "a"]) is True
    assert sh.equals_any("a", ["b"]) is False
    assert sh.equals_main(["a", "b", "a"]) == 0
    assert sh.equals_main(["a", "b"]) == 1


def test_prefixes_and_suffixes():
    assert sh.prefixes_any("foobar", ["foo"]) is True
    assert sh.prefixes_any("foobar", ["bar"]) is False
    assert sh.suffixes_any("foobar", ["bar"]) is True
    assert sh.suffixes_any("foobar", ["foo"]) is False
    assert sh.prefixes_main(["foobar", "x", "foo"]) == 0
    assert sh.suffixes_main(["foobar", "x"]) == 1


def test_raw_name_and_extension():
    assert sh.raw_name("archive.tar.gz") == "archive.tar"
    assert sh.raw_name("README") == "README"
    assert sh.raw_extension("archive.tar.gz") == "gz"
    assert sh.raw_extension("README") == "README"


def test_rawname_main_and_rawextension_main(capsys):
    assert sh.rawname_main(["a.txt", "b"]) == 0
    assert capsys.readouterr().out == "a\nb\n"
    assert sh.rawextension_main(["a.txt", "b"]) == 0
    assert capsys.readouterr().out == "txt\nb\n"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1", True),
        (" 2", True),
        ("0", False),
        ("-3", False),
        ("1x", False),
        ("", False),
        (None, False),
        ("99999999999999999999", False),
    ],
)
def test_verbose_enabled(value, expected):
    assert sh.verbose_enabled(value) is expected


def test_evalverbose_main(monkeypatch, capsys):
    monkeypatch.setenv("SHELL_VERBOSE", "1")
    assert sh.evalverbose_main([]) == 0
    assert capsys.readouterr().out == "set -x\n"
    monkeypatch.setenv("SHELL_VERBOSE", "0")
    assert sh.evalverbose_main([]) == 0
    assert capsys.readouterr().out == ""


@mock.patch("os.geteuid", return_value=1000)
def test_assertroot_as_user(_geteuid, capsys):
    assert sh.assertroot_main([]) == 1
    assert capsys.readouterr().err == "This script must be run as root.\n"
    assert sh.assertnonroot_main([]) == 0


@mock.patch("os.geteuid", return_value=0)
def test_assertnonroot_as_root_custom_message(_geteuid, capsys):
    assert sh.assertnonroot_main(["no ", "root\n"]) == 1
    assert capsys.readouterr().err == "no root\n"
    assert sh.assertroot_main([]) == 0


def test_argc_main(capsys):
    assert sh.argc_main(["a", "b", "c"]) == 0
    assert capsys.readouterr().out == "3\n"