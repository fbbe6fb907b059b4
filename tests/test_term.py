import os
import shutil

import pytest

from shtools.term import (
    bytes_available,
    fill,
    fillline_main,
    fillterm_main,
    fionread_main,
    flushterm_main,
)


@pytest.fixture
def pipe():
    read_fd, write_fd = os.pipe()
    reader = os.fdopen(read_fd, "r")
    yield reader, write_fd
    reader.close()
    os.close(write_fd)


def test_fill_cycles_words():
    assert fill(["a", "b"], 5) == "ababa"
    assert fill(["ab"], 3) == "ab" * 3


def test_fill_edge_cases():
    assert fill([], 10) == ""
    assert fill(["x"], 0) == ""


def test_bytes_available_counts_pipe(pipe):
    reader, write_fd = pipe
    assert bytes_available(reader.fileno()) == 0
    os.write(write_fd, b"hello")
    assert bytes_available(reader.fileno()) == len(b"hello")


def test_bytes_available_bad_fd():
    read_fd, write_fd = os.pipe()
    os.close(read_fd)
    os.close(write_fd)
    with pytest.raises(OSError):
        bytes_available(read_fd)


def test_fionread_main(pipe, monkeypatch, capsys):
    reader, write_fd = pipe
    monkeypatch.setattr("sys.stdin", reader)
    assert fionread_main([]) == 1
    assert capsys.readouterr().out == "0\n"
    os.write(write_fd, b"abc")
    assert fionread_main([]) == 0
    assert capsys.readouterr().out == "3\n"


def test_fionread_main_failure(monkeypatch, capsys):
    read_fd, write_fd = os.pipe()
    reader = os.fdopen(read_fd, "r")
    os.close(write_fd)
    reader.close()

    class Closed:
        def fileno(self):
            return read_fd

    monkeypatch.setattr("sys.stdin", Closed())
    assert fionread_main([]) == 125
    assert capsys.readouterr().out == "0\n"


def test_fillline_and_fillterm(monkeypatch, capsys):
    monkeypatch.setattr(shutil, "get_terminal_size", lambda *a, **k: os.terminal_size((4, 2)))
    assert fillline_main(["x"]) == 0
    assert capsys.readouterr().out == "x" * 4
    assert fillterm_main(["x"]) == 0
    assert capsys.readouterr().out == "x" * 8


def test_flushterm_fails_on_pipe(pipe, monkeypatch):
    reader, _ = pipe
    monkeypatch.setattr("sys.stdin", reader)
    assert flushterm_main([]) == 1