"""Scroll the last line read from standard input."""

from __future__ import annotations

import getopt
import os
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass, field

from shtools.numparse import InvalidNumber, parse_unsigned
from shtools.term import bytes_available

PROG = "scrolls"

DEFAULT_WIDTH = 50
DEFAULT_PADDING = 10
DEFAULT_SECONDS = 0
DEFAULT_NANOSECONDS = 500000000
_MAX_NANOSECONDS = 999999999

USAGE = (
    f"Usage: {PROG} [OPTION]...\n"
    "Scroll the last line of stdin on stdout.\n"
    "\n"
    "When initialised, scrolls awaits the first line to start scrolling. "
    "After that, it checks for input on stdin. "
    "If any readable input is found, it suspends scrolling until the whole line is read.\n"
    "\n"
    "  -h        display this help and exit\n"
    "  -k        try to keep current index when a new line is received\n"
    f"  -l LEN    clamp line length to LEN. default is {DEFAULT_WIDTH}\n"
    f"  -p LEN    add LEN spaces of padding after the text ending. default is {DEFAULT_PADDING}\n"
    "  -S NSEC   wait NSEC nanoseconds after each scroll iteration. can be combined with -s. "
    f"NSEC is clamped to 999999999. default is {DEFAULT_NANOSECONDS}\n"
    "  -s SEC    wait SEC seconds after each scroll iteration. can be combined with -S. "
    f"default is {DEFAULT_SECONDS}\n"
)


@dataclass
class Scroller:
    """A window of at most ``width`` characters sliding over a padded, wrapped line."""

    width: int = DEFAULT_WIDTH
    padding: int = DEFAULT_PADDING
    keep_index: bool = False
    index: int = field(default=0, init=False)
    _length: int = field(default=0, init=False, repr=False)
    _visible: int = field(default=0, init=False, repr=False)
    _doubled: str = field(default="", init=False, repr=False)

    def update(self, line: str) -> None:
        """Start scrolling ``line``, keeping the position if asked to."""
        self._length = len(line)
        self._visible = min(self.width, self._length)
        self._doubled = line + " " * self.padding + line
        if self.keep_index:
            self.index = max(0, min(self.index, self._length - 1))
        else:
            self.index = 0

    def frame(self) -> str:
        """Return the currently visible text."""
        return self._doubled[self.index:self.index + self._visible]

    def advance(self) -> None:
        """Move the window one character on, wrapping after the padding."""
        period = self._length + self.padding
        self.index = (self.index + 1) % period if period else 0


def _read_line(fd: int) -> str | None:
    data = bytearray()
    while True:
        chunk = os.read(fd, 1)
        if not chunk:
            break
        if chunk == b"\n":
            return data.decode("utf-8", "surrogateescape")
        data += chunk
    return data.decode("utf-8", "surrogateescape") if data else None


def _number(value: str) -> int:
    return parse_unsigned(value) & 0xFFFFFFFF


def main(argv: Sequence[str] | None = None) -> int:
    """Run the scrolls command; it runs until interrupted."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        opts, _ = getopt.getopt(args, "hkl:p:S:s:")
    except getopt.GetoptError as exc:
        sys.stderr.write(f"{PROG}: {exc.msg}\n")
        sys.stderr.write("Try 'scrolls -h' for more information.\n")
        return 1

    scroller = Scroller()
    seconds, nanoseconds = DEFAULT_SECONDS, DEFAULT_NANOSECONDS
    for flag, value in opts:
        if flag == "-h":
            sys.stdout.write(USAGE)
            return 0
        if flag == "-k":
            scroller.keep_index = True
            continue
        try:
            number = _number(value)
        except InvalidNumber:
            sys.stderr.write("invalid number given\n")
            return 1
        if flag == "-l":
            scroller.width = number
        elif flag == "-p":
            scroller.padding = number
        elif flag == "-S":
            nanoseconds = min(number, _MAX_NANOSECONDS)
        else:
            seconds = number

    delay = seconds + nanoseconds / 1e9
    try:
        fd = sys.stdin.fileno()
        bytes_available(fd)
    except (OSError, ValueError) as exc:
        sys.stderr.write(f"{PROG}: ioctl(FIONREAD): {exc}\n")
        return 1

    try:
        line = _read_line(fd)
        if line is None:
            return 0
        scroller.update(line)
        while True:
            try:
                pending = bytes_available(fd)
            except OSError as exc:
                sys.stderr.write(f"{PROG}: ioctl(FIONREAD): {exc.strerror}\n")
                return 1
            if pending:
                line = _read_line(fd)
                if line is not None:
                    scroller.update(line)
            sys.stdout.write(scroller.frame() + "\n")
            sys.stdout.flush()
            scroller.advance()
            time.sleep(delay)
    except KeyboardInterrupt:
        return 130