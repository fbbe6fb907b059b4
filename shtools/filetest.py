"""Filter a list of paths by file properties."""

from __future__ import annotations

import getopt
import mimetypes
import os
import stat
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TextIO

from shtools.records import inputs

PROG = "stest"

USAGE = (
    "Usage: stest [OPTION]... [PATH]...\n"
    "Filter a list of files by properties.\n"
    "\n"
    "With no PATH, read standard input.\n"
    "\n"
    "All options are compliant with the filesystem-related options of POSIX and GNU test. "
    "There are some extra options.\n"
    "\n"
    "Pass the same test option even times to invert that particular test."
    "\n"
    "  -A       indicate success only if all files passed, see 'Exit Codes'\n"
    "  -a       test whether files are hidden\n"
    "  -b       test whether files are block specials\n"
    "  -c       test whether files are character specials\n"
    "  -d       test whether files are directories\n"
    "  -e       test whether files exist\n"
    "  -f       test whether files are regular files\n"
    "  -G       test whether files are owned by the effective group ID\n"
    "  -g       test whether files have their set-group-ID flag set\n"
    "  --help   display this help and exit. this option needs to be given as the first argument\n"
    "  -h       test whether files are symbolic links\n"
    "  -k       test whether files have their sticky flag set\n"
    "  -L       test whether files are symbolic links\n"
    "  -M TYPE  test whether files' mime subtype are TYPE. "
    "requires a valid magic file installed system-wide\n"
    "  -m TYPE  test whether files' mime type are TYPE. "
    "requires a valid magic file installed system-wide\n"
    "  -N       test whether files have been modified after they were last read\n"
    "  -n FILE  test whether files are newer than FILE\n"
    "  -O       test whether files are owned by the effective user ID\n"
    "  -o FILE  test whether files are older than FILE\n"
    "  -p       test whether files are named pipes\n"
    "  -q       suppress stdout\n"
    "  -r       test whether files are readable\n"
    "  -S       test whether files are sockets\n"
    "  -s       test whether files are not empty\n"
    "  -u       test whether files have their set-user-ID flag set\n"
    "  -V       print each test and its result to stderr\n"
    "  -v       invert all tests\n"
    "  -w       test whether files are writable\n"
    "  -x       test whether files are executable\n"
    "  -z       line delimiter is NUL, not newline\n"
    "  -0       line delimiter is NUL, not newline\n"
    "\n"
    "Exit Codes\n"
    "  Default\n"
    "      0    All files passed all tests.\n"
    "      0    Some files passed all tests.\n"
    "      2    No files passed all tests.\n"
    "    127    Illegal options passed.\n"
    "  If -A Is Given\n"
    "      0    All files passed all tests.\n"
    "      1    Some files passed all tests.\n"
    "      2    No files passed all tests.\n"
    "    127    Illegal options passed.\n"
)

_OPTSTRING = "AabcdefGghkLlM:m:Nn:Oo:pqrSsuVvwxz0"
_NEEDS_ARGUMENT = frozenset("Mmno")

_SPECIAL_MIME = (
    (stat.S_ISLNK, "inode/symlink"),
    (stat.S_ISDIR, "inode/directory"),
    (stat.S_ISFIFO, "inode/fifo"),
    (stat.S_ISSOCK, "inode/socket"),
    (stat.S_ISCHR, "inode/chardevice"),
    (stat.S_ISBLK, "inode/blockdevice"),
)


def is_hidden(path: str) -> bool:
    """Return whether the last component of ``path`` starts with a dot."""
    stripped = path.rstrip("/")
    if not stripped:
        return False
    return stripped.rsplit("/", 1)[-1].startswith(".")


def _mime_of(path: str) -> str | None:
    try:
        st = os.lstat(path)
    except OSError as exc:
        sys.stderr.write(f"cannot open `{path}' ({exc.strerror})\n")
        return None
    for predicate, name in _SPECIAL_MIME:
        if predicate(st.st_mode):
            return name
    if st.st_size == 0:
        return "inode/x-empty"
    guessed, _ = mimetypes.guess_type(path)
    if guessed:
        return guessed
    try:
        with open(path, "rb") as handle:
            head = handle.read(8192)
    except OSError as exc:
        sys.stderr.write(f"cannot open `{path}' ({exc.strerror})\n")
        return None
    return "application/octet-stream" if b"\0" in head else "text/plain"


def _mode_is(predicate: Callable[[int], bool]) -> Callable[..., bool]:
    def check(tester: FileTester, path: str, st: os.stat_result | None) -> bool:
        return st is not None and bool(predicate(st.st_mode))

    return check


def _mode_has(bit: int) -> Callable[..., bool]:
    return _mode_is(lambda mode: mode & bit)


def _access(how: int) -> Callable[..., bool]:
    def check(tester: FileTester, path: str, st: os.stat_result | None) -> bool:
        return os.access(path, how)

    return check


def _hidden(tester: FileTester, path: str, st: os.stat_result | None) -> bool:
    return is_hidden(path)


def _link(tester: FileTester, path: str, st: os.stat_result | None) -> bool:
    return os.path.islink(path)


def _egid(tester: FileTester, path: str, st: os.stat_result | None) -> bool:
    return st is not None and os.getegid() == st.st_gid


def _euid(tester: FileTester, path: str, st: os.stat_result | None) -> bool:
    return st is not None and os.geteuid() == st.st_uid


def _modified(tester: FileTester, path: str, st: os.stat_result | None) -> bool:
    return st is not None and int(st.st_mtime) > int(st.st_atime)


def _newer(tester: FileTester, path: str, st: os.stat_result | None) -> bool:
    return st is not None and int(st.st_mtime) > tester.newer_than


def _older(tester: FileTester, path: str, st: os.stat_result | None) -> bool:
    return st is not None and int(st.st_mtime) < tester.older_than


def _mime_type(tester: FileTester, path: str, st: os.stat_result | None) -> bool:
    mime = _mime_of(path)
    if mime is None:
        return False
    return (tester.mime_type or "").startswith(mime.partition("/")[0])


def _mime_subtype(tester: FileTester, path: str, st: os.stat_result | None) -> bool:
    mime = _mime_of(path)
    if mime is None:
        return False
    return mime.partition("/")[2] == tester.mime_subtype


def _nonempty(tester: FileTester, path: str, st: os.stat_result | None) -> bool:
    if tester.positive("d"):
        try:
            with os.scandir(path) as entries:
                return any(True for _ in entries)
        except OSError:
            return False
    return st is not None and st.st_size > 0


_CHECKS: dict[str, Callable[..., bool]] = {
    "a": _hidden,
    "b": _mode_is(stat.S_ISBLK),
    "c": _mode_is(stat.S_ISCHR),
    "d": _mode_is(stat.S_ISDIR),
    "e": _access(os.F_OK),
    "f": _mode_is(stat.S_ISREG),
    "G": _egid,
    "g": _mode_has(stat.S_ISGID),
    "h": _link,
    "k": _mode_has(stat.S_ISVTX),
    "L": _link,
    "M": _mime_subtype,
    "m": _mime_type,
    "N": _modified,
    "n": _newer,
    "O": _euid,
    "o": _older,
    "p": _mode_is(stat.S_ISFIFO),
    "r": _access(os.R_OK),
    "S": _mode_is(stat.S_ISSOCK),
    "s": _nonempty,
    "u": _mode_has(stat.S_ISUID),
    "w": _access(os.W_OK),
    "x": _access(os.X_OK),
}


def _mtime_of(path: str) -> int:
    try:
        return int(os.stat(path).st_mtime)
    except OSError:
        return 0


@dataclass
class FileTester:
    """A set of per-flag file tests, each either positive or inverted."""

    invert: bool = False
    verbose: bool = False
    log: TextIO | None = None
    newer_than: int = 0
    older_than: int = 0
    mime_type: str | None = None
    mime_subtype: str | None = None
    _tests: dict[str, bool] = field(default_factory=dict, init=False, repr=False)

    def positive(self, flag: str) -> bool:
        """Return whether the test for ``flag`` is active and not inverted."""
        return self._tests.get(flag, False)

    def add(self, flag: str, argument: str | None = None) -> None:
        """Add the test ``flag``; adding it again inverts it, a third time restores it."""
        if flag not in _CHECKS:
            raise ValueError(f"unknown test: -{flag}")
        if flag in _NEEDS_ARGUMENT and argument is None:
            raise ValueError(f"test -{flag} requires an argument")
        self._tests[flag] = not self._tests.get(flag, False)
        if flag == "n":
            self.newer_than = _mtime_of(argument)
        elif flag == "o":
            self.older_than = _mtime_of(argument)
        elif flag == "m":
            self.mime_type = argument
        elif flag == "M":
            self.mime_subtype = argument

    def _say(self, text: str) -> None:
        if self.verbose:
            (self.log or sys.stderr).write(text)

    def test(self, path: str) -> bool:
        """Return whether ``path`` passes every test, honouring the global inversion."""
        self._say(f"testing file {path}\n")
        try:
            st = os.stat(path)
        except OSError:
            st = None
        for flag in sorted(self._tests):
            expected = self._tests[flag]
            self._say(f"running {'' if expected else 'inverse '}test -{flag}...")
            if _CHECKS[flag](self, path, st) != expected:
                self._say(" fail\n")
                return self.invert
            self._say(" pass\n")
        return not self.invert


def exit_status(matched: bool, unmatched: bool, require_all: bool) -> int:
    """Return the exit status for the given overall results."""
    if not unmatched:
        return 0
    if matched:
        return 1 if require_all else 0
    return 2


def main(argv: Sequence[str] | None = None) -> int:
    """Run the stest command and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args and args[0] == "--help":
        sys.stdout.write(USAGE)
        return 0

    try:
        opts, operands = getopt.gnu_getopt(args, _OPTSTRING)
    except getopt.GetoptError as exc:
        sys.stderr.write(f"{PROG}: {exc.msg}\n")
        sys.stderr.write("Try 'stest --help' for more information.\n")
        return 127

    tester = FileTester(log=sys.stderr)
    require_all = quiet = False
    delim = "\n"
    for flag, value in opts:
        letter = flag[1]
        if letter == "A":
            require_all = True
        elif letter == "q":
            quiet = True
        elif letter == "V":
            tester.verbose = True
        elif letter == "v":
            tester.invert = True
        elif letter in ("z", "0"):
            delim = "\0"
        elif letter in _CHECKS:
            tester.add(letter, value if letter in _NEEDS_ARGUMENT else None)
        else:
            sys.stderr.write("Try 'stest --help' for more information.\n")
            return 127

    matched = unmatched = False
    for path in inputs(operands, delim=delim):
        if tester.test(path):
            if not quiet:
                sys.stdout.write(path + delim)
            matched = True
        else:
            unmatched = True

    return exit_status(matched, unmatched, require_all)