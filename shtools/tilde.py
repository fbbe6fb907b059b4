"""Expanding and collapsing leading tildes in paths."""

from __future__ import annotations

import getopt
import os
import re
import sys
from collections.abc import Callable, Sequence

from shtools.records import inputs

try:
    import pwd
except ImportError:  # platforms without a password database
    pwd = None

_SLASHES = re.compile("/+")

EXPAND_USAGE = (
    "Usage: expandpath [OPTION]... [PATH]...\n"
    "Like `wordexp`, but only expands tildes.\n"
    "\n"
    "With no PATH, read standard input.\n"
    "\n"
    "  -h        display this help and exit\n"
    "  -z        line delimiter is NUL, not newline\n"
    "  -0        line delimiter is NUL, not newline\n"
)

UNEXPAND_USAGE = (
    "Usage: unexpandpath [OPTION]... [PATH]...\n"
    "Like `wordexp`, but only expands tildes.\n"
    "\n"
    "With no PATH, read standard input.\n"
    "\n"
    "  -h        display this help and exit\n"
    "  -s        output '~' instead of '~currentuser'\n"
    "  -z        line delimiter is NUL, not newline\n"
    "  -0        line delimiter is NUL, not newline\n"
)


def _squeeze(path: str) -> str:
    return _SLASHES.sub("/", path)


def _passwd_home(name: str) -> str | None:
    if pwd is None:
        return None
    try:
        return pwd.getpwnam(name).pw_dir
    except KeyError:
        return None


def expand_tilde(
    path: str,
    home: str,
    lookup_home: Callable[[str], str | None] | None = None,
) -> str:
    """Expand a leading ``~`` or ``~user`` in ``path``, squeezing repeated slashes.

    ``lookup_home`` maps a user name to a home directory or None; it defaults to
    the system password database. Unknown users leave the path unexpanded.
    """
    squeezed = _squeeze(path)
    if not squeezed.startswith("~"):
        return squeezed
    if squeezed == "~":
        return home
    if squeezed[1] == "/":
        return home + squeezed[1:]
    user, slash, rest = squeezed[1:].partition("/")
    user_home = (lookup_home or _passwd_home)(user)
    if user_home is None:
        return squeezed
    return user_home + slash + rest


def unexpand_tilde(
    path: str,
    users: Sequence[tuple[str, str]],
    current_user: str | None = None,
) -> str:
    """Replace the first matching home directory prefix of ``path`` with ``~user``.

    ``users`` is a sequence of ``(name, home)`` pairs, tried in order. The
    home of ``current_user`` becomes a bare ``~``.
    """
    if not path:
        return ""
    squeezed = _squeeze(path)
    for name, home in users:
        if squeezed.startswith(home):
            shown = "~" if current_user == name else "~" + name
            return shown + squeezed[len(home):]
    return squeezed


def load_users() -> list[tuple[str, str]]:
    """Return ``(name, home)`` for every system user whose home is not ``/``."""
    if pwd is None:
        return []
    return [(entry.pw_name, entry.pw_dir) for entry in pwd.getpwall() if entry.pw_dir != "/"]


def _parse(prog: str, args: Sequence[str], shortopts: str):
    try:
        return getopt.gnu_getopt(list(args), shortopts)
    except getopt.GetoptError as exc:
        sys.stderr.write(f"{prog}: {exc.msg}\n")
        sys.stderr.write(f"Try '{prog} -h' for more information.\n")
        return None


def _current_home() -> str | None:
    home = os.environ.get("HOME")
    if home is not None:
        return home
    if pwd is None:
        return None
    try:
        return pwd.getpwuid(os.getuid()).pw_dir
    except KeyError:
        return None


def expandpath_main(argv: Sequence[str] | None = None) -> int:
    """Run the expandpath command and return its exit status."""
    parsed = _parse("expandpath", sys.argv[1:] if argv is None else argv, "hz0")
    if parsed is None:
        return 1
    opts, operands = parsed
    delim = "\n"
    for flag, _ in opts:
        if flag == "-h":
            sys.stdout.write(EXPAND_USAGE)
            return 0
        delim = "\0"

    home = _current_home()
    if home is None:
        sys.stderr.write("expandpath: could not determine home directory\n")
        return 1

    for path in inputs(operands, delim=delim):
        sys.stdout.write(expand_tilde(path, home) + delim)
    return 0


def unexpandpath_main(argv: Sequence[str] | None = None) -> int:
    """Run the unexpandpath command and return its exit status."""
    parsed = _parse("unexpandpath", sys.argv[1:] if argv is None else argv, "hsz0")
    if parsed is None:
        return 1
    opts, operands = parsed
    delim = "\n"
    current_user = None
    for flag, _ in opts:
        if flag == "-h":
            sys.stdout.write(UNEXPAND_USAGE)
            return 0
        if flag == "-s":
            if pwd is not None:
                try:
                    current_user = pwd.getpwuid(os.getuid()).pw_name
                except KeyError:
                    current_user = None
        else:
            delim = "\0"

    users = load_users()
    for path in inputs(operands, delim=delim):
        sys.stdout.write(unexpand_tilde(path, users, current_user) + delim)
    return 0