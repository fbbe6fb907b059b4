"""Resolve keycodes to paths stored in a per-user configuration database."""

from __future__ import annotations

import getopt
import os
import sys
from collections.abc import Mapping, Sequence
from enum import Enum

from shtools.paths import make_dir, make_file, make_parents

try:
    import pwd
except ImportError:  # platforms without a password database
    pwd = None

PROG = "getpath"

FILES_CONTAINER = "/scripts/pathfinding/files-container/"
DIRECTORIES_CONTAINER = "/scripts/pathfinding/directories-container/"

_MODE = 0o755

USAGE = (
    "Usage: getpath [OPTION]... [KEYCODE]...\n"
    "  or:  getpath -e [OPTION]... [KEYCODE] [VARNAME] [EXITCODE]? [ERRMSG]?\n"
    "Get paths based on keycodes.\n"
    "\n"
    "EXITCODE and ERRMSG are optional and respectively default to 1 and NULL.\n"
    "Unless -b is given, the first match of -f and -d in that order is output.\n"
    "At least one of -df must be given.\n"
    "Only the last occurrence of any of -nsu is considered. By default, -n is selected.\n"
    "\n"
    "  -b        if -d and -f are given, output both if matched\n"
    "  -d        search directory database\n"
    "  -e        make output `eval`able by a POSIX-compatible shell\n"
    "  -f        search file database\n"
    "  -h        display this help and exit\n"
    "  -n        select normal mode: create parent elements of the path\n"
    "  -s        select safe   mode: create all elements of the path\n"
    "  -u        select unsafe mode: create none of the elements of the path\n"
    "  -z        line delimiter is NUL, not newline\n"
    "  -0        line delimiter is NUL, not newline\n"
)


class SafetyMode(Enum):
    """How much of a looked-up path is created on disk."""

    UNSAFE = 0
    NORMAL = 1
    SAFE = 2


class GetPathError(Exception):
    """Raised when a keycode cannot be resolved."""


def config_prefix(environ: Mapping[str, str] | None = None) -> str:
    """Return the configuration directory that holds the path databases."""
    env = os.environ if environ is None else environ
    for name in ("GETPATH_CONFIG_HOME", "XDG_CONFIG_HOME"):
        value = env.get(name)
        if value is not None:
            return value
    home = env.get("HOME")
    if home is None and pwd is not None:
        try:
            home = pwd.getpwuid(os.getuid()).pw_dir
        except KeyError:
            home = None
    if home is None:
        raise GetPathError("could not determine config directory")
    return f"{home}/.config"


def lookup(prefix: str, keycode: str, directory: bool = False) -> str:
    """Return the path stored for ``keycode`` in the file or directory database."""
    if not keycode:
        raise GetPathError("keycode is empty")
    container = DIRECTORIES_CONTAINER if directory else FILES_CONTAINER
    try:
        with open(f"{prefix}{container}{keycode}", "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise GetPathError(f"keycode is invalid: {keycode}") from exc
    if not data:
        raise GetPathError("directory database is corrupted, generate a fresh copy")
    return data.split(b"\0", 1)[0].decode("utf-8", "surrogateescape")


def shell_assignment(name: str, value: str) -> str:
    """Return a POSIX shell assignment of ``value`` to ``name``, safely quoted."""
    quoted = value.replace("'", "'\"'\"'")
    return f"{name}='{quoted}';\n"


def _die(message: str, shell_args: Sequence[str] | None) -> int:
    sys.stderr.write(f"{PROG}: {message}\n")
    if shell_args is not None:
        if len(shell_args) == 4:
            sys.stderr.write(f"{shell_args[3]}\n")
        if len(shell_args) in (3, 4):
            sys.stdout.write(f"exit {shell_args[2]};\n")
        else:
            sys.stdout.write("exit 1;\n\n")
    return 1


def _create(path: str, safety: SafetyMode, directory: bool) -> None:
    try:
        if safety is SafetyMode.NORMAL:
            make_parents(path, _MODE)
        elif safety is SafetyMode.SAFE:
            (make_dir if directory else make_file)(path, _MODE)
    except OSError:
        pass


def main(argv: Sequence[str] | None = None) -> int:
    """Run the getpath command and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        opts, operands = getopt.getopt(args, "bdefhnsuz0")
    except getopt.GetoptError as exc:
        sys.stderr.write(f"{PROG}: {exc.msg}\n")
        sys.stderr.write("Try 'getpath -h' for more information.\n")
        return 1

    both = shell = want_dirs = want_files = False
    safety = SafetyMode.NORMAL
    delim = "\n"
    for flag, _ in opts:
        if flag == "-b":
            both = True
        elif flag == "-d":
            want_dirs = True
        elif flag == "-e":
            shell = True
        elif flag == "-f":
            want_files = True
        elif flag == "-h":
            sys.stdout.write(USAGE)
            return 0
        elif flag == "-n":
            safety = SafetyMode.NORMAL
        elif flag == "-s":
            safety = SafetyMode.SAFE
        elif flag == "-u":
            safety = SafetyMode.UNSAFE
        else:
            delim = "\0"

    if not (want_dirs or want_files):
        return _die("at least one of -df must be passed", None)

    shell_args: Sequence[str] | None = None
    if shell:
        if not 2 <= len(operands) <= 4:
            return _die(
                "exactly 2, 3 or 4 positional arguments need to be given when -e is given",
                None,
            )
        shell_args = operands

    try:
        prefix = config_prefix()
    except GetPathError as exc:
        return _die(str(exc), shell_args)

    keycodes = operands[:1] if shell else operands
    loop_shell_args = keycodes if shell else None
    plain = len(keycodes) == 1 and not both and not sys.stdout.isatty()

    for keycode in keycodes:
        kinds = [directory for directory, wanted in ((False, want_files), (True, want_dirs))
                 if wanted]
        if not both:
            kinds = kinds[:1]
        for directory in kinds:
            try:
                path = lookup(prefix, keycode, directory)
            except GetPathError as exc:
                return _die(str(exc), loop_shell_args)
            _create(path, safety, directory)
            if shell:
                sys.stdout.write(shell_assignment(operands[1], path))
            elif plain:
                sys.stdout.write(path)
            else:
                sys.stdout.write(path + delim)
    return 0