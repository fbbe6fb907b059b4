"""Apply mathematical functions to a list of numbers."""

from __future__ import annotations

import functools
import getopt
import math
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from shtools.numparse import InvalidNumber, parse_float
from shtools.records import read_records

PROG = "numsh"

USAGE = (
    "Usage: " + PROG + " [OPTION]... [NUMBER]...\n"
    "Do mathematical calculations on all given numbers.\n"
    "\n"
    "With no NUMBER, read standard input. Empty lines are ignored\n"
    "when reading standard input.\n"
    "\n"
    "Option -f must be given. If FUNC requires additional arguments,\n"
    "option -o must be given exactly as many times as required.\n"
    "\n"
    "  -f  FUNC  function to pass numbers through. pass -L to see the list.\n"
    "  -h        display this help and exit\n"
    "  -L        list all supported functions and exit\n"
    "  -o  ARG   pass additional arguments to FUNC. this option can be\n"
    "            given multiple times, and has to be given after -f.\n"
)

Compute = Callable[[Sequence[float], Sequence[float]], float]


class FunctionKind(Enum):
    """Whether a function maps each number or reduces all of them to one."""

    MAP = "map"
    REDUCE = "reduce"


@dataclass(frozen=True)
class Function:
    """A named calculation; ``compute`` takes the numbers and the extra arguments."""

    name: str
    kind: FunctionKind
    compute: Compute


def _inf_on_overflow(x: float) -> float:
    return math.inf


def _signed_inf_on_overflow(x: float) -> float:
    return math.copysign(math.inf, x)


def _unary(
    fn: Callable[[float], float],
    on_overflow: Callable[[float], float] = _inf_on_overflow,
    at_zero: float | None = None,
) -> Compute:
    """Wrap ``fn`` so domain errors give NaN and overflows give infinity."""

    def compute(values: Sequence[float], extra: Sequence[float]) -> float:
        x = values[0]
        if at_zero is not None and x == 0:
            return at_zero
        try:
            return fn(x)
        except OverflowError:
            return on_overflow(x)
        except ValueError:
            return math.nan

    return compute


def _integral(fn: Callable[[float], int]) -> Callable[[float], float]:
    def compute(x: float) -> float:
        if not math.isfinite(x):
            return x
        return math.copysign(float(fn(x)), x)

    return compute


def _round(x: float) -> float:
    """Round half away from zero."""
    if not math.isfinite(x):
        return x
    magnitude = abs(x)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(float(whole), x)


def _cbrt(x: float) -> float:
    if not math.isfinite(x) or x == 0:
        return x
    magnitude = abs(x)
    root = magnitude ** (1.0 / 3.0)
    nearest = round(root)
    if nearest**3 == magnitude:
        root = float(nearest)
    return math.copysign(root, x)


def _odd_integer(y: float) -> bool:
    return math.isfinite(y) and y.is_integer() and int(y) % 2 == 1


def _pow(values: Sequence[float], extra: Sequence[float]) -> float:
    if not extra:
        raise ValueError("pow requires an additional argument given with -o")
    x, y = values[0], extra[0]
    try:
        return math.pow(x, y)
    except OverflowError:
        return -math.inf if x < 0 and _odd_integer(y) else math.inf
    except ValueError:
        if x == 0:
            return math.copysign(math.inf, x) if _odd_integer(y) else math.inf
        return math.nan


def _max(values: Sequence[float], extra: Sequence[float]) -> float:
    return functools.reduce(lambda best, v: v if v > best else best, values, -math.inf)


def _min(values: Sequence[float], extra: Sequence[float]) -> float:
    return functools.reduce(lambda best, v: v if v < best else best, values, math.inf)


def _sum(values: Sequence[float], extra: Sequence[float]) -> float:
    return functools.reduce(lambda total, v: total + v, values, 0.0)


def _map(name: str, compute: Compute) -> Function:
    return Function(name, FunctionKind.MAP, compute)


def _reduce(name: str, compute: Compute) -> Function:
    return Function(name, FunctionKind.REDUCE, compute)


FUNCTIONS: tuple[Function, ...] = (
    _map("acos", _unary(math.acos)),
    _map("asin", _unary(math.asin)),
    _map("atan", _unary(math.atan)),
    _map("cbrt", _unary(_cbrt)),
    _map("ceil", _unary(_integral(math.ceil))),
    _map("cos", _unary(math.cos)),
    _map("cosh", _unary(math.cosh)),
    _map("exp", _unary(math.exp)),
    _map("abs", _unary(math.fabs)),
    _map("floor", _unary(_integral(math.floor))),
    _map("log", _unary(math.log, at_zero=-math.inf)),
    _map("log10", _unary(math.log10, at_zero=-math.inf)),
    _map("log2", _unary(math.log2, at_zero=-math.inf)),
    _map("pow", _pow),
    _map("round", _unary(_round)),
    _map("sin", _unary(math.sin)),
    _map("sinh", _unary(math.sinh, on_overflow=_signed_inf_on_overflow)),
    _map("sqrt", _unary(math.sqrt)),
    _map("tan", _unary(math.tan)),
    _map("tanh", _unary(math.tanh)),
    _map("trunc", _unary(_integral(math.trunc))),
    _reduce("max", _max),
    _reduce("min", _min),
    _reduce("sum", _sum),
)


def find_function(name: str) -> Function:
    """Return the function called ``name``; raise ValueError if there is none."""
    for function in FUNCTIONS:
        if function.name == name:
            return function
    raise ValueError("invalid function given")


def apply(
    function: Function, numbers: Sequence[float], extra: Sequence[float] = ()
) -> list[float]:
    """Return one result per number for a map, or a single result for a reduction."""
    if function.kind is FunctionKind.MAP:
        return [function.compute([x], extra) for x in numbers]
    return [function.compute(list(numbers), extra)]


def format_number(value: float) -> str:
    """Format ``value`` with 16 significant digits, as ``%.16g``."""
    return "%.16g" % value


def list_functions() -> str:
    """Return the listing of map and reduction functions."""
    def names(kind: FunctionKind) -> str:
        return "".join(f"\t{f.name}\n" for f in FUNCTIONS if f.kind is kind)

    return (
        "Map Functions\n"
        + names(FunctionKind.MAP)
        + "\nReduction Functions\n"
        + names(FunctionKind.REDUCE)
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the numsh command and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        opts, operands = getopt.gnu_getopt(args, "f:hLo:")
    except getopt.GetoptError as exc:
        sys.stderr.write(f"{PROG}: {exc.msg}\n")
        sys.stderr.write(f"Try '{PROG} -h' for more information.\n")
        return 1

    function: Function | None = None
    extra: list[float] = []
    for flag, value in opts:
        if flag == "-f":
            try:
                function = find_function(value)
            except ValueError as exc:
                sys.stderr.write(f"{PROG}: {exc}\n")
                return 1
        elif flag == "-h":
            sys.stdout.write(USAGE)
            return 0
        elif flag == "-L":
            sys.stdout.write(list_functions())
            return 0
        elif flag == "-o":
            try:
                extra.append(parse_float(value))
            except InvalidNumber:
                sys.stderr.write(f"{PROG}: invalid number given\n")
                return 1

    if function is None:
        sys.stderr.write(f"{PROG}: no function given\n")
        return 1

    texts = operands if operands else read_records(sys.stdin, "\n")
    try:
        numbers = [parse_float(text) for text in texts]
    except InvalidNumber:
        sys.stderr.write(f"{PROG}: invalid number given\n")
        return 1

    try:
        results = apply(function, numbers, extra)
    except ValueError as exc:
        sys.stderr.write(f"{PROG}: {exc}\n")
        return 1

    for result in results:
        sys.stdout.write(format_number(result) + "\n")
    return 0