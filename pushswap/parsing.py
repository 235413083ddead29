"""Validation and conversion of the program's arguments into integers."""

from __future__ import annotations

from itertools import takewhile
from typing import Iterable, Sequence

from pushswap.strings import split

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"
_SKIPPABLE = "+- "


class InputError(ValueError):
    """Raised when the arguments are not a valid list of distinct integers."""


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def parse_long(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is read, then digits up
    to the first non-digit. Text with no digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = "".join(takewhile(_is_digit, rest))
    value = int(digits) if digits else 0
    return -value if negative else value


def check_duplicates(args: Iterable[str]) -> None:
    """Raise InputError when two arguments parse to the same number."""
    seen: set[int] = set()
    for arg in args:
        value = parse_long(arg)
        if value in seen:
            raise InputError(f"duplicate value {value}")
        seen.add(value)


def _valid_token(arg: str) -> bool:
    chars = iter(arg)
    for ch in chars:
        # A sign or a space may stand only directly before a digit.
        if ch in _SKIPPABLE:
            ch = next(chars, "")
        if not (ch and _is_digit(ch)):
            return False
    return True


def check_syntax(args: Iterable[str]) -> None:
    """Raise InputError when an argument holds anything but digits and signs."""
    for arg in args:
        if not _valid_token(arg):
            raise InputError(f"invalid argument {arg!r}")


def check_limits(values: Iterable[int]) -> None:
    """Raise InputError when a value does not fit a 32-bit signed integer."""
    for value in values:
        if not INT_MIN <= value <= INT_MAX:
            raise InputError(f"value {value} out of range")


def parse_arguments(argv: Sequence[str]) -> list[int]:
    """Turn the arguments into the list of numbers to sort, first on top.

    A single argument is split on spaces into several numbers.
    """
    args = list(argv)
    if len(args) == 1:
        args = split(args[0], " ")
    check_duplicates(args)
    check_syntax(args)
    values = [parse_long(arg) for arg in args]
    check_limits(values)
    return values