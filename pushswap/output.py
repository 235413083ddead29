"""Formatted output with a small printf subset, and plain write helpers."""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterator, Optional, TextIO

_HEX_DIGITS = "0123456789abcdef"
_INT_BITS = 32
_POINTER_BITS = 64


class FormatError(ValueError):
    """Raised for a malformed format string or missing arguments."""


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _unsigned(value: Any, bits: int) -> int:
    return operator.index(value) & ((1 << bits) - 1)


def _signed(value: Any, bits: int) -> int:
    value = _unsigned(value, bits)
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _hex(value: int, upper: bool) -> str:
    digits = format(value, "x")
    return digits.upper() if upper else digits


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError("%c expects a single character")
        return value
    return chr(_unsigned(value, 8))


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = _unsigned(value, _POINTER_BITS)
    if address == 0:
        return "(nil)"
    return "0x" + _hex(address, upper=False)


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise FormatError(f"not enough arguments for %{spec}") from None


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        return _char(_next_arg(args, spec))
    if spec == "s":
        value = _next_arg(args, spec)
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _pointer(_next_arg(args, spec))
    if spec in ("d", "i"):
        return str(_signed(_next_arg(args, spec), _INT_BITS))
    if spec == "u":
        return str(_unsigned(_next_arg(args, spec), _INT_BITS))
    if spec in ("x", "X"):
        return _hex(_unsigned(_next_arg(args, spec), _INT_BITS), upper=spec == "X")
    # Unknown conversions produce nothing and consume no argument.
    return ""


def format_printf(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with the conversions c, s, p, d, i, u, x, X and %%.

    Integers are taken as 32-bit values (``%p`` as 64-bit); a ``None`` string
    renders as ``(null)`` and a null pointer as ``(nil)``. A lone ``%`` at the
    end of ``fmt`` raises FormatError.
    """
    pieces: list[str] = []
    arg_iter = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise FormatError("format string ends with '%'")
        pieces.append(_convert(spec, arg_iter))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write ``format_printf(fmt, *args)`` to ``stream``; return the characters written."""
    text = format_printf(fmt, *args)
    _stream(stream).write(text)
    return len(text)


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character."""
    _stream(stream).write(_char(c))


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a text as is."""
    _stream(stream).write(s)


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a text followed by a newline."""
    _stream(stream).write(s + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write an integer in decimal."""
    _stream(stream).write(str(operator.index(n)))