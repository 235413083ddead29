"""String helpers: bounded copies, searches, comparison, slicing and splitting."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional

_NUL = "\0"


def _char(c: int | str) -> str:
    if isinstance(c, int):
        return chr(c)
    if len(c) != 1:
        raise ValueError("expected a single character")
    return c


def _non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and the full length of ``src``; a result length
    below that signals truncation. A ``size`` of 0 copies nothing.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` so the result holds at most ``size - 1`` characters.

    Returns the new text and the length it tried to create: ``len(src)`` plus
    ``len(dst)``, or plus ``size`` when ``dst`` already fills the bound.
    """
    _non_negative(size, "size")
    src_len = len(src)
    dst_len = len(dst)
    if size == 0:
        return dst, src_len
    total = src_len + (size if dst_len >= size else dst_len)
    room = max(size - 1 - dst_len, 0)
    return dst + src[:room], total


def find_char(s: str, c: int | str) -> Optional[int]:
    """Index of the first ``c`` in ``s``; NUL matches the end of the text."""
    ch = _char(c)
    index = s.find(ch)
    if index != -1:
        return index
    return len(s) if ch == _NUL else None


def find_last_char(s: str, c: int | str) -> Optional[int]:
    """Index of the last ``c`` in ``s``; NUL matches the end of the text."""
    ch = _char(c)
    index = s.rfind(ch)
    if index != -1:
        return index
    return len(s) if ch == _NUL else None


def find_within(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` in the first ``length`` characters of ``big``.

    An empty ``little`` is found at 0.
    """
    _non_negative(length, "length")
    if not little:
        return 0
    index = big.find(little, 0, length)
    return None if index == -1 else index


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters, stopping at the end of either text.

    Returns the difference of the first differing character codes, with the
    end of a text counting as code 0, or 0 when they agree.
    """
    _non_negative(n, "n")
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def substring(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` from ``start``; empty past the end."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start : start + length]


def join(s1: str, s2: str) -> str:
    """Concatenate two texts."""
    return s1 + s2


def trim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def _separator(sep: int | str) -> str:
    ch = _char(sep)
    if ch == _NUL:
        raise ValueError("separator must not be NUL")
    return ch


def split(s: str, sep: int | str) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    return [word for word in s.split(_separator(sep)) if word]


def count_words(s: str, sep: int | str) -> int:
    """Number of non-empty pieces ``split`` would give."""
    return len(split(s, sep))


def map_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new text from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def iter_indexed(
    chars: MutableSequence[str], func: Callable[[int, MutableSequence[str]], None]
) -> None:
    """Call ``func(index, chars)`` for each position; ``func`` may edit ``chars[index]``."""
    for index in range(len(chars)):
        func(index, chars)