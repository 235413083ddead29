"""Byte-buffer helpers: zeroing, filling, copying, moving, searching, comparing."""

from __future__ import annotations

from typing import Optional

_BYTE_MASK = 0xFF


def _check_span(buf_len: int, offset: int, n: int, name: str) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    if offset < 0:
        raise ValueError(f"{name} offset must not be negative")
    if offset + n > buf_len:
        raise ValueError(f"{name} is too short for {n} bytes at offset {offset}")


def zero(buf: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to zero and return it."""
    return fill(buf, 0, n)


def allocate_zeroed(count: int, size: int) -> bytearray:
    """A new zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def fill(buf: bytearray, c: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``c`` (low 8 bits) and return it."""
    _check_span(len(buf), 0, n, "buffer")
    buf[:n] = bytes([c & _BYTE_MASK]) * n
    return buf


def copy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest`` and return it."""
    _check_span(len(dest), 0, n, "destination")
    _check_span(len(src), 0, n, "source")
    dest[:n] = src[:n]
    return dest


def move(dest: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Move ``n`` bytes within ``dest`` from ``src_offset`` to ``dest_offset``.

    The regions may overlap; the result is as if the bytes were first copied
    aside.
    """
    _check_span(len(dest), src_offset, n, "source")
    _check_span(len(dest), dest_offset, n, "destination")
    dest[dest_offset : dest_offset + n] = bytes(dest[src_offset : src_offset + n])
    return dest


def find_byte(buf: bytes, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` (low 8 bits) in the first ``n`` bytes."""
    _check_span(len(buf), 0, n, "buffer")
    index = buf.find(bytes([c & _BYTE_MASK]), 0, n)
    return None if index == -1 else index


def compare_bytes(b1: bytes, b2: bytes, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first differing bytes, or 0 when the spans
    are equal.
    """
    _check_span(len(b1), 0, n, "first buffer")
    _check_span(len(b2), 0, n, "second buffer")
    for a, b in zip(b1[:n], b2[:n]):
        if a != b:
            return a - b
    return 0