"""Byte-buffer operations over bytearray and other bytes-like objects."""

from __future__ import annotations

import sys

SIZE_MAX = sys.maxsize * 2 + 1


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative: {n}")
    for length in lengths:
        if n > length:
            raise ValueError(f"byte count {n} exceeds buffer length {length}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with value (truncated to a byte); return buf."""
    _check_count(n, len(buf))
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first n bytes of buf."""
    memset(buf, 0, n)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first n bytes of src to the start of dest; return dest."""
    _check_count(n, len(dest), len(src))
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy n bytes within buf from src_offset to dest_offset, overlap allowed."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buf) - dest_offset, len(buf) - src_offset)
    buf[dest_offset:dest_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def memchr(data: bytes, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to value within n bytes, or None."""
    _check_count(n, len(data))
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare n bytes; return the difference of the first differing pair, or 0."""
    _check_count(n, len(a), len(b))
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of nmemb * size bytes (one byte when either is zero)."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if nmemb == 0 or size == 0:
        return bytearray(1)
    if nmemb > SIZE_MAX // size:
        raise MemoryError(f"cannot allocate {nmemb} elements of {size} bytes")
    return bytearray(nmemb * size)