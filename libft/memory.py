"""Byte-buffer operations: fill, copy, search, compare and zeroed allocation."""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_length(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of {len(buf)} bytes")


def memset(buf, c: int, n: int):
    """Fill the first n bytes of buf with the low byte of c and return buf."""
    _check_length(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf, n: int) -> None:
    """Zero the first n bytes of buf."""
    memset(buf, 0, n)


def memcpy(dst, src, n: int):
    """Copy n bytes from src into the start of dst and return dst.

    If both dst and src are None, None is returned.
    """
    if dst is None and src is None:
        return None
    _check_length(n, dst, src)
    dst[:n] = src[:n]
    return dst


def memmove(dst, src, n: int):
    """Copy n bytes from src into dst, correct even when the regions overlap."""
    if dst is None and src is None:
        return None
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memchr(data, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to the low byte of c within
    the first n bytes of data, or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Compare the first n bytes; return the difference of the first unequal
    pair of bytes, or 0 if they are all equal."""
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes.

    Raises MemoryError when the request is too large to be represented.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count * size >= SIZE_MAX // size:
        raise MemoryError(f"cannot allocate {count} x {size} bytes")
    return bytearray(count * size)