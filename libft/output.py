"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union

from libft.convert import itoa


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: Union[int, str], fd: int) -> None:
    """Write a single character to fd; an int is written as its low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        _write_all(fd, c.encode("utf-8"))
    elif isinstance(c, int):
        _write_all(fd, bytes([c & 0xFF]))
    else:
        raise TypeError(f"expected int or str, got {type(c).__name__}")


def putstr_fd(s: Optional[str], fd: int) -> None:
    """Write s, up to its first NUL, to fd. None writes nothing."""
    if s is None:
        return
    _write_all(fd, s.split("\0", 1)[0].encode("utf-8"))


def putendl_fd(s: Optional[str], fd: int) -> None:
    """Write s, up to its first NUL, and a newline to fd. None writes nothing."""
    if s is None:
        return
    _write_all(fd, s.split("\0", 1)[0].encode("utf-8") + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal text of a 32-bit signed integer to fd."""
    _write_all(fd, itoa(n).encode("ascii"))