"""String helpers: length, bounded copy and concatenation, search, compare,
slicing, joining, trimming, splitting and per-character mapping.

Functions that search or measure treat a NUL character as the end of the
string, as a NUL-terminated string would.
"""

from __future__ import annotations

from itertools import chain, islice, repeat
from typing import Callable, MutableSequence, Optional, Union

CharLike = Union[int, str]


def _char(c: CharLike) -> str:
    """Return c as a one-character string; an int is truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def _content(s: str) -> str:
    """Return s up to, not including, its first NUL character."""
    return s.split("\0", 1)[0]


def _cbytes(data) -> bytes:
    """Return the bytes of data up to its first NUL byte."""
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    return raw.split(b"\0", 1)[0]


def _check_size(dst, dstsize: int) -> None:
    if dstsize < 0:
        raise ValueError(f"dstsize must not be negative, got {dstsize}")
    if dstsize > len(dst):
        raise ValueError(f"dstsize {dstsize} exceeds buffer of {len(dst)} bytes")


def strlen(s: str) -> int:
    """Number of characters before the first NUL."""
    return len(_content(s))


def strlcpy(dst: bytearray, src, dstsize: int) -> int:
    """Copy src into dst, writing at most dstsize bytes including the
    terminating NUL. Return the length of src."""
    data = _cbytes(src)
    _check_size(dst, dstsize)
    if dstsize > 0:
        count = min(len(data), dstsize - 1)
        dst[:count] = data[:count]
        dst[count] = 0
    return len(data)


def strlcat(dst: Optional[bytearray], src, dstsize: int) -> int:
    """Append src to the NUL-terminated string in dst so that the whole
    string, terminator included, fits in dstsize bytes.

    Return the length of the string it tried to build; if dstsize does not
    reach past the current string, return dstsize plus the length of src.
    """
    if dst is None and dstsize == 0:
        return 0
    data = _cbytes(src)
    _check_size(dst, dstsize)
    dst_len = len(_cbytes(dst))
    if dstsize <= dst_len:
        return dstsize + len(data)
    count = min(len(data), dstsize - 1 - dst_len)
    dst[dst_len:dst_len + count] = data[:count]
    dst[dst_len + count] = 0
    return dst_len + len(data)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of c, or None.

    Searching for NUL finds the terminator, at index strlen(s).
    """
    text = _content(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of c, or None.

    Searching for NUL finds the terminator, at index strlen(s).
    """
    text = _content(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the difference of the first
    differing character codes, the end of a string counting as 0."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    left = chain(map(ord, _content(s1)), [0])
    right = chain(map(ord, _content(s2)), repeat(0))
    for x, y in islice(zip(left, right), n):
        if x != y or x == 0:
            return x - y
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first occurrence of needle lying wholly within the first
    length characters of haystack, or None. An empty needle is found at 0."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    wanted = _content(needle)
    if not wanted:
        return 0
    index = _content(haystack)[:length].find(wanted)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """A copy of s up to its first NUL."""
    return str(_content(s))


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s beginning at start; empty when start
    lies at or past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """s1 followed by s2."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """s with every leading and trailing character found in charset removed."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list[str]:
    """The non-empty runs of s between occurrences of sep."""
    return [part for part in s.split(_char(sep)) if part]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string made of f(index, char) for every character of s."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence, f: Callable[[int, object], object]) -> None:
    """Replace every item of chars, in place, with f(index, item)."""
    for index, ch in enumerate(chars):
        chars[index] = f(index, ch)