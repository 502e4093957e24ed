"""Conversion between decimal text and integers."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_SPACES = " \f\n\r\t\v"
_DIGITS = "0123456789"


def atoi(text: str) -> int:
    """Parse a leading decimal integer from text.

    Leading whitespace (space, \\f, \\n, \\r, \\t, \\v) is skipped, then one
    optional '+' or '-' sign is read, then ASCII digits up to the first
    character that is not one. Text with no digits there yields 0.
    """
    body = text.split("\0", 1)[0].lstrip(_SPACES)
    sign = 1
    if body[:1] in ("+", "-"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    number = 0
    for ch in body:
        if ch not in _DIGITS:
            break
        number = number * 10 + (ord(ch) - ord("0"))
    return sign * number


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer.

    Raises OverflowError when n lies outside the 32-bit signed range.
    """
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)