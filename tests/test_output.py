import os

import pytest
from hypothesis import given, strategies as st

from libft.convert import INT_MAX, INT_MIN
from libft.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


def capture(write):
    r, w = os.pipe()
    try:
        try:
            write(w)
        finally:
            os.close(w)
        chunks = []
        while True:
            chunk = os.read(r, 4096)
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)
    finally:
        os.close(r)


def test_putchar_str():
    assert capture(lambda fd: putchar_fd("a", fd)) == b"a"


def test_putchar_int_low_byte():
    assert capture(lambda fd: putchar_fd(0x141, fd)) == b"A"


def test_putchar_rejects_long_string():
    with pytest.raises(ValueError):
        putchar_fd("ab", 1)


def test_putstr():
    assert capture(lambda fd: putstr_fd("Hello", fd)) == b"Hello"


def test_putstr_none_writes_nothing():
    assert capture(lambda fd: putstr_fd(None, fd)) == b""


def test_putstr_stops_at_nul():
    assert capture(lambda fd: putstr_fd("ab\0cd", fd)) == b"ab"


def test_putendl():
    assert capture(lambda fd: putendl_fd("Hello", fd)) == b"Hello\n"


def test_putendl_none_writes_nothing():
    assert capture(lambda fd: putendl_fd(None, fd)) == b""


def test_putnbr_int_min():
    assert capture(lambda fd: putnbr_fd(-2147483648, fd)) == b"-2147483648"


def test_putnbr_zero():
    assert capture(lambda fd: putnbr_fd(0, fd)) == b"0"


def test_putnbr_out_of_range():
    with pytest.raises(OverflowError):
        putnbr_fd(INT_MAX + 1, 1)


@given(st.integers(min_value=INT_MIN, max_value=INT_MAX))
def test_putnbr_round_trip(n):
    assert int(capture(lambda fd: putnbr_fd(n, fd))) == n


@given(st.text(alphabet=st.characters(blacklist_characters="\0"), max_size=50))
def test_putendl_is_putstr_plus_newline(s):
    assert capture(lambda fd: putendl_fd(s, fd)) == capture(
        lambda fd: putstr_fd(s, fd)
    ) + b"\n"