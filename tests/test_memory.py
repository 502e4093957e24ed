import pytest
from hypothesis import given
from hypothesis import strategies as st

from libft.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def _sign(x):
    return (x > 0) - (x < 0)


def test_memset_source_example():
    buf = bytearray(b"hello")
    result = memset(buf, ord("a"), len(buf))
    assert result is buf
    assert buf == bytearray(b"a" * len(buf))


@given(st.binary(min_size=1, max_size=64), st.integers(0, 1000), st.data())
def test_memset_fills_prefix_only(data, c, draw):
    n = draw.draw(st.integers(0, len(data)))
    buf = bytearray(data)
    memset(buf, c, n)
    assert all(b == c & 0xFF for b in buf[:n])
    assert buf[n:] == bytearray(data[n:])
    assert len(buf) == len(data)


@given(st.binary(max_size=64), st.data())
def test_bzero(data, draw):
    n = draw.draw(st.integers(0, len(data)))
    buf = bytearray(data)
    bzero(buf, n)
    assert buf[:n] == bytearray(n)
    assert buf[n:] == bytearray(data[n:])


def test_memset_too_long():
    with pytest.raises(ValueError):
        memset(bytearray(3), 0, 4)


def test_memset_negative_length():
    with pytest.raises(ValueError):
        memset(bytearray(3), 0, -1)


@given(st.binary(max_size=64))
def test_memcpy_copies(src):
    dst = bytearray(len(src) + 5)
    result = memcpy(dst, src, len(src))
    assert result is dst
    assert dst[: len(src)] == src
    assert dst[len(src):] == bytearray(5)


def test_memcpy_both_none():
    assert memcpy(None, None, 5) is None
    assert memmove(None, None, 5) is None


def test_memmove_overlap_forward():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    result = memmove(view[2:], view, 4)
    assert bytes(result) == b"abcd"
    assert buf == bytearray(b"ababcd")


def test_memmove_overlap_backward():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    result = memmove(view, view[2:], 4)
    assert bytes(result) == b"cdefef"
    assert buf == bytearray(b"cdefef")


@given(st.binary(max_size=64))
def test_memmove_equals_memcpy_for_separate_buffers(src):
    a = bytearray(len(src))
    b = bytearray(len(src))
    memcpy(a, src, len(src))
    memmove(b, src, len(src))
    assert a == b == bytearray(src)


def test_memchr_source_example():
    buffer = bytes(range(10))
    assert memchr(buffer, 8, len(buffer)) == 8


def test_memchr_not_found_and_limit():
    buffer = bytes(range(10))
    assert memchr(buffer, 8, 8) is None
    assert memchr(buffer, 42, len(buffer)) is None


def test_memchr_uses_low_byte():
    buffer = bytes(range(10))
    assert memchr(buffer, 0x100 + 3, len(buffer)) == 3


@given(st.binary(min_size=1, max_size=64), st.integers(0, 255))
def test_memchr_finds_first(data, c):
    idx = memchr(data, c, len(data))
    if c in data:
        assert idx == data.index(c)
    else:
        assert idx is None


def test_memcmp_source_example():
    s1 = b"\xff\xaa\xde\x12"
    s2 = b"\xff\xaa\xde\x12MACOSAAAAA"
    assert memcmp(s1, s2, 4) == 0


@given(st.binary(max_size=32), st.binary(max_size=32))
def test_memcmp_sign_matches_bytes_order(a, b):
    n = min(len(a), len(b))
    expected = (a[:n] > b[:n]) - (a[:n] < b[:n])
    assert _sign(memcmp(a, b, n)) == expected


@given(st.binary(max_size=32))
def test_memcmp_reflexive(a):
    assert memcmp(a, a, len(a)) == 0


def test_memcmp_bytes_are_unsigned():
    assert memcmp(b"\xff", b"\x00", 1) > 0


def test_memcmp_too_long():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


@given(st.integers(0, 100), st.integers(0, 100))
def test_calloc_zeroed(count, size):
    buf = calloc(count, size)
    assert buf == bytearray(count * size)


def test_calloc_source_example_size():
    buf = calloc(10, 4)
    assert len(buf) == 10 * 4
    assert not any(buf)


def test_calloc_overflow():
    with pytest.raises(MemoryError):
        calloc(SIZE_MAX, 2)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)