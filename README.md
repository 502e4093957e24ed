# libft

Small helpers for ASCII characters, byte buffers, strings, decimal
conversion, writing to file descriptors and singly linked lists. The package
has no dependencies outside the standard library.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
pytest
```

## Modules

### `libft.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper` and
`to_lower` accept either an integer code or a one-character string.
Classification covers the ASCII range only (`is_print` is true for codes 32
to 126). `to_upper` and `to_lower` change only ASCII letters and return the
same kind of value they were given. A string of any other length raises
`ValueError`.

### `libft.memory`

Operations on mutable byte buffers such as `bytearray`:

- `memset(buf, c, n)` fills the first `n` bytes with the low byte of `c` and
  returns `buf`; `bzero(buf, n)` fills them with zeros.
- `memcpy(dst, src, n)` and `memmove(dst, src, n)` copy `n` bytes and return
  `dst`; both return `None` when `dst` and `src` are both `None`.
- `memchr(data, c, n)` returns the index of the first matching byte, or
  `None`.
- `memcmp(a, b, n)` returns the difference of the first unequal bytes, or 0.
- `calloc(count, size)` returns a zero-filled `bytearray`, raising
  `MemoryError` when the request is too large.

A negative length, or one larger than a buffer, raises `ValueError`.

### `libft.strings`

Functions that measure or search stop at the first NUL character. Searches
return an index rather than a reference, or `None` when nothing is found.

- `strlen`, `strdup`, `strchr`, `strrchr` (searching for NUL finds index
  `strlen(s)`), `strncmp`, `strnstr` (an empty needle is found at 0).
- `strlcpy(dst, src, dstsize)` and `strlcat(dst, src, dstsize)` write into a
  `bytearray`, always NUL-terminating within `dstsize`, and return the length
  of the string they tried to build.
- `substr(s, start, length)`, `strjoin(s1, s2)`, `strtrim(s, charset)`,
  `split(s, sep)` (non-empty pieces only).
- `strmapi(s, f)` builds a new string from `f(index, char)`;
  `striteri(chars, f)` replaces each item of a mutable sequence in place with
  `f(index, item)`.

### `libft.convert`

- `atoi(text)` skips leading whitespace, reads one optional sign and then
  digits; text with no digits gives 0.
- `itoa(n)` returns the decimal text of a 32-bit signed integer and raises
  `OverflowError` outside that range.

### `libft.output`

`putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd` write to an open
file descriptor. `putstr_fd` and `putendl_fd` write nothing for `None`;
`putnbr_fd` accepts 32-bit signed integers only.

### `libft.linked`

`Node` holds a `content` and a `next` node. `LinkedList` is built from an
optional iterable and supports `len()`, iteration over contents,
`push_front`, `push_back`, `last`, `delete_node` (raises `ValueError` for a
node not in the list), `clear`, `iterate` and `map`. The `delete` callbacks
receive each removed content; `map` hands already produced contents to
`delete` if `f` raises, then re-raises.

## Examples

```python
from libft.strings import split, strtrim, substr
from libft.convert import atoi, itoa

split("  hello  world ", " ")      # ['hello', 'world']
strtrim("xxhixx", "x")             # 'hi'
substr("Hello, World!", 0, 5)      # 'Hello'
atoi("  -42abc")                   # -42
itoa(-2147483648)                  # '-2147483648'
```

```python
from libft.memory import calloc, memset

buf = calloc(4, 2)                 # bytearray of 8 zero bytes
memset(buf, ord("a"), 3)           # first three bytes set to b"a"
```

```python
import sys
from libft.output import putendl_fd, putnbr_fd

putendl_fd("hello", sys.stdout.fileno())
putnbr_fd(-123, sys.stdout.fileno())
```

```python
from libft.linked import LinkedList, Node

items = LinkedList(["hello", "world"])
items.push_front(Node("first"))
items.push_back(Node("last"))
len(items)                          # 4
list(items)                         # ['first', 'hello', 'world', 'last']
upper = items.map(str.upper, None)  # new list with mapped contents
```

## What it does not do

This is a library only: it installs no command-line program.