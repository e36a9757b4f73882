# libft

A small collection of helpers for characters, numbers, byte buffers, string
search and transformation, formatted output, a singly linked list, and
line-by-line reading from file descriptors. It has no dependencies beyond
the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Modules

### `libft.ctype`

`isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper` and
`tolower`. Each accepts an integer character code or a one-character string;
only the ASCII range is classified or converted. `toupper` and `tolower`
return the same kind of value they were given (`toupper("a") == "A"`,
`toupper(97) == 65`).

### `libft.numbers`

- `atoi(s)` skips leading whitespace, accepts one `-` or `+`, and reads
  digits up to the first non-digit. A magnitude beyond the signed 64-bit
  range gives `-1` for positive input and `0` for negative input; otherwise
  the result wraps to a signed 32-bit integer.
- `itoa(n)` formats a signed 32-bit integer and raises `OverflowError`
  outside that range.
- `int_sqrt(nb)` returns the exact integer root of a perfect square and `0`
  otherwise; `0`, `1` and values above 46340² also give `0`.

### `libft.memory`

Operations on `bytearray` buffers: `memset`, `bzero`, `memcpy`, `memccpy`,
`memmove`, `memchr`, `memcmp` and `memalloc`.

- `memccpy` returns the offset just past the copied stop byte, or `None`.
- `memmove(buf, dst, src, n)` moves bytes between offsets of one buffer;
  the ranges may overlap.
- `memchr` returns an offset or `None`; `memcmp` returns the difference of
  the first differing bytes, or `0`.
- `memalloc(size)` returns a zero-filled `bytearray`, or `None` for size 0.

Negative lengths raise `ValueError`; lengths past the end of a buffer raise
`IndexError`.

### `libft.search`

`strlen`, `strchr`, `strrchr`, `strstr`, `strnstr`, `strcmp`, `strncmp`,
`strequ` and `strnequ`. A string ends at its first NUL character. Searches
return an index or `None`; searching for NUL finds the end of the string.
Comparisons return the code difference of the first differing characters.
`strequ`/`strnequ` return `False` when either string is `None`.

### `libft.transform`

- `strsub(s, start, length)` and `strjoin(s1, s2)`.
- `strtrim(s)` strips spaces, tabs and newlines at both ends.
- `strsplit(s, c)` splits on one character and drops empty fields.
- `strmap(s, func)` and `strmapi(s, func)` map every character (with its
  index, for `strmapi`); an empty or missing string gives `None`.
- `strlcat(dst, src, dstsize)` returns a tuple of the resulting string and
  the length the full result would have had, as if `dst` lived in a buffer
  of `dstsize` characters.

### `libft.output`

`putchar`, `putstr`, `putendl`, `putnbr` and `print_digits` write to the
text stream given as `file`, or to standard output when none is given.

### `libft.linked`

`Node` (with `content` and `next`) and `LinkedList`, built from an optional
iterable, with `push_front`, `pop_front` (raises `IndexError` when empty),
`for_each`, `map` (returns a new list), `clear`, iteration and `len()`.

### `libft.linereader`

`LineReader(buffer_size=32)` reads one line at a time from any number of
file descriptors, reading in chunks of `buffer_size` bytes and keeping
leftover data per descriptor. `read_line(fd)` returns the line without its
newline, the final unterminated line as is, and `None` at end of input;
`forget(fd)` discards what was kept for a descriptor. `get_next_line(fd)`
uses one shared reader.

## Example

```python
import os
import sys

from libft.transform import strsplit
from libft.output import putendl
from libft.linereader import get_next_line

print(strsplit("**hello*world**", "*"))   # ['hello', 'world']
putendl("done", sys.stdout)

fd = os.open("map.fdf", os.O_RDONLY)
while (line := get_next_line(fd)) is not None:
    print(line)
os.close(fd)
```

## What it does not do

This is a library only. It has no command-line tool, and it does not parse,
project or draw wire-frame maps; it only provides the building blocks, such
as reading a map file line by line and splitting each line into fields.