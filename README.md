# libft

Small helpers that behave like the classic C library routines: ASCII
character classification, byte-buffer operations, C-style string helpers, a
minimal `printf`, a singly linked list and a line reader for file descriptors.

Everything is a library. There is no command-line program.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `libft.charclass`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
`to_lower`. Each function takes either an integer character code or a
one-character string. Only ASCII ranges count. `to_upper` and `to_lower`
return a value of the same type as their argument.

### `libft.memory`

These functions work on `bytearray` and `bytes` buffers:

- `memset(buf, c, n)` fills the first `n` bytes. `bzero(buf, n)` zeroes them.
- `calloc(nmemb, size)` returns a zero-filled `bytearray`.
- `memcpy(dest, src, n)` copies into `dest` and returns it. When both buffers
  are `None` it returns `None`.
- `memmove(buf, dest_offset, src_offset, n)` copies a region within a single
  buffer. It handles overlapping regions correctly.
- `memchr(data, c, n)` returns an index or `None`.
- `memcmp(a, b, n)` returns the difference of the first unequal bytes, or 0.

A negative count, or a count past the end of a buffer, raises `ValueError`.

### `libft.strfuncs`

`strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
`atoi`, `itoa`.

- Strings follow C rules: a `"\0"` ends them.
- The search functions return an index or `None`.
- `strlcpy(src, size)` and `strlcat(dst, src, size)` return a tuple. It holds
  the resulting string and the length the untruncated result would have had.
- `atoi` skips leading whitespace and accepts one sign. It wraps its result to
  the signed 32-bit range.
- `itoa` raises `OverflowError` outside that range.

### `libft.strtransform`

`strdup`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`.

- `split` drops empty words.
- `striteri(chars, f)` changes a mutable sequence of characters in place. When
  `f` returns a character, that character replaces the old one.

### `libft.output`

`putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`. Each one writes UTF-8
text to a raw file descriptor.

### `libft.printf`

- `format_printf(fmt, *args)` returns the formatted text.
- `printf(fmt, *args)` writes the text to standard output and returns its
  length.

The conversions are `%c %s %d %i %u %x %X %p %%`:

- `%s` of `None` gives `(null)`.
- `%p` of 0 or `None` gives `(nil)`.
- Integers wrap to 32 bits, and to 64 bits for `%p`.
- An unknown conversion is copied as it is.

Missing arguments raise `TypeError`. A trailing lone `%` raises `ValueError`.

### `libft.linked_list`

`Node` and `LinkedList`. `LinkedList` has these members:

- `push_front` and `push_back`
- `last()`, which raises `IndexError` when the list is empty
- `clear(delete)`, which passes each content to an optional callback
- `iterate(f)`
- `map(f)`, which returns a new list
- `len()` and iteration

### `libft.next_line`

`LineReader(fd, buffer_size=4)` reads a file descriptor in chunks of
`buffer_size` bytes. `read_line()` returns each line with its newline, or
`None` at end of input. Iterating over the reader yields the lines in turn.
A `buffer_size` below 1 raises `ValueError`.

## Examples

```python
from libft.strfuncs import atoi, itoa
from libft.strtransform import split, strtrim
from libft.printf import format_printf

atoi("   -42abc")              # -42
itoa(-2147483648)              # "-2147483648"
split("  hello  world ", " ")  # ["hello", "world"]
strtrim("xxhixx", "x")         # "hi"
format_printf("%d is %x in hex", 255, 255)  # "255 is ff in hex"
```

```python
import os
from libft.next_line import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd, 4):
    print(line, end="")
os.close(fd)
```

```python
from libft.linked_list import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
doubled = items.map(lambda x: x * 2)
list(doubled)                  # [0, 2, 4, 6]
len(items)                     # 4
```