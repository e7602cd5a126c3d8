# ftkit

Small helpers that follow the behaviour of the classic C library
routines. The package covers character classification, byte-buffer
operations, NUL-terminated string search and copy functions, integer
conversion, a minimal `printf`, a file-descriptor line reader and a
singly linked list.

Strings are treated as ending at their first NUL character (`"\0"`, or
byte 0 in bytes-like objects). Functions that return a position give an
index, and `None` stands for "not found".

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `ftkit.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower`
and `to_upper`. Each takes a character code (`int`) or a one-character
`str`. The classifiers return `bool`; the converters return a value of
the same kind they were given and change only ASCII letters.

### `ftkit.memory`

`memset`, `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy` and `memmove`.
Destinations are `bytearray` objects or writable `memoryview` slices of
one. A length larger than a buffer raises `ValueError`; a read-only
destination raises `TypeError`. `calloc(nmemb, size)` returns a zeroed
`bytearray` and raises `OverflowError` when the product exceeds the
64-bit size range. `memchr` returns an index or `None`; `memcmp`
returns the difference of the first unequal byte pair.

### `ftkit.convert`

- `atoi(text)` skips leading whitespace, reads one optional sign and
  then digits; text without digits gives 0, and the result wraps to a
  signed 32-bit value.
- `itoa(n)` returns the decimal text of a signed 32-bit integer and
  raises `OverflowError` outside that range.
- `split(text, sep)` splits on one character and drops empty words.

### `ftkit.strings`

`strlen`, `strchr`, `strrchr`, `strcmp`, `strncmp`, `strnstr` and
`strdup`. `strlen(None)` is 0. Searching for NUL with `strchr` or
`strrchr` finds the terminator at index `strlen(s)`. The comparisons
return the code difference of the first unequal pair, the shorter
string taking part with its terminator. `strnstr` finds a needle only
when it lies wholly within the first `length` characters; an empty
needle is found at 0.

### `ftkit.strtools`

- `strjoin(s1, s2)`, `substr(s, start, length)` and `strmapi(s, func)`
  build new strings; `substr` gives `""` for a start past the end.
- `strtrim(s, charset)` strips characters of `charset` from both ends;
  a string of at most one character always gives `""`.
- `striteri(buf, func)` calls `func(index, item)` on a list of
  characters or a `bytearray` up to its terminator, replacing the item
  whenever `func` returns something other than `None`.
- `strlcpy(dst, src, size)`, `strlcat(dst, src, size)` and
  `strncpy(dst, src, n)` write into a `bytearray` with the usual bounded
  copy rules. `strlcpy` and `strlcat` return the length the full result
  would have had; `strncpy` pads with NULs and returns `dst`.

### `ftkit.output`

`put_char_fd`, `put_str_fd`, `put_endl_fd` and `put_nbr_fd` write
straight to a file descriptor with `os.write`. Strings are encoded in
UTF-8; `None` writes nothing; an `int` given to `put_char_fd` is written
as one byte.

### `ftkit.printf`

`format_printf(fmt, *args)` builds the text for the conversions `%c`,
`%s`, `%p`, `%d`, `%u`, `%x`, `%X` and `%%`. Integers are taken as
32-bit values. `%s` of `None` gives `(null)`; `%p` of `None` or 0 gives
`0x0` on Linux and `(nil)` elsewhere, and other objects print their
`id`. An unknown conversion prints its own letter, a lone `%` at the
end prints itself, and too few arguments raise `TypeError`.
`printf(fmt, *args)` writes the same text to standard output and
returns the number of bytes written.

### `ftkit.reader`

`LineReader(buffer_size=10, encoding="utf-8")` reads lines from raw
file descriptors in the range 0 to 255, keeping leftover data per
descriptor. `read_line(fd)` returns the next line with its newline, the
last line without one if the input does not end in a newline, and
`None` at end of input. A read error discards the data buffered for
that descriptor and is raised. `get_next_line(fd)` uses one shared
reader.

### `ftkit.linked`

`LinkedList(items=())` is a singly linked list with `add_front`,
`add_back`, `last` (raises `IndexError` when empty), `iterate(func)`,
`clear(delete=None)`, `len()` and iteration. `map(func, delete=None)`
returns a new list; if `func` returns `None`, the contents mapped so far
are passed to `delete` and `ValueError` is raised.

## Example

```python
from ftkit.convert import atoi, itoa, split
from ftkit.printf import format_printf
from ftkit.linked import LinkedList

atoi("  -42abc")                   # -42
itoa(-2147483648)                  # "-2147483648"
split("a,,b,c", ",")               # ["a", "b", "c"]
format_printf("%d%% %x", 50, 255)  # "50% ff"

items = LinkedList([1, 2])
doubled = items.map(lambda v: v * 2)
list(doubled)                      # [2, 4]
```

## What it does not do

ftkit is a library only. It has no command-line program, no window or
graphics, and no map or game logic; it provides the building blocks
listed above and nothing on top of them.