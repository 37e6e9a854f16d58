# minishparse

This package holds low-level helpers for a small POSIX-like shell. They follow
the classic C library semantics, but they take and return Python values:
`str`, `bytes`, `bytearray` and `int`. They return `None` where a lookup
finds nothing, and they raise exceptions on bad arguments.

The package needs Python 3.10 or later and has no runtime dependencies.

## Modules

### `minishparse.charclass`

Each of these takes a character, given either as a one-character `str` or as
an integer code. Passing a `str` of any other length raises `ValueError`.

- `isalpha`, `isdigit`, `isalnum`: ASCII tests that return `bool`.
- `isascii`: true for codes 0 to 127.
- `isprint`: true for codes 32 to 126.
- `tolower`, `toupper`: change the case of ASCII letters only. They return
  the same kind of value they were given.

`atoi(text)` reads a number from the start of `text`:

- It skips leading whitespace.
- It accepts one `+` or `-` sign.
- It stops at the first character that is not a digit.
- If a positive value goes past the 32-bit range, it returns `-1`.
- A negative value is truncated to 32 bits.

`itoa(n)` returns the decimal text of a 32-bit signed integer. For values
outside that range it raises `OverflowError`.

### `minishparse.memory`

These functions work on `bytearray` and bytes-like objects:

- `memset(buf, c, n)` and `bzero(buf, n)` fill the start of `buf`.
- `memcpy(dst, src, n)` copies bytes from `src` into `dst`.
- `memmove(buf, dest, src, n)` copies bytes from one offset of `buf` to
  another. The two regions may overlap.
- `memchr(data, c, n)` returns the offset of the first match, or `None`.
- `memcmp(a, b, n)` returns the difference of the first pair of bytes that
  differ, or `0` if none do.

Two errors are common to all of them. A span that runs past the end of a
buffer raises `IndexError`. A negative offset or length raises `ValueError`.

`calloc(nmemb, size)` returns a zeroed `bytearray` of `nmemb * size` bytes:

- If the count or the size is zero, it returns a buffer of one byte.
- If the product is larger than a 64-bit `size_t`, it raises `MemoryError`.

### `minishparse.strings`

Search functions:

- `strchr(s, c)` and `strrchr(s, c)` return the index of the first or last
  `c`, or `None` if it is absent. Searching for `"\0"` returns `len(s)`.
- `strnstr(big, little, length)` looks for `little` in the first `length`
  characters of `big`. It returns the index or `None`. An empty `little`
  matches at index `0`.

Comparison:

- `strncmp(s1, s2, n)` compares at most `n` characters. The end of a string
  counts as code 0.

Bounded copies:

- `strlcpy(src, size)` returns a `(copied_text, len(src))` tuple.
- `strlcat(dst, src, size)` returns a `(result_text, attempted_length)`
  tuple. Both functions treat `size` as a buffer size that includes the
  terminator.

Building strings:

- `substr(s, start, length)` returns a slice of `s`. It is empty when
  `start` is past the end.
- `strjoin(s1, s2)` joins the two strings.
- `strtrim(s, charset)` removes the characters of `charset` from both ends.
- `split(s, c)` splits on a single delimiter and drops empty words.

Applying a function per character:

- `strmapi(s, f)` builds a string from `f(index, char)`. If `f` is `None`,
  it returns `s` unchanged.
- `striteri(s, f)` calls `f(index, s)` for each position of a mutable
  sequence, so `f` can change items in place. It stops at a `"\0"` or `0`
  element.

### `minishparse.arena`

`Arena(block_size=32768)` is a bump allocator over a chain of byte blocks:

- `alloc(size)` returns a writable `memoryview` of `size` bytes. It opens a
  new block when the current one is full. A request larger than one block
  raises `MemoryError`.
- `store(text)` copies `text` into the arena as NUL-terminated UTF-8 and
  returns the stored string. Given `None`, it returns `None`.
- `release()` drops every block. The arena can be used again afterwards.
- `block_count` gives the number of blocks held.
- `used` gives the bytes handed out since the last release.
- The arena is a context manager. It releases its blocks on exit.

The module also provides two functions that work on `None` as well as
strings:

- `arena_substr(s, start, length)` works like `substr`, but returns `None`
  for `None`.
- `arena_join(s1, s2)` joins two strings. If one side is `None`, it returns
  the other. If both are `None`, it returns `None`.

## Example

```python
from minishparse.charclass import atoi, itoa, isalnum
from minishparse.strings import split, strtrim, strlcpy, strchr
from minishparse.arena import Arena

atoi("  -42abc")          # -42
itoa(-7)                  # "-7"
isalnum("_")              # False
split("a,,b", ",")        # ["a", "b"]
strtrim("  hi  ", " ")    # "hi"
strlcpy("hello", 3)       # ("he", 5)
strchr("USER=guest", "=") # 4

with Arena() as arena:
    word = arena.store("echo")   # "echo", 5 bytes with the terminator
    buf = arena.alloc(4)
    arena.used                   # 9
```

## What this package does not do

This package is only the helper layer. It does not do any of the following:

- read command lines or show a prompt;
- split input into tokens or check shell syntax;
- group words into pipeline commands;
- expand `$NAME` or `$?`;
- provide built-in commands such as `echo`, `cd`, `export` or `env`;
- run programs.

It also has no command-line entry point.

## Tests

The tests use pytest. Install them with the `test` extra.