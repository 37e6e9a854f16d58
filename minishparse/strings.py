"""String searching, comparison, copying and splitting helpers."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any

NUL = "\0"


def _char(c: int | str) -> str:
    """Return a character given as a 1-char str or an integer code."""
    if isinstance(c, int):
        return chr(c)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _size(value: int, what: str) -> int:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")
    return value


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first c in s, or None.

    Searching for the terminator finds the end of the string.
    """
    ch = _char(c)
    if ch == NUL:
        return len(s)
    pos = s.find(ch)
    return None if pos < 0 else pos


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last c in s, or None.

    Searching for the terminator finds the end of the string.
    """
    ch = _char(c)
    if ch == NUL:
        return len(s)
    pos = s.rfind(ch)
    return None if pos < 0 else pos


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; the end of a string counts as code 0.

    Returns the code difference of the first unequal pair, or 0.
    """
    _size(n, "n")
    a = s1[:n] + NUL
    b = s2[:n] + NUL
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return ord(x) - ord(y)
        if x == NUL:
            break
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text and the full length of src.
    """
    _size(size, "size")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting text and the length it tried to create. When dst
    already fills the buffer, dst is returned unchanged with size + len(src).
    """
    _size(size, "size")
    dstlen = min(len(dst), size)
    if dstlen >= size:
        return dst, size + len(src)
    room = size - dstlen - 1
    return dst + src[:room], dstlen + len(src)


def strnstr(big: str, little: str, length: int) -> int | None:
    """Return the index of little in the first length characters of big, or None."""
    _size(length, "length")
    if not little:
        return 0
    pos = big[:length].find(little)
    return None if pos < 0 else pos


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s from start; empty past the end."""
    _size(start, "start")
    _size(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters in charset from both ends of s."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, c: int | str) -> list[str]:
    """Split s on the delimiter c, dropping empty words."""
    sep = _char(c)
    return [word for word in s.split(sep) if word]


def strmapi(s: str, f: Callable[[int, str], str] | None) -> str:
    """Build a new string from f(index, char) for each character of s."""
    if f is None:
        return s
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(
    s: MutableSequence[Any] | None,
    f: Callable[[int, MutableSequence[Any]], None] | None,
) -> None:
    """Call f(index, s) for each position of s so f may change s[index] in place.

    Iteration stops at a terminator element (NUL or 0).
    """
    if s is None or f is None:
        return
    for index in range(len(s)):
        if s[index] in (NUL, 0):
            break
        f(index, s)