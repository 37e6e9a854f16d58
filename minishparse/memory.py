"""Byte-buffer operations over bytearray and bytes-like objects."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_span(buf_len: int, start: int, n: int, what: str) -> None:
    if n < 0 or start < 0:
        raise ValueError(f"negative {what} offset or length")
    if start + n > buf_len:
        raise IndexError(f"{what} span {start}+{n} exceeds buffer of {buf_len} bytes")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of c; return buf."""
    _check_span(len(buf), 0, n, "destination")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first n bytes of buf."""
    memset(buf, 0, n)


def memcpy(dst: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first n bytes of src into dst; return dst."""
    _check_span(len(dst), 0, n, "destination")
    _check_span(len(src), 0, n, "source")
    dst[:n] = src[:n]
    return dst


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes inside buf from offset src to offset dest; overlap is safe."""
    _check_span(len(buf), dest, n, "destination")
    _check_span(len(buf), src, n, "source")
    if dest != src:
        buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: bytes | bytearray, c: int, n: int) -> int | None:
    """Return the offset of the first byte equal to c among the first n, or None."""
    _check_span(len(data), 0, n, "search")
    pos = data.find(c & 0xFF, 0, n)
    return None if pos < 0 else pos


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare the first n bytes; return the difference of the first unequal pair."""
    _check_span(len(a), 0, n, "first")
    _check_span(len(b), 0, n, "second")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of nmemb * size bytes.

    A request for zero elements or zero-sized elements yields a one-byte
    buffer; a product too large for a size_t raises MemoryError.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if nmemb == 0 or size == 0:
        return bytearray(1)
    total = nmemb * size
    if total > SIZE_MAX:
        raise MemoryError(f"cannot allocate {nmemb} x {size} bytes")
    return bytearray(total)