import pytest

from minishparse.memory import (
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_only():
    buf = bytearray(b"hello world")
    result = memset(buf, ord("x"), 5)
    assert result is buf
    assert buf[:5] == bytes([ord("x")]) * 5
    assert buf[5:] == b" world"


def test_memset_uses_low_byte():
    buf = bytearray(3)
    memset(buf, 0x141, 3)
    assert all(b == 0x41 for b in buf)


def test_memset_past_end_raises():
    with pytest.raises(IndexError):
        memset(bytearray(2), 0, 3)


def test_bzero_zeroes_prefix():
    buf = bytearray(b"abcdef")
    bzero(buf, 4)
    assert buf[:4] == bytes(4)
    assert buf[4:] == b"ef"


def test_memcpy_copies_prefix():
    dst = bytearray(b"..........")
    result = memcpy(dst, b"minishell", 4)
    assert result is dst
    assert dst[:4] == b"mini"
    assert dst[4:] == b"......"


def test_memcpy_zero_length_keeps_dst():
    dst = bytearray(b"keep")
    memcpy(dst, b"", 0)
    assert dst == b"keep"


def test_memcpy_source_too_short():
    with pytest.raises(IndexError):
        memcpy(bytearray(8), b"ab", 3)


def test_memmove_forward_overlap():
    original = b"0123456789"
    buf = bytearray(original)
    memmove(buf, 2, 0, 6)
    assert buf[2:8] == original[0:6]
    assert buf[:2] == original[:2]
    assert buf[8:] == original[8:]


def test_memmove_backward_overlap():
    original = b"0123456789"
    buf = bytearray(original)
    memmove(buf, 0, 3, 7)
    assert buf[:7] == original[3:]
    assert buf[7:] == original[7:]


def test_memmove_same_offset_is_noop():
    buf = bytearray(b"stable")
    memmove(buf, 1, 1, 4)
    assert buf == b"stable"


def test_memmove_out_of_range():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first_match():
    data = b"pipe|redirect|"
    assert memchr(data, ord("|"), len(data)) == data.index(b"|")


def test_memchr_respects_limit():
    data = b"abc|"
    assert memchr(data, ord("|"), 3) is None


def test_memchr_compares_low_byte():
    data = b"\x00\x01\x02"
    assert memchr(data, 0x102, 3) == 2


def test_memcmp_equal_prefix_is_zero():
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_sign_and_antisymmetry():
    a, b = b"abc", b"abd"
    assert memcmp(a, b, 3) < 0
    assert memcmp(b, a, 3) > 0
    assert memcmp(a, b, 3) == -memcmp(b, a, 3)


def test_memcmp_treats_bytes_as_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_calloc_is_zeroed_with_product_size():
    buf = calloc(4, 3)
    assert len(buf) == 12
    assert buf == bytes(12)


def test_calloc_zero_request_gives_one_byte():
    assert len(calloc(0, 8)) == 1
    assert len(calloc(8, 0)) == 1


def test_calloc_overflow_raises():
    with pytest.raises(MemoryError):
        calloc(2**40, 2**40)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)