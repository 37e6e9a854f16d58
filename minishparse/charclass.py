"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

INT_MAX = 2147483647
INT_MIN = -2147483648

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(c: int | str) -> int:
    """Return the integer code of a character given as an int or a 1-char str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _same_kind(original: int | str, code: int) -> int | str:
    return chr(code) if isinstance(original, str) else code


def isalpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def tolower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; anything else is unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _same_kind(c, code)


def toupper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; anything else is unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _same_kind(c, code)


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library routine does.

    Leading whitespace is skipped and one optional sign is accepted; parsing
    stops at the first non-digit. A positive value that exceeds the 32-bit
    range yields -1; a negative one is truncated to 32 bits.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < length and isdigit(text[pos]):
        result = 10 * result + (ord(text[pos]) - ord("0"))
        if sign == 1 and result > INT_MAX:
            return -1
        pos += 1
    return _wrap_int32(result * sign)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    if n == 0:
        return "0"
    digits = []
    num = abs(n)
    while num > 0:
        num, rem = divmod(num, 10)
        digits.append(chr(ord("0") + rem))
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))