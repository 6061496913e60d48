"""Decimal conversion between text and 32-bit signed integers."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_LLONG_MAX = 2**63 - 1
_LLONG_MIN = -(2**63)
# C integer division truncates towards zero.
_LLONG_MAX_DIV10 = _LLONG_MAX // 10
_LLONG_MIN_DIV10 = -(-_LLONG_MIN // 10)

_WHITESPACE = " \f\n\r\t\v"


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def _check_int32(n: int) -> None:
    if not INT_MIN <= n <= INT_MAX:
        raise ValueError(f"{n} is outside the 32-bit signed integer range")


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library does.

    Leading whitespace is skipped, one optional sign is read, then digits
    up to the first non-digit. A value that would overflow a 64-bit signed
    integer gives -1 when positive and 0 when negative; other results are
    reduced to a 32-bit signed integer. Text with no digits gives 0.
    """
    stripped = text.lstrip(_WHITESPACE)
    negative = False
    if stripped[:1] in ("+", "-"):
        negative = stripped[0] == "-"
        stripped = stripped[1:]

    num = 0
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        digit = ord(ch) - ord("0")
        if not negative and (
            num > _LLONG_MAX_DIV10 or (num == _LLONG_MAX_DIV10 and digit > 7)
        ):
            return -1
        if negative and (
            -num < _LLONG_MIN_DIV10 or (-num == _LLONG_MIN_DIV10 and digit > 8)
        ):
            return 0
        num = num * 10 + digit

    return _wrap_int32(-num if negative else num)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    _check_int32(n)
    return str(n)


def digit_count(n: int) -> int:
    """Return how many characters the decimal text of n takes, sign included."""
    return len(itoa(n))