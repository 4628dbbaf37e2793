"""Conversions between text and 32-bit integers."""

from __future__ import annotations

_WHITESPACE = "\t\n\v\f\r "
_INT_BITS = 32


def _wrap(value: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def atoi(text: str) -> int:
    """Read a leading integer after optional whitespace and one sign.

    Reading stops at the first non-digit; text without a number gives 0.
    The result wraps around as a 32-bit signed integer.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("+", "-") and stripped:
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    value = 0
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return _wrap(sign * value)


def itoa(n: int) -> str:
    """The decimal text of an integer, with a leading minus when negative."""
    return str(int(n))