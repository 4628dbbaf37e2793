"""Validation and parsing of the command-line numbers to be sorted."""

from __future__ import annotations

from typing import Iterable

from pushswap.chars import is_digit

INT_MIN = -2147483648
INT_MAX = 2147483647

# Returned by atol for a number too long to fit; always out of range.
TOO_LONG = 21474836400

_WHITESPACE = "\t\n\v\f\r "


class ParseError(ValueError):
    """The arguments are not a valid list of distinct 32-bit integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _char_at(text: str, position: int) -> str:
    return text[position] if position < len(text) else ""


def _digit(ch: str) -> bool:
    return ch != "" and is_digit(ch)


def atol(text: str) -> int:
    """Read a leading integer the way the checker does.

    Leading whitespace and one sign are accepted and reading stops at the
    first non-digit. Once the scan passes position 11 of the text the
    sentinel TOO_LONG is returned, whatever the sign.
    """
    position = 0
    length = len(text)
    while position < length and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < length and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    value = 0
    while position < length and _digit(text[position]):
        value = value * 10 + int(text[position])
        if position > 11:
            return TOO_LONG
        position += 1
    return sign * value


def check_num_int(text: str) -> bool:
    """True when every character is a digit or a sign directly before a digit."""
    return all(
        _digit(ch) or (ch in "+-" and _digit(_char_at(text, position + 1)))
        for position, ch in enumerate(text)
    )


def _quoted_char_ok(text: str, position: int) -> bool:
    ch = text[position]
    following = _char_at(text, position + 1)
    if _digit(ch):
        return True
    if ch in "+-":
        return _digit(following)
    if ch == " ":
        return following == "" or following in "+- " or _digit(following)
    return False


def check_num_quoted(text: str) -> bool:
    """True when the text is made only of signed numbers and spaces."""
    return all(_quoted_char_ok(text, position) for position in range(len(text)))


def count_int(text: str) -> int:
    """The number of digits that end a number: followed by a space or the end."""
    return sum(
        1
        for position, ch in enumerate(text)
        if _digit(ch) and _char_at(text, position + 1) in ("", " ")
    )


def split_words(text: str, sep: str) -> list[str]:
    """The non-empty pieces of text between occurrences of sep."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def _validate(values: list[int]) -> None:
    if len(set(values)) != len(values):
        raise ParseError()
    if any(not INT_MIN <= value <= INT_MAX for value in values):
        raise ParseError()


def parse_separate(args: Iterable[str]) -> list[int]:
    """Parse one number per argument; raise ParseError on any invalid input."""
    values = []
    for arg in args:
        if not arg or not check_num_int(arg):
            raise ParseError()
        values.append(atol(arg))
    _validate(values)
    return values


def parse_quoted(text: str) -> list[int]:
    """Parse space-separated numbers held in one argument.

    A single number leaves nothing to sort, so the result is empty.
    """
    count = count_int(text)
    if not check_num_quoted(text) or count < 1:
        raise ParseError()
    if count == 1:
        return []
    values = [atol(word) for word in split_words(text, " ")[:count]]
    _validate(values)
    return values


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn the program's arguments (without its name) into the values to sort.

    An empty result means there is nothing to do.
    """
    args = list(args)
    if not args:
        return []
    first = args[0]
    if first == "":
        raise ParseError()
    if len(args) == 1 and not INT_MIN <= atol(first) <= INT_MAX:
        raise ParseError()
    if len(args) > 1:
        return parse_separate(args)
    return parse_quoted(first)