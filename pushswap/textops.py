"""String helpers with the semantics of the classic C string routines.

Searches return the remainder of the string from the match, standing in for
a pointer into it, or None when there is no match. Searching for the
terminator "\\0" matches the empty end of the string.
"""

from __future__ import annotations

from typing import Callable, MutableSequence

_TERMINATOR = "\0"


def _single(c: str) -> str:
    if len(c) != 1:
        raise ValueError("expected a single character")
    return c


def strlen(s: str) -> int:
    """The number of characters in s."""
    return len(s)


def strchr(s: str, c: str) -> str | None:
    """The rest of s from the first occurrence of c, or None."""
    c = _single(c)
    if c == _TERMINATOR:
        return ""
    position = s.find(c)
    return None if position < 0 else s[position:]


def strrchr(s: str, c: str) -> str | None:
    """The rest of s from the last occurrence of c, or None."""
    c = _single(c)
    if c == _TERMINATOR:
        return ""
    position = s.rfind(c)
    return None if position < 0 else s[position:]


def strnstr(haystack: str, needle: str, length: int) -> str | None:
    """The rest of haystack from the first needle lying wholly in its first length characters.

    An empty needle matches at once and the whole haystack is returned.
    """
    if not needle:
        return haystack
    if length < 0:
        raise ValueError("length must not be negative")
    position = haystack.find(needle, 0, length)
    return None if position < 0 else haystack[position:]


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; the code difference at the first mismatch, else 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    for position in range(n):
        c1 = ord(s1[position]) if position < len(s1) else 0
        c2 = ord(s2[position]) if position < len(s2) else 0
        if c1 != c2:
            return c1 - c2
        if c1 == 0:
            break
    return 0


def strdup(s: str) -> str:
    """A copy of s."""
    return "".join(s)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text and the full length of src, which exceeds the
    copied length when the copy was cut short.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting text and the length the result would have had
    without the limit; when dst already fills the buffer, dst is left as it
    is and size plus the length of src is returned.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strjoin(s1: str | None, s2: str | None) -> str | None:
    """s1 followed by s2; None when either is missing."""
    if s1 is None or s2 is None:
        return None
    return s1 + s2


def strtrim(s: str | None, charset: str | None) -> str | None:
    """s without the characters of charset at either end; None when either is missing."""
    if s is None or charset is None:
        return None
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str | None, start: int, length: int) -> str | None:
    """At most length characters of s from position start.

    A start past the end gives the empty string; a missing s gives None.
    """
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start : start + length]


def strmapi(s: str | None, func: Callable[[int, str], str] | None) -> str | None:
    """A new string made of func(index, character) for each character of s."""
    if s is None or func is None:
        return None
    return "".join(func(position, ch) for position, ch in enumerate(s))


def striteri(
    chars: MutableSequence[str] | None,
    func: Callable[[int, MutableSequence[str]], None],
) -> None:
    """Call func(index, chars) for each position, letting it change chars in place."""
    if chars is None:
        return
    for position in range(len(chars)):
        func(position, chars)