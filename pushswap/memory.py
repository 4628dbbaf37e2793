"""Byte-buffer routines with the semantics of the classic C memory functions.

Buffers are bytes-like objects; the routines that write need a bytearray or
another mutable buffer. Values are taken modulo 256, as a C char would be.
"""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_length(n: int, *buffers: bytes | bytearray | memoryview) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError("n exceeds the buffer length")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first n bytes of buf to value and return buf."""
    _check_length(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of count elements of size bytes each.

    Raises OverflowError when the total size cannot be represented.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and count > SIZE_MAX // size:
        raise OverflowError("requested size is too large")
    return bytearray(count * size)


def memchr(buf: bytes | bytearray, value: int, n: int) -> int | None:
    """The position of the first byte equal to value in the first n bytes, or None."""
    _check_length(n, buf)
    position = bytes(buf[:n]).find(bytes([value & 0xFF]))
    return None if position < 0 else position


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare n bytes as unsigned values; the difference at the first mismatch, else 0."""
    _check_length(n, a, b)
    for left, right in zip(a[:n], b[:n]):
        if left != right:
            return left - right
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first n bytes of src into dest and return dest."""
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes inside buf from offset src to offset dest; the ranges may overlap."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("n must not be negative")
    if dest + n > len(buf) or src + n > len(buf):
        raise ValueError("range exceeds the buffer length")
    buf[dest : dest + n] = bytes(buf[src : src + n])
    return buf