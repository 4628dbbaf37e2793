import pytest

from pushswap.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix():
    buf = bytearray(b"Life is good.")
    result = memset(buf, ord("."), 8)
    assert result is buf
    assert buf == b"........good."


def test_memset_takes_value_modulo_256():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytes([0x41]) * 4


def test_memset_rejects_length_past_buffer():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_only_prefix():
    original = b"bob is very nice"
    buf = bytearray(original)
    bzero(buf, 3)
    assert buf[:3] == bytes(3)
    assert buf[3:] == original[3:]


def test_calloc_is_zero_filled():
    buf = calloc(3, 4)
    assert len(buf) == 3 * 4
    assert all(byte == 0 for byte in buf)


def test_calloc_zero_size():
    assert calloc(0, 5) == bytearray()
    assert calloc(5, 0) == bytearray()


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(2, SIZE_MAX)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 1)


def test_memchr_finds_first_within_limit():
    data = b"Life is good"
    assert memchr(data, ord("o"), len(data)) == data.index(b"o")
    assert memchr(data, ord("o"), data.index(b"o")) is None


def test_memchr_missing():
    assert memchr(b"abc", ord("z"), 3) is None


def test_memcmp_equal():
    assert memcmp(b"non", b"non", 3) == 0


def test_memcmp_sign_and_unsigned():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"\xff", b"\x00", 1) > 0


def test_memcmp_stops_at_n():
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcpy_copies_prefix():
    dest = bytearray(b"yessir.")
    src = b"bobe"
    result = memcpy(dest, src, 3)
    assert result is dest
    assert dest[:3] == src[:3]
    assert dest[3:] == b"yessir."[3:]


def test_memmove_overlap_forward():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 2, 0, 4)
    assert buf[:2] == original[:2]
    assert buf[2:6] == original[0:4]


def test_memmove_overlap_backward():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 0, 2, 4)
    assert buf[:4] == original[2:6]
    assert buf[4:] == original[4:]


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)