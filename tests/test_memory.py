import pytest

from libft.memory import bzero, memalloc, memccpy, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix():
    buf = bytearray(5)
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf[:3] == b"xxx"
    assert buf[3:] == bytes(2)


def test_memset_uses_low_byte():
    buf = bytearray(2)
    memset(buf, 256 + ord("A"), 2)
    assert buf == b"AA"


def test_memset_too_long():
    with pytest.raises(IndexError):
        memset(bytearray(2), 0, 3)


def test_bzero():
    buf = bytearray(b"hello")
    bzero(buf, 4)
    assert buf == bytes(4) + b"o"


def test_memcpy_copies():
    dst = bytearray(6)
    src = b"abcdef"
    assert memcpy(dst, src, 4) is dst
    assert dst[:4] == src[:4]
    assert dst[4:] == bytes(2)


def test_memcpy_negative_length():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"ab", -1)


def test_memccpy_stops_after_char():
    dst = bytearray(8)
    src = b"key=value"
    offset = memccpy(dst, src, ord("="), 8)
    assert offset == src.index(b"=") + 1
    assert dst[:offset] == src[:offset]
    assert dst[offset:] == bytes(len(dst) - offset)


def test_memccpy_not_found_copies_all():
    dst = bytearray(4)
    assert memccpy(dst, b"abcd", ord("z"), 4) is None
    assert dst == b"abcd"


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    original = bytes(buf)
    memmove(buf, 2, 0, 4)
    assert buf[2:6] == original[0:4]
    assert buf[:2] == original[:2]


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    original = bytes(buf)
    memmove(buf, 0, 2, 4)
    assert buf[0:4] == original[2:6]
    assert buf[4:] == original[4:]


def test_memmove_out_of_range():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first():
    data = b"banana"
    assert memchr(data, ord("n"), len(data)) == data.index(b"n")


def test_memchr_respects_length():
    assert memchr(b"banana", ord("n"), 2) is None


def test_memcmp_equal():
    assert memcmp(b"same", b"same", 4) == 0


def test_memcmp_difference_of_first_mismatch():
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")


def test_memcmp_is_unsigned():
    assert memcmp(b"\xff", b"\x00", 1) > 0
    assert memcmp(b"\x00", b"\xff", 1) < 0


def test_memcmp_zero_length():
    assert memcmp(b"a", b"b", 0) == 0


def test_memalloc_zero_is_none():
    assert memalloc(0) is None


def test_memalloc_zeroed():
    assert memalloc(4) == bytearray(4)


def test_memalloc_negative():
    with pytest.raises(ValueError):
        memalloc(-1)