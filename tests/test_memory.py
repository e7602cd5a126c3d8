import pytest

from ftkit.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("z"), 3)
    assert result is buf
    assert buf == b"zzz" + b"def"


def test_memset_value_taken_modulo_256():
    buf = bytearray(4)
    memset(buf, 0x100 + ord("A"), 4)
    assert buf == b"A" * 4


def test_memset_zero_length_leaves_buffer():
    buf = bytearray(b"xyz")
    memset(buf, 0, 0)
    assert buf == b"xyz"


def test_memset_length_beyond_buffer():
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, 3)


def test_memset_negative_length():
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, -1)


def test_memset_readonly_buffer():
    with pytest.raises(TypeError):
        memset(b"abc", 0, 1)


def test_bzero_clears_prefix():
    buf = bytearray(b"hello")
    bzero(buf, 2)
    assert buf == b"\x00\x00llo"


def test_calloc_zeroed_and_sized():
    buf = calloc(3, 4)
    assert len(buf) == 12
    assert not any(buf)


def test_calloc_zero_size():
    assert len(calloc(5, 0)) == 0


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(2**40, 2**40)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first_occurrence():
    data = b"abcabc"
    assert memchr(data, ord("c"), len(data)) == data.index(b"c")


def test_memchr_respects_length():
    assert memchr(b"abcabc", ord("c"), 2) is None


def test_memchr_missing_byte():
    assert memchr(b"abc", ord("q"), 3) is None


def test_memchr_value_modulo_256():
    data = b"xyz"
    assert memchr(data, 0x100 + ord("y"), 3) == data.index(b"y")


def test_memcmp_equal():
    assert memcmp(b"same", b"same", 4) == 0


def test_memcmp_difference_of_first_unequal_byte():
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"abd", b"abc", 3) == ord("d") - ord("c")


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_stops_at_length():
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcpy_copies_prefix():
    dst = bytearray(b"......")
    result = memcpy(dst, b"xyz", 3)
    assert result is dst
    assert dst == b"xyz..."


def test_memcpy_source_too_short():
    with pytest.raises(ValueError):
        memcpy(bytearray(5), b"ab", 3)


def test_memmove_overlap_forward():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    result = memmove(view[2:], view, 4)
    assert bytes(result) == b"abcd"
    assert buf == b"ababcd"


def test_memmove_overlap_backward():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    result = memmove(view, view[2:], 4)
    assert bytes(result) == b"cdefef"
    assert buf == b"cdef" + b"ef"


def test_memmove_zero_length():
    buf = bytearray(b"abc")
    assert memmove(buf, b"zzz", 0) is buf
    assert buf == b"abc"