import pytest

from ftkit.chars import to_upper
from ftkit.strtools import (
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncpy,
    strtrim,
    substr,
)


class TestStriteri:
    def test_replaces_in_place(self):
        buf = list("abc")
        striteri(buf, lambda i, c: to_upper(c))
        assert buf == [to_upper(c) for c in "abc"]

    def test_indexes_in_order(self):
        seen = []
        buf = list("hello")
        striteri(buf, lambda i, c: seen.append(i))
        assert seen == list(range(len(buf)))
        assert buf == list("hello")

    def test_stops_at_terminator(self):
        buf = list("ab\0c")
        striteri(buf, lambda i, c: "z")
        assert buf[3] == "c"
        assert buf[:2] == ["z", "z"]

    def test_bytearray(self):
        buf = bytearray(b"ab\x00c")
        striteri(buf, lambda i, b: to_upper(b))
        assert buf == bytearray(b"AB\x00c")


class TestStrjoin:
    def test_concatenates(self):
        assert strjoin("foo", "bar") == "foo" + "bar"

    def test_empty(self):
        assert strjoin("", "x") == "x"

    def test_none_raises(self):
        with pytest.raises(TypeError):
            strjoin(None, "x")


class TestStrlcpy:
    def test_full_copy(self):
        dst = bytearray(10)
        assert strlcpy(dst, b"hello", 10) == len(b"hello")
        assert dst[:6] == b"hello\x00"

    def test_truncates(self):
        dst = bytearray(b"zzzzzz")
        assert strlcpy(dst, b"hello", 3) == len(b"hello")
        assert dst[:3] == b"he\x00"
        assert dst[3:] == b"zzz"

    def test_zero_size_leaves_dst(self):
        dst = bytearray(b"abc")
        assert strlcpy(dst, b"hello", 0) == len(b"hello")
        assert dst == bytearray(b"abc")

    def test_overflow_raises(self):
        with pytest.raises(ValueError):
            strlcpy(bytearray(2), b"hello", 10)


class TestStrlcat:
    def test_appends(self):
        dst = bytearray(b"foo\x00" + bytes(6))
        assert strlcat(dst, b"bar", 10) == len(b"foo") + len(b"bar")
        assert dst[:7] == b"foobar\x00"

    def test_truncates(self):
        dst = bytearray(b"foo\x00" + bytes(6))
        assert strlcat(dst, b"bar", 5) == len(b"foobar")
        assert dst[:5] == b"foob\x00"

    def test_size_not_past_dst(self):
        dst = bytearray(b"foo\x00")
        assert strlcat(dst, b"bar", 2) == 2 + len(b"bar")
        assert dst == bytearray(b"foo\x00")


class TestStrmapi:
    def test_maps_each_char(self):
        assert strmapi("abc", lambda i, c: to_upper(c)) == "ABC"

    def test_indexes(self):
        result = strmapi("xyz", lambda i, c: str(i))
        assert [int(ch) for ch in result] == list(range(len("xyz")))

    def test_requires_func(self):
        with pytest.raises(TypeError):
            strmapi("abc", None)


class TestStrncpy:
    def test_pads_with_nul(self):
        dst = bytearray(b"xxxxxxxx")
        assert strncpy(dst, b"ab", 5) is dst
        assert dst == bytearray(b"ab\x00\x00\x00xxx")

    def test_no_terminator_when_long(self):
        dst = bytearray(b"xxxxxx")
        strncpy(dst, b"abcdef", 3)
        assert dst == bytearray(b"abcxxx")

    def test_none_dst(self):
        with pytest.raises(TypeError):
            strncpy(None, b"ab", 2)


class TestStrtrim:
    def test_both_ends(self):
        result = strtrim("  hi there  ", " ")
        assert result == "hi there"

    def test_all_trimmed(self):
        assert strtrim("xxxx", "x") == ""

    def test_single_char_is_empty(self):
        assert strtrim("a", "") == ""

    def test_empty_charset_keeps(self):
        assert strtrim("abc", "") == "abc"

    def test_result_has_no_edge_chars(self):
        result = strtrim("-+-core-+", "-+")
        assert result and result[0] not in "-+" and result[-1] not in "-+"


class TestSubstr:
    def test_middle(self):
        s = "hello"
        sub = substr(s, 1, 3)
        assert len(sub) == 3
        assert s.startswith(sub, 1)

    def test_start_past_end(self):
        assert substr("abc", 10, 2) == ""

    def test_length_clamped(self):
        s = "hello"
        sub = substr(s, 2, 100)
        assert s.endswith(sub)
        assert len(sub) == len(s) - 2

    def test_negative(self):
        with pytest.raises(ValueError):
            substr("abc", -1, 2)