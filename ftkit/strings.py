"""Searching, comparing and measuring NUL-terminated strings.

A string ends at its first NUL character (``"\\0"`` in text, byte 0 in
bytes-like objects); anything after it is ignored. Positions are
returned as indexes, and ``None`` means "not found".
"""

from __future__ import annotations

from typing import Optional, Union

CharLike = Union[int, str]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def strlen(s) -> int:
    """Return the length of ``s`` up to its first NUL; ``None`` counts as empty.

    ``s`` may be text or a bytes-like object.
    """
    if s is None:
        return 0
    if isinstance(s, str):
        end = s.find("\0")
        return len(s) if end < 0 else end
    data = bytes(s)
    end = data.find(0)
    return len(data) if end < 0 else end


def _text(s: str) -> str:
    return s[: strlen(s)]


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    ch = _char(c)
    text = _text(s)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    ch = _char(c)
    text = _text(s)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference of the first unequal pair (the shorter
    string contributing its terminator, code 0), or 0 when equal.
    """
    if n < 0:
        raise ValueError(f"negative length: {n}")
    a = _text(s1)[:n]
    b = _text(s2)[:n]
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    if len(a) == len(b):
        return 0
    if len(a) > len(b):
        return ord(a[len(b)])
    return -ord(b[len(a)])


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; see :func:`strncmp` for the result."""
    return strncmp(s1, s2, max(strlen(s1), strlen(s2)) + 1)


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` wholly inside the first ``length`` characters of ``haystack``.

    An empty needle is found at index 0.
    """
    if length < 0:
        raise ValueError(f"negative length: {length}")
    target = _text(needle)
    if not target:
        return 0
    index = _text(haystack)[:length].find(target)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its first NUL."""
    if s is None:
        raise TypeError("cannot duplicate None")
    return _text(s)