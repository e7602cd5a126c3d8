"""Building, copying and trimming NUL-terminated strings.

Text functions take and return ``str``. The bounded copy functions
(:func:`strlcpy`, :func:`strlcat`, :func:`strncpy`) write into a
``bytearray`` (or writable ``memoryview``) holding a NUL-terminated
string, and raise ``ValueError`` if a write would run past its end.
"""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Optional

from ftkit.memory import memcpy, memset
from ftkit.strings import strlen


def _text(s: str) -> str:
    if s is None:
        raise TypeError("expected a string, got None")
    return s[: strlen(s)]


def _cbytes(data) -> bytes:
    if data is None:
        raise TypeError("expected a bytes-like object, got None")
    raw = bytes(data)
    return raw[: strlen(raw)]


def striteri(buf: MutableSequence, func: Callable[[int, Any], Optional[Any]]) -> None:
    """Call ``func(index, item)`` on each item of ``buf`` up to its terminator.

    A non-None result replaces the item in place. ``buf`` is a list of
    characters or a ``bytearray``; it ends at ``"\\0"`` or byte 0.
    """
    if buf is None or func is None:
        return
    for index, item in enumerate(buf):
        if item == 0 or item == "\0":
            break
        result = func(index, item)
        if result is not None:
            buf[index] = result


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return _text(s1) + _text(s2)


def strlcpy(dst, src, size: int) -> int:
    """Copy ``src`` into ``dst``, writing at most ``size`` bytes including the NUL.

    Returns the length of ``src``; a result ``>= size`` means truncation.
    """
    if size < 0:
        raise ValueError(f"negative size: {size}")
    source = _cbytes(src)
    if size > 0:
        count = min(len(source), size - 1)
        memcpy(dst, source[:count] + b"\0", count + 1)
    return len(source)


def strlcat(dst, src, size: int) -> int:
    """Append ``src`` to the string in ``dst``, keeping the whole within ``size`` bytes.

    Returns the length the full result would have had; when ``dst`` is
    already at least ``size`` long, that is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError(f"negative size: {size}")
    source = _cbytes(src)
    dst_len = strlen(dst)
    if dst_len >= size:
        return size + len(source)
    room = size - dst_len - 1
    count = min(len(source), room)
    memcpy(memoryview(dst)[dst_len:], source[:count] + b"\0", count + 1)
    return dst_len + len(source)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string of ``func(index, char)`` for each character of ``s``."""
    if func is None:
        raise TypeError("a mapping function is required")
    return "".join(func(index, ch) for index, ch in enumerate(_text(s)))


def strncpy(dst, src, n: int):
    """Copy at most ``n`` bytes of ``src`` to ``dst`` and pad with NULs up to ``n``.

    No terminator is written when ``src`` is ``n`` bytes or longer.
    Returns ``dst``.
    """
    if dst is None:
        raise TypeError("destination is None")
    if n < 0:
        raise ValueError(f"negative length: {n}")
    source = _cbytes(src)[:n]
    memset(dst, 0, n)
    memcpy(dst, source, len(source))
    return dst


def strtrim(s: str, charset: str) -> str:
    """Strip characters in ``charset`` from both ends of ``s``.

    Strings of at most one character always give an empty result.
    """
    text = _text(s)
    chars = _text(charset)
    if len(text) <= 1:
        return ""
    return text.strip(chars) if chars else text


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``.

    A start beyond the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _text(s)
    if start > len(text):
        return ""
    return text[start : start + length]