"""Byte-buffer operations over bytes-like objects.

Writable destinations are ``bytearray`` objects or writable
``memoryview`` slices of one; positions are returned as indexes.
"""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _view(buf, n: int, name: str) -> memoryview:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name} length must be an int")
    if n < 0:
        raise ValueError(f"negative length: {n}")
    view = memoryview(buf)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    if n > len(view):
        raise ValueError(f"length {n} exceeds {name} size {len(view)}")
    return view


def _writable(buf, n: int) -> memoryview:
    view = _view(buf, n, "destination")
    if view.readonly:
        raise TypeError("destination buffer is read-only")
    return view


def memset(buf, c: int, n: int):
    """Fill the first ``n`` bytes of ``buf`` with ``c`` (taken modulo 256); return ``buf``."""
    view = _writable(buf, n)
    view[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    total = nmemb * size
    if total > SIZE_MAX:
        raise OverflowError(f"{nmemb} * {size} overflows the size range")
    return bytearray(total)


def memchr(buf, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` in the first ``n`` bytes, or None."""
    view = _view(buf, n, "buffer")
    index = view[:n].tobytes().find(bytes([c & 0xFF]))
    return None if index < 0 else index


def memcmp(s1, s2, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, else 0."""
    a = _view(s1, n, "first")
    b = _view(s2, n, "second")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dst, src, n: int):
    """Copy ``n`` bytes from ``src`` to the start of ``dst``; return ``dst``."""
    target = _writable(dst, n)
    source = _view(src, n, "source")
    target[:n] = source[:n].tobytes()
    return dst


def memmove(dst, src, n: int):
    """Copy ``n`` bytes from ``src`` to ``dst``, correct for overlapping views; return ``dst``."""
    if n == 0:
        _writable(dst, 0)
        _view(src, 0, "source")
        return dst
    return memcpy(dst, src, n)