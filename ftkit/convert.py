"""Integer/text conversion and string splitting."""

from __future__ import annotations

from ftkit.chars import is_digit

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_SPACES = frozenset(" \t\n\v\f\r")


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, C style.

    Leading whitespace is skipped, one optional sign is read, then ASCII
    digits up to the first non-digit. Text without digits gives 0. The
    result wraps to a signed 32-bit value.
    """
    i = 0
    while i < len(text) and text[i] in _SPACES:
        i += 1
    sign = 1
    if i < len(text) and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    start = i
    while i < len(text) and is_digit(text[i]):
        i += 1
    digits = text[start:i]
    value = int(digits) if digits else 0
    return _wrap_int32(sign * value)


def itoa(n: int) -> str:
    """Return the decimal text of a signed 32-bit integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("expected an int")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} is outside the 32-bit signed range")
    return f"{n:d}"


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]