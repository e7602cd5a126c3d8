"""A small printf with the conversions c, s, p, d, u, x, X and %."""

from __future__ import annotations

import os
import sys
from typing import Any, Iterator, Optional

from ftkit.strings import strlen

NULL_STR = "(null)"
NULL_PTR = "0x0" if sys.platform.startswith("linux") else "(nil)"

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _as_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} needs an int, got {type(value).__name__}")
    return int(value)


def _as_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - 2**32 if value >= 2**31 else value


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "c":
        value = _next_arg(args)
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f"%c needs a single character, got {value!r}")
            return value
        return chr(_as_int(value, spec) & 0xFF)
    if spec == "s":
        value = _next_arg(args)
        if value is None:
            return NULL_STR
        if not isinstance(value, str):
            raise TypeError(f"%s needs a str, got {type(value).__name__}")
        return value[: strlen(value)]
    if spec == "p":
        value = _next_arg(args)
        if value is None or (isinstance(value, int) and value == 0):
            return NULL_PTR
        address = value if isinstance(value, int) else id(value)
        return "0x" + format(address & _ULONG_MASK, "x")
    if spec == "d":
        return str(_as_int32(_as_int(_next_arg(args), spec)))
    if spec == "u":
        return str(_as_int(_next_arg(args), spec) & _UINT_MASK)
    if spec in ("x", "X"):
        return format(_as_int(_next_arg(args), spec) & _UINT_MASK, spec)
    return spec


def format_printf(fmt: Optional[str], *args: Any) -> str:
    """Return the text that :func:`printf` would write.

    Integers are taken as 32-bit values, as C's ``int`` and ``unsigned``
    would hold them. An unknown conversion prints its own letter, and a
    lone ``%`` at the end prints itself.
    """
    if fmt is None:
        return ""
    values = iter(args)
    chars = iter(fmt[: strlen(fmt)])
    parts: list[str] = []
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            parts.append("%")
            break
        parts.append(_convert(spec, values))
    return "".join(parts)


def printf(fmt: Optional[str], *args: Any) -> int:
    """Format and write to standard output; return the number of bytes written."""
    data = format_printf(fmt, *args).encode("utf-8")
    view = memoryview(data)
    while view:
        written = os.write(1, view)
        view = view[written:]
    return len(data)