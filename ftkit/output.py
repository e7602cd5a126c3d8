"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union

from ftkit.convert import itoa
from ftkit.strings import strlen


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char_fd(c: Union[int, str], fd: int) -> None:
    """Write one character to ``fd``.

    An int is taken as a byte value, modulo 256; a one-character string
    is written in UTF-8.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        _write_all(fd, c.encode("utf-8"))
        return
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    _write_all(fd, bytes([c & 0xFF]))


def put_str_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` up to its first NUL to ``fd``; ``None`` writes nothing."""
    if s is None:
        return
    _write_all(fd, s[: strlen(s)].encode("utf-8"))


def put_endl_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` followed by a newline; ``None`` writes nothing."""
    if s is None:
        return
    _write_all(fd, (s[: strlen(s)] + "\n").encode("utf-8"))


def put_nbr_fd(n: int, fd: int) -> None:
    """Write the decimal text of a signed 32-bit integer to ``fd``."""
    _write_all(fd, itoa(n).encode("ascii"))