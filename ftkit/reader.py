"""Line-by-line reading from file descriptors with per-descriptor buffering."""

from __future__ import annotations

import os
from typing import Optional

FD_MAX = 256
BUFFER_SIZE = 10
INT_MAX = 2**31 - 1


class LineReader:
    """Reads lines from raw file descriptors, keeping leftover data per descriptor."""

    def __init__(self, buffer_size: int = BUFFER_SIZE, encoding: str = "utf-8") -> None:
        if not 0 < buffer_size < INT_MAX:
            raise ValueError(f"buffer size out of range: {buffer_size}")
        self.buffer_size = buffer_size
        self.encoding = encoding
        self._stash: dict[int, bytes] = {}

    def read_line(self, fd: int) -> Optional[str]:
        """Return the next line from ``fd``, newline included, or None at end of input.

        A read error discards what was buffered for ``fd`` and is raised.
        """
        if isinstance(fd, bool) or not isinstance(fd, int):
            raise TypeError("file descriptor must be an int")
        if not 0 <= fd < FD_MAX:
            raise ValueError(f"file descriptor out of range: {fd}")
        pending = bytearray(self._stash.pop(fd, b""))
        while b"\n" not in pending:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                break
            pending += chunk
        if not pending:
            return None
        end = pending.find(b"\n")
        cut = len(pending) if end < 0 else end + 1
        line, rest = bytes(pending[:cut]), bytes(pending[cut:])
        if rest:
            self._stash[fd] = rest
        return line.decode(self.encoding)


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[str]:
    """Return the next line from ``fd`` using a shared reader."""
    return _default_reader.read_line(fd)