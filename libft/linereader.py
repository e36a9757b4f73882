"""Reading a file descriptor one line at a time.

Input is read in chunks of a fixed size. Whatever follows the last newline
of a chunk is kept per descriptor until the next call, so several
descriptors can be read in turns without mixing their data.
"""

from __future__ import annotations

import os
from typing import Dict, Optional

__all__ = ["BUFF_SIZE", "MAX_FD", "LineReader", "get_next_line"]

BUFF_SIZE = 32
MAX_FD = 4864
_MAX_BUFFER_SIZE = 10_000_000
_NEWLINE = b"\n"
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _decode(data: bytes) -> str:
    return data.decode(_ENCODING, _ERRORS)


class LineReader:
    """Reads lines from file descriptors, keeping unread data per descriptor."""

    def __init__(self, buffer_size: int = BUFF_SIZE) -> None:
        if not 0 <= buffer_size <= _MAX_BUFFER_SIZE:
            raise ValueError(
                f"buffer size must lie between 0 and {_MAX_BUFFER_SIZE}, got {buffer_size}"
            )
        self.buffer_size = buffer_size
        self._pending: Dict[int, bytes] = {}

    def read_line(self, fd: int) -> Optional[str]:
        """Return the next line of *fd* without its newline, or None at end of input.

        The last line is returned even when it has no trailing newline.
        A failed read discards what was kept for *fd* and raises OSError.
        """
        if not 0 <= fd <= MAX_FD:
            raise ValueError(f"file descriptor must lie between 0 and {MAX_FD}, got {fd}")
        data = self._pending.pop(fd, b"")
        while _NEWLINE not in data:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                break
            data += chunk
        line, newline, rest = data.partition(_NEWLINE)
        if newline:
            self._pending[fd] = rest
            return _decode(line)
        if not data:
            return None
        return _decode(data)

    def forget(self, fd: int) -> None:
        """Discard any data kept for *fd*."""
        self._pending.pop(fd, None)


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[str]:
    """Return the next line of *fd* using a shared reader, or None at end of input."""
    return _default_reader.read_line(fd)