"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Iterator, Optional

BUFFER_SIZE = 4


class LineReader:
    """Return successive lines from a file descriptor.

    Data is read in chunks of ``buffer_size`` bytes. Each line keeps its
    trailing newline; the last line may lack one.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer size must be at least 1, got {buffer_size}")
        self._fd = fd
        self._buffer_size = buffer_size
        self._pending = bytearray()

    def read_line(self) -> Optional[str]:
        """Return the next line, or ``None`` once the input is exhausted."""
        searched = 0
        while True:
            newline = self._pending.find(b"\n", searched)
            if newline >= 0:
                return self._take(newline + 1)
            searched = len(self._pending)
            chunk = os.read(self._fd, self._buffer_size)
            if not chunk:
                if self._pending:
                    return self._take(len(self._pending))
                return None
            self._pending += chunk

    def _take(self, count: int) -> str:
        line = bytes(self._pending[:count])
        del self._pending[:count]
        return line.decode("utf-8")

    def __iter__(self) -> Iterator[str]:
        return iter(self.read_line, None)