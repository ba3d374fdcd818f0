"""Line-by-line reading from a file descriptor with a fixed read size."""

from __future__ import annotations

import os
from typing import Iterator, Optional

DEFAULT_BUFFER_SIZE = 256


class LineReader:
    """Reads lines from ``fd``, asking the system for ``buffer_size`` bytes at a time.

    Each line keeps its trailing newline; the last line of the input may
    have none. Data read past the end of a line is kept for the next call.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        if fd < 0:
            raise ValueError(f"file descriptor must not be negative, got {fd}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = b""

    def next_line(self) -> Optional[str]:
        """Return the next line, or None once the input is exhausted."""
        while b"\n" not in self._pending:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending = b""
                raise
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        cut = len(self._pending) if end < 0 else end + 1
        line, self._pending = self._pending[:cut], self._pending[cut:]
        return line.decode("utf-8", errors="replace")

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line


def read_lines(fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[str]:
    """Yield every remaining line of ``fd``."""
    yield from LineReader(fd, buffer_size)