"""Read a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Iterator, Optional

DEFAULT_BUFFER_SIZE = 10


class LineReader:
    """Reads lines from a file descriptor in chunks of ``buffer_size`` bytes.

    Each line is returned as bytes including its trailing newline; the last
    line of the input may lack one. Unconsumed data is kept between calls.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def read_line(self) -> Optional[bytes]:
        """Return the next line, or None at end of input.

        A read error discards any buffered data and propagates as OSError.
        """
        try:
            while b"\n" not in self._pending:
                chunk = os.read(self.fd, self.buffer_size)
                if not chunk:
                    break
                self._pending += chunk
        except OSError:
            self._pending.clear()
            raise
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        if end < 0:
            line = bytes(self._pending)
            self._pending.clear()
        else:
            line = bytes(self._pending[:end + 1])
            del self._pending[:end + 1]
        return line

    def __iter__(self) -> Iterator[bytes]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def iter_lines(fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[bytes]:
    """Yield every line of ``fd`` until end of input."""
    yield from LineReader(fd, buffer_size)