"""Line-by-line reading from files, streams and file descriptors.

Lines keep their trailing newline; the last line of a source that does not
end in a newline comes back without one. ``None`` marks the end of input.
"""

from __future__ import annotations

import os
from typing import Any, AnyStr, Callable, Iterator, Optional, Union

DEFAULT_BUFFER_SIZE = 1024

Source = Union[int, Any]


def _reader_for(source: Source) -> Callable[[int], Any]:
    if isinstance(source, bool):
        raise TypeError("expected a file descriptor or a readable object")
    if isinstance(source, int):
        if source < 0:
            raise ValueError(f"invalid file descriptor {source}")
        return lambda size: os.read(source, size)
    if not hasattr(source, "read"):
        raise TypeError(f"{source!r} cannot be read from")
    return source.read


class LineReader:
    """Reads lines from one source, keeping what it has read past a newline."""

    def __init__(self, source: Source, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._read = _reader_for(source)
        self._pending: Optional[Any] = None

    def read_line(self) -> Optional[AnyStr]:
        """The next line, newline included, or None at end of input."""
        pieces: list = []
        while True:
            pending = self._pending
            if pending:
                newline = "\n" if isinstance(pending, str) else b"\n"
                index = pending.find(newline)
                if index >= 0:
                    pieces.append(pending[:index + 1])
                    self._pending = pending[index + 1:]
                    return pieces[0][:0].join(pieces)
                pieces.append(pending)
                self._pending = None
            chunk = self._read(self.buffer_size)
            if not chunk:
                return pieces[0][:0].join(pieces) if pieces else None
            self._pending = chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


class LineReaderPool:
    """Reads lines from many file descriptors, each with its own buffer."""

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._readers: dict[int, LineReader] = {}

    def read_line(self, fd: int) -> Optional[bytes]:
        """The next line read from ``fd``, or None at its end."""
        reader = self._readers.get(fd)
        if reader is None:
            reader = LineReader(fd, self.buffer_size)
            self._readers[fd] = reader
        return reader.read_line()