"""Reading a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, Any, AnyStr, Iterator, Optional

__all__ = ["LineReader"]


class LineReader:
    """Split what a stream yields into lines, reading ``buffer_size`` at a time.

    Lines are returned without their newline. The text after the last
    newline is returned as a final line, empty if the stream ends with a
    newline or holds nothing; after that ``read_line`` returns None.
    Works with text and binary streams alike.
    """

    def __init__(self, stream: IO[Any], buffer_size: int = 1) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer size must be at least 1, got {buffer_size}")
        self._stream = stream
        self._size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._empty: Any = ""
        self._done = False

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, the final segment, or None once exhausted."""
        if self._done:
            return None
        while True:
            if self._pending:
                newline = "\n" if isinstance(self._pending, str) else b"\n"
                index = self._pending.find(newline)
                if index != -1:
                    line = self._pending[:index]
                    self._pending = self._pending[index + 1:]
                    return line
            chunk = self._stream.read(self._size)
            if not chunk:
                self._done = True
                line = self._pending if self._pending is not None else self._empty
                self._pending = None
                return line
            if self._pending is None:
                self._empty = chunk[:0]
                self._pending = chunk
            else:
                self._pending = self._pending + chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line