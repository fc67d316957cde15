"""Line-at-a-time reading from a stream through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Read a text or binary stream one line at a time.

    Each call reads ``buffer_size`` units at a time until a newline is buffered
    or the stream is exhausted. Lines keep their trailing newline; the last
    line may lack one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._buffer: AnyStr | None = None
        self._newline: AnyStr | None = None

    def _fill(self) -> None:
        while self._buffer is None or self._newline not in self._buffer:
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._buffer = None
                raise
            if not chunk:
                return
            if self._newline is None:
                is_binary = isinstance(chunk, (bytes, bytearray))
                self._newline = b"\n" if is_binary else "\n"  # type: ignore[assignment]
            self._buffer = chunk if self._buffer is None else self._buffer + chunk

    def next_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        self._fill()
        buffer = self._buffer
        if not buffer:
            self._buffer = None
            return None
        end = buffer.find(self._newline)
        if end < 0:
            self._buffer = None
            return buffer
        self._buffer = buffer[end + 1:]
        return buffer[: end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of ``stream``, each with its trailing newline if it had one."""
    yield from LineReader(stream, buffer_size)