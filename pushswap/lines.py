"""Line-at-a-time reading from a file-like object with a fixed read size."""

from __future__ import annotations

from typing import AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 1000


class LineReader(Generic[AnyStr]):
    """Reads a stream in chunks and hands it back one line at a time.

    Each line keeps its trailing newline when it has one; the final line of
    the stream may lack it. Works with text and binary streams alike.
    """

    def __init__(self, stream, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._separator: Optional[AnyStr] = None

    def _fill(self) -> None:
        """Read chunks until a newline is buffered or the stream ends."""
        while True:
            if (
                self._pending is not None
                and self._separator is not None
                and self._separator in self._pending
            ):
                return
            chunk = self._stream.read(self._buffer_size)
            if self._pending is None:
                self._pending = chunk[:0]
                self._separator = "\n" if isinstance(chunk, str) else b"\n"  # type: ignore[assignment]
            if not chunk:
                return
            self._pending += chunk

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        self._fill()
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        cut = pending.find(self._separator)
        if cut == -1:
            self._pending = None
            return pending
        self._pending = pending[cut + 1:]
        return pending[: cut + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line