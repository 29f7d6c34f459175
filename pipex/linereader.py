"""Read a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic

BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Return successive lines of ``stream``, each keeping its trailing newline.

    The stream is read in chunks of ``buffer_size``; a size below one is
    treated as one. Works with both text and binary streams.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        self._stream = stream
        self._buffer_size = max(1, buffer_size)
        self._pending: AnyStr | None = None
        self._separator: AnyStr | None = None

    def _has_line(self) -> bool:
        return (
            self._pending is not None
            and self._separator is not None
            and self._separator in self._pending
        )

    def _read_chunk(self) -> AnyStr | None:
        chunk = self._stream.read(self._buffer_size)
        if not chunk:
            return None
        if self._separator is None:
            self._separator = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"
        return chunk

    def next_line(self) -> AnyStr | None:
        """Return the next line, or ``None`` once the stream is exhausted."""
        while not self._has_line():
            chunk = self._read_chunk()
            if chunk is None:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        cut = pending.find(self._separator)
        if cut < 0:
            self._pending = None
            return pending
        line, rest = pending[:cut + 1], pending[cut + 1:]
        self._pending = rest or None
        return line

    def __iter__(self) -> LineReader[AnyStr]:
        return self

    def __next__(self) -> AnyStr:
        line = self.next_line()
        if line is None:
            raise StopIteration
        return line