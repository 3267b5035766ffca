"""Line-by-line reading of text or binary streams."""

from __future__ import annotations

from typing import IO, AnyStr, Iterator

BUFFER_SIZE = 1000


def read_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield the lines of ``stream`` without their trailing newlines.

    The stream is read in chunks of ``BUFFER_SIZE``. Whatever follows the
    last newline is always yielded as the final line, so a stream ending in
    a newline yields a final empty line, and an empty stream yields one empty
    line. Joining the lines with a newline gives back the stream's content.
    Works with both text and binary streams; read errors propagate.
    """
    pending = None
    while True:
        chunk = stream.read(BUFFER_SIZE)
        if chunk is None:
            raise OSError("stream has no data available to read")
        if pending is None:
            pending = chunk[:0]
        newline = "\n" if isinstance(chunk, str) else b"\n"
        pending += chunk
        *complete, pending = pending.split(newline)
        yield from complete
        if not chunk:
            yield pending
            return