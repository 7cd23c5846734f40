"""Output sinks for rendered markup.

The renderer writes through a single capability: ``append(s)``. Anything
with that method is a sink, including a plain ``list``:

    >>> from ladrillo import render, text
    >>> parts: list[str] = []
    >>> render(text("a < b"), parts)
    >>> "".join(parts)
    'a &lt; b'

StringSink accumulates parts and joins once at the end: O(n) total vs
O(n²) for repeated string concatenation. StreamSink forwards each part to
a writable text stream such as an open file or ``sys.stdout``.

Thread Safety:
Sinks are not synchronized. Use one sink per render.

"""

from __future__ import annotations

from typing import Protocol


class Sink(Protocol):
    """Append-only text destination."""

    def append(self, s: str, /) -> object: ...


class SupportsWrite(Protocol):
    def write(self, s: str, /) -> object: ...


class StringSink:
    """In-memory sink that joins once on build().

    Usage:
            >>> sink = StringSink()
            >>> _ = sink.append("<p>").append("Hi").append("</p>")
            >>> sink.build()
            '<p>Hi</p>'

    """

    __slots__ = ("_parts", "_length")

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._length = 0

    def append(self, s: str) -> StringSink:
        """Append a string (empty strings are skipped).

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
            self._length += len(s)
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def clear(self) -> StringSink:
        """Drop everything appended so far."""
        self._parts.clear()
        self._length = 0
        return self

    def __len__(self) -> int:
        """Return the number of characters appended."""
        return self._length

    def __bool__(self) -> bool:
        return bool(self._parts)


class StreamSink:
    """Sink that writes each part straight to a text stream.

    Write errors raised by the stream propagate unchanged.

    Example:
        >>> import io
        >>> buffer = io.StringIO()
        >>> sink = StreamSink(buffer)
        >>> _ = sink.append("<br>")
        >>> buffer.getvalue(), sink.written
        ('<br>', 4)

    """

    __slots__ = ("_stream", "written")

    def __init__(self, stream: SupportsWrite) -> None:
        self._stream = stream
        self.written = 0

    def append(self, s: str) -> StreamSink:
        if s:
            self._stream.write(s)
            self.written += len(s)
        return self


__all__ = ["Sink", "StreamSink", "StringSink", "SupportsWrite"]
