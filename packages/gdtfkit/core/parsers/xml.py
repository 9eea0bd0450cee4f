"""Streaming XML cursor with error handling.

Wraps ElementTree's ``XMLPullParser`` so that decoders can walk a document
as a stream of start/end events. Input is fed to the parser lazily in
chunks, and element subtrees are cleared once consumed, so the whole tree
is never held in memory. Each chunk is checked as UTF-8 before the parser
sees it, so an encoding error is reported at its byte offset.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
import codecs
import io
import xml.etree.ElementTree as ET

from gdtfkit.core.errors import MalformedXmlError, TextEncodingError
from gdtfkit.core.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CHUNK_SIZE = 16 * 1024

START = "start"
END = "end"


class XmlCursor:
    """Pull-based cursor over the start/end events of one XML document.

    Each decoder owns the cursor while it reads its own subtree and hands
    it back positioned just after that subtree's end event. ``children``
    enforces this: any child the caller leaves unread is skipped before the
    next sibling is produced.

    Example:
        >>> cursor = XmlCursor("<root><a/><b><c/></b></root>")
        >>> root = cursor.root()
        >>> [child.tag for child in cursor.children(root)]
        ['a', 'b']
    """

    def __init__(self, source: bytes | str, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        """Initialize cursor.

        Args:
            source: Document bytes (UTF-8) or text
            chunk_size: Bytes fed to the parser per read

        Raises:
            TextEncodingError: If ``source`` is text that cannot be encoded as
                UTF-8 (e.g. a lone surrogate); ``position`` is the character index
            ValueError: If ``chunk_size`` is not positive
        """
        if isinstance(source, str):
            try:
                source = source.encode("utf-8")
            except UnicodeEncodeError as e:
                raise TextEncodingError(
                    f"Description document cannot be encoded as UTF-8: {e.reason}", position=e.start
                ) from e
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._stream = io.BytesIO(source)
        self._decoder = codecs.getincrementaldecoder("utf-8")()
        self._offset = 0
        self._chunk_size = chunk_size
        self._parser = ET.XMLPullParser(events=(START, END))
        self._pending: deque[tuple[str, ET.Element]] = deque()
        self._exhausted = False
        self._last_closed: ET.Element | None = None

    @property
    def last_closed(self) -> ET.Element | None:
        """Element whose end event was consumed most recently."""
        return self._last_closed

    def _fill(self) -> None:
        """Feed the next chunk and queue the events it produced.

        Raises:
            TextEncodingError: If the chunk is not valid UTF-8
            MalformedXmlError: If the parser rejects the markup
        """
        chunk = self._stream.read(self._chunk_size)
        self._check_encoding(chunk)
        try:
            if chunk:
                self._parser.feed(chunk)
            else:
                self._parser.close()
                self._exhausted = True
            self._pending.extend(self._parser.read_events())
        except ET.ParseError as e:
            raise MalformedXmlError(f"Malformed XML: {e}") from e

    def _check_encoding(self, chunk: bytes) -> None:
        # Bytes held back by the decoder belong to the end of the previous chunk
        held = len(self._decoder.getstate()[0])
        try:
            self._decoder.decode(chunk, final=not chunk)
        except UnicodeDecodeError as e:
            raise TextEncodingError(
                f"Description document is not valid UTF-8: {e.reason}",
                position=self._offset - held + e.start,
            ) from e
        self._offset += len(chunk)

    def next_event(self) -> tuple[str, ET.Element] | None:
        """Return the next ``(kind, element)`` event, or None at end of input.

        Attributes of an element are complete at its start event. An element
        stays intact until the next end event after its own is consumed.
        """
        while not self._pending:
            if self._exhausted:
                return None
            self._fill()

        kind, element = self._pending.popleft()
        if kind == END:
            if self._last_closed is not None:
                self._last_closed.clear()
            self._last_closed = element
        return kind, element

    def root(self) -> ET.Element:
        """Consume and return the document element.

        Raises:
            MalformedXmlError: If the document has no element
        """
        event = self.next_event()
        if event is None:
            raise MalformedXmlError("Document has no root element")
        return event[1]

    def children(self, element: ET.Element) -> Iterator[ET.Element]:
        """Yield the direct children of ``element`` in document order.

        Must be called right after ``element``'s start event was consumed and
        iterated to exhaustion. Returns once ``element``'s own end event has
        been consumed.

        Raises:
            MalformedXmlError: If the input ends before ``element`` is closed
        """
        while True:
            event = self.next_event()
            if event is None:
                raise MalformedXmlError(f"Unexpected end of document inside <{element.tag}>")

            kind, node = event
            if kind == END:
                if node is not element:
                    raise MalformedXmlError(
                        f"Unbalanced end tag </{node.tag}> inside <{element.tag}>"
                    )
                return

            yield node
            if self._last_closed is not node:
                self.skip(node)

    def skip(self, element: ET.Element) -> None:
        """Consume the rest of ``element``'s subtree, including its end event.

        Raises:
            MalformedXmlError: If the input ends before ``element`` is closed
        """
        if self._last_closed is element:
            return
        while True:
            event = self.next_event()
            if event is None:
                raise MalformedXmlError(f"Unexpected end of document inside <{element.tag}>")
            kind, node = event
            if kind == END and node is element:
                return

    def close(self) -> None:
        """Drain remaining input so trailing garbage is reported.

        Raises:
            MalformedXmlError: If anything after the document element is malformed
        """
        while self.next_event() is not None:
            pass
