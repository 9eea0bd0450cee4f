"""Parser for GDTF fixture description files.

Reads a ``.gdtf`` archive (or a bare ``description.xml``) and decodes it
into a validated, immutable ``Gdtf`` entity tree.
"""

from __future__ import annotations

from pathlib import Path

from gdtfkit.core.config.models import ParserConfig
from gdtfkit.core.errors import MissingRequiredFieldError
from gdtfkit.core.io.archive import read_description
from gdtfkit.core.models.gdtf import Gdtf
from gdtfkit.core.parsers.xml import XmlCursor
from gdtfkit.core.utils.logging import get_logger, log_performance

logger = get_logger(__name__)


class GdtfParser:
    """Parser for GDTF fixture descriptions.

    The parser holds no per-document state; one instance can decode any
    number of documents, including from several threads at once.

    Example:
        >>> parser = GdtfParser()
        >>> gdtf = parser.parse("Generic@LED_PAR@v1.gdtf")
        >>> gdtf.fixture_type.manufacturer
        'Generic'
    """

    def __init__(self, config: ParserConfig | None = None) -> None:
        """Initialize parser.

        Args:
            config: Decoder settings (defaults if None)
        """
        self.config = config or ParserConfig()

    @log_performance
    def parse(self, file_path: Path | str) -> Gdtf:
        """Parse a ``.gdtf`` archive or bare description document.

        Args:
            file_path: Path to the fixture file

        Returns:
            Decoded document

        Raises:
            ArchiveAccessError: If the file cannot be read
            GdtfError: If the document is rejected
        """
        path = Path(file_path)
        logger.info(f"Parsing GDTF file: {path}")
        data = read_description(path, self.config.description_member)
        return self._decode(XmlCursor(data, chunk_size=self.config.chunk_size))

    @log_performance
    def parse_bytes(self, data: bytes) -> Gdtf:
        """Parse description document bytes.

        Raises:
            TextEncodingError: If the bytes are not valid UTF-8
            GdtfError: If the document is rejected
        """
        return self._decode(XmlCursor(data, chunk_size=self.config.chunk_size))

    @log_performance
    def parse_string(self, xml_str: str) -> Gdtf:
        """Parse a description document held in a string.

        Raises:
            TextEncodingError: If the text cannot be encoded as UTF-8
            GdtfError: If the document is rejected
        """
        return self._decode(XmlCursor(xml_str, chunk_size=self.config.chunk_size))

    def _decode(self, cursor: XmlCursor) -> Gdtf:
        root = cursor.root()
        if root.tag != Gdtf.TAG:
            raise MissingRequiredFieldError("Document", Gdtf.TAG)

        document = Gdtf.decode(cursor, root)
        cursor.close()

        fixture = document.fixture_type
        logger.info(
            f"Decoded {fixture.manufacturer} {fixture.name} "
            f"(GDTF {document.data_version.value}, {len(fixture.dmx_modes)} DMX modes)"
        )
        return document
