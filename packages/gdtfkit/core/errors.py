"""Error taxonomy for GDTF decoding.

Every failure raised while reading a fixture description derives from
``GdtfError`` so callers can treat any of them as "document rejected".
"""

from __future__ import annotations

from pathlib import Path


class GdtfError(Exception):
    """Base exception for all GDTF decoding errors.

    Attributes:
        message: Human-readable error description
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        """Format error for logging and display."""
        return self.message


class TextEncodingError(GdtfError):
    """The description document is not valid UTF-8.

    Attributes:
        position: Byte offset of the first undecodable sequence (if known)
    """

    def __init__(self, message: str, *, position: int | None = None) -> None:
        self.position = position
        super().__init__(message)

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} | position={self.position}"


class MalformedXmlError(GdtfError):
    """Structurally invalid markup, or the stream ended inside an open element."""


class MissingRequiredFieldError(GdtfError):
    """A required attribute or child element is absent or empty.

    Attributes:
        entity: XML tag of the entity being decoded
        field: Name of the missing attribute or child tag
    """

    def __init__(self, entity: str, field: str) -> None:
        self.entity = entity
        self.field = field
        super().__init__(f"Missing required field: {entity}.{field}")


class InvalidValueError(GdtfError):
    """An attribute value does not match its value grammar.

    Attributes:
        kind: Name of the value type that failed to parse (e.g. "DMXValue")
        value: Raw attribute text
        reason: Short explanation of what is wrong with the value
    """

    def __init__(self, kind: str, value: str, reason: str) -> None:
        self.kind = kind
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {kind} {value!r}: {reason}")


class InvalidColorTripleError(InvalidValueError):
    """A CIE color does not consist of exactly three floats."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__("ColorCIE", value, reason)


class InvalidDmxValueError(InvalidValueError):
    """A DMX value does not match ``<int>/<bytes>[s]``."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__("DMXValue", value, reason)


class InvalidNameError(InvalidValueError):
    """A name contains characters outside the allowed set."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__("Name", value, reason)


class InvalidNodeError(InvalidValueError):
    """A dotted reference path has an empty or invalid segment."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__("Node", value, reason)


class UnsupportedDocumentVersionError(InvalidValueError):
    """The document declares a DataVersion this decoder does not support."""

    def __init__(self, value: str) -> None:
        super().__init__("DataVersion", value, "unsupported document version")


class ArchiveAccessError(GdtfError):
    """The container archive could not be opened or read.

    Attributes:
        path: Archive path that failed
    """

    def __init__(self, path: Path | str, message: str) -> None:
        self.path = Path(path)
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.message} | path={self.path}"
