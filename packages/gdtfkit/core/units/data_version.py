"""Document schema version."""

from __future__ import annotations

from enum import Enum

from gdtfkit.core.errors import UnsupportedDocumentVersionError


class DataVersion(str, Enum):
    """Supported GDTF schema versions.

    Attributes:
        V1_0: GDTF 1.0
        V1_1: GDTF 1.1
    """

    V1_0 = "1.0"
    V1_1 = "1.1"

    @classmethod
    def parse(cls, text: str) -> DataVersion:
        """Map a ``<major>.<minor>`` string to a supported version.

        Raises:
            UnsupportedDocumentVersionError: For any other version string
        """
        try:
            return cls(text.strip())
        except ValueError as e:
            raise UnsupportedDocumentVersionError(text) from e
