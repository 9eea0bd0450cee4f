"""Container archive access for GDTF files."""

from gdtfkit.core.io.archive import DESCRIPTION_MEMBER, read_description

__all__ = [
    "DESCRIPTION_MEMBER",
    "read_description",
]
