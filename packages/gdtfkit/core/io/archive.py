"""Reading the description document out of a ``.gdtf`` container.

A ``.gdtf`` file is a zip archive whose ``description.xml`` member holds the
fixture description. Bare ``description.xml`` files are accepted too.
"""

from __future__ import annotations

from pathlib import Path
import zipfile

from gdtfkit.core.errors import ArchiveAccessError
from gdtfkit.core.utils.logging import get_logger

logger = get_logger(__name__)

DESCRIPTION_MEMBER = "description.xml"


def read_description(path: Path | str, member: str = DESCRIPTION_MEMBER) -> bytes:
    """Return the raw bytes of the description document.

    Args:
        path: Path to a ``.gdtf`` archive or a bare XML file
        member: Name of the description member inside the archive

    Returns:
        Undecoded document bytes

    Raises:
        ArchiveAccessError: If the file is missing or unreadable, is neither a
            zip archive nor XML, or the archive lacks ``member``

    Example:
        >>> data = read_description("Robe_Robin_Esprite.gdtf")
        >>> data[:5]
        b'<?xml'
    """
    path = Path(path)
    if not path.is_file():
        raise ArchiveAccessError(path, "Fixture file does not exist")

    if not zipfile.is_zipfile(path):
        try:
            data = path.read_bytes()
        except OSError as e:
            raise ArchiveAccessError(path, f"Could not read fixture file: {e}") from e
        if not data.lstrip(b"\xef\xbb\xbf \t\r\n").startswith(b"<"):
            raise ArchiveAccessError(path, "File is neither a GDTF archive nor an XML document")
        logger.debug(f"Reading bare description document: {path}")
        return data

    try:
        with zipfile.ZipFile(path, "r") as archive:
            logger.debug(f"Extracting {member} from {path}")
            return archive.read(member)
    except KeyError as e:
        raise ArchiveAccessError(path, f"Archive has no {member} member") from e
    except (zipfile.BadZipFile, OSError) as e:
        raise ArchiveAccessError(path, f"Could not read GDTF archive: {e}") from e
