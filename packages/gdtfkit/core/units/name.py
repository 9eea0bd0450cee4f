"""Name and GUID codecs.

Names are plain strings restricted to printable characters. The empty
string is an explicit "unset" value and is distinct from an absent
attribute, which decodes to the field default.
"""

from __future__ import annotations

from gdtfkit.core.errors import InvalidNameError

UNSET = ""


def parse_name(text: str) -> str:
    """Validate a GDTF Name.

    Args:
        text: Raw attribute text

    Returns:
        The name unchanged

    Raises:
        InvalidNameError: If the text contains control characters

    Example:
        >>> parse_name("Beam")
        'Beam'
        >>> parse_name("")
        ''
    """
    for index, char in enumerate(text):
        if ord(char) < 32 or ord(char) == 127:
            raise InvalidNameError(text, f"control character at position {index}")
    return text


def is_unset(name: str) -> bool:
    return name == UNSET


def parse_guid(text: str) -> str:
    """Return a GUID string; no format validation beyond presence.

    Surrounding whitespace is stripped so that padded identifiers still
    compare equal.
    """
    return text.strip()
