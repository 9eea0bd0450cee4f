"""Reference path ("Node") codec.

A node is a dot-separated path of names locating another entity in the same
document, e.g. ``Position.PanTilt`` or ``Wheel 1``. The schema's explicit
"no link" tokens decode to ``UnsetNode``; an absent attribute is left to the
field default (usually ``None``).
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from gdtfkit.core.errors import InvalidNameError, InvalidNodeError
from gdtfkit.core.units.name import parse_name

SEPARATOR = "."
UNSET_TOKENS = frozenset({"", "NoFeature"})


class UnsetNode(BaseModel):
    """Explicit "no link" value."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unset"] = "unset"

    def __str__(self) -> str:
        return ""


class PathNode(BaseModel):
    """A resolved-by-name reference path.

    Attributes:
        segments: Path segments, outermost first
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["path"] = "path"
    segments: tuple[str, ...] = Field(..., min_length=1, description="Path segments")

    @property
    def name(self) -> str:
        """Last segment, i.e. the name of the referenced entity."""
        return self.segments[-1]

    def __str__(self) -> str:
        return SEPARATOR.join(self.segments)


Node = UnsetNode | PathNode

UNSET_NODE = UnsetNode()


def parse_node(text: str) -> Node:
    """Parse a dotted reference path.

    Segments are validated as Names when the document is read, so a path
    that decodes successfully never needs re-checking at resolution time.

    Args:
        text: Raw attribute text

    Returns:
        UnsetNode for the "no link" tokens, otherwise a PathNode

    Raises:
        InvalidNodeError: If a segment is empty or contains control characters

    Example:
        >>> parse_node("Position.PanTilt").segments
        ('Position', 'PanTilt')
        >>> parse_node("NoFeature")
        UnsetNode(kind='unset')
    """
    if text in UNSET_TOKENS:
        return UNSET_NODE

    segments = tuple(text.split(SEPARATOR))
    for segment in segments:
        if not segment:
            raise InvalidNodeError(text, "empty path segment")
        try:
            parse_name(segment)
        except InvalidNameError as e:
            raise InvalidNodeError(text, e.reason) from e
    return PathNode(segments=segments)
