"""Wheel entities: color/gobo/animation wheels and their slots."""

from __future__ import annotations

from pydantic import Field

from gdtfkit.core.parsers.decode import ChildKind, GdtfNode, XmlAttr, XmlChild
from gdtfkit.core.units import (
    WHITE,
    ColorCie,
    Node,
    PixelArray,
    Rotation,
    parse_float,
    parse_name,
    parse_node,
)


class AnimationSystem(GdtfNode):
    """Spline path and visible radius of an animation wheel slot.

    All four values are required; there is no meaningful default path.
    """

    TAG = "AnimationSystem"
    XML_ATTRIBUTES = (
        XmlAttr("P1", "p1", PixelArray.parse, required=True),
        XmlAttr("P2", "p2", PixelArray.parse, required=True),
        XmlAttr("P3", "p3", PixelArray.parse, required=True),
        XmlAttr("Radius", "radius", parse_float, required=True),
    )

    p1: PixelArray = Field(..., description="First spline point, relative to the media center")
    p2: PixelArray = Field(..., description="Second spline point")
    p3: PixelArray = Field(..., description="Third spline point")
    radius: float = Field(..., description="Radius of the visible section in pixels")


class Facet(GdtfNode):
    """One facet of a prism slot."""

    TAG = "Facet"
    XML_ATTRIBUTES = (
        XmlAttr("Color", "color", ColorCie.parse),
        XmlAttr("Rotation", "rotation", Rotation.parse, required=True),
    )

    color: ColorCie = Field(default=WHITE, description="Facet color")
    rotation: Rotation = Field(..., description="Facet orientation")


class Slot(GdtfNode):
    """One discrete position of a wheel."""

    TAG = "Slot"
    XML_ATTRIBUTES = (
        XmlAttr("Name", "name", parse_name),
        XmlAttr("Color", "color", ColorCie.parse),
        XmlAttr("Filter", "filter", parse_node),
        XmlAttr("MediaFileName", "media_file_name", str),
    )
    XML_CHILDREN = (
        XmlChild("Facet", "facets", Facet, ChildKind.EACH),
        XmlChild("AnimationSystem", "animation_system", AnimationSystem),
    )

    name: str = Field(default="", description="Slot name")
    color: ColorCie = Field(default=WHITE, description="Slot color")
    filter: Node | None = Field(default=None, description="Filter link")
    media_file_name: str | None = Field(
        default=None, description="Media file name, without extension, in the archive"
    )
    facets: tuple[Facet, ...] = Field(default=(), description="Prism facets")
    animation_system: AnimationSystem | None = Field(default=None)


class Wheel(GdtfNode):
    """A physical wheel; slots are in wheel order (slot index 1 is first)."""

    TAG = "Wheel"
    XML_ATTRIBUTES = (XmlAttr("Name", "name", parse_name, required=True),)
    XML_CHILDREN = (XmlChild("Slot", "slots", Slot, ChildKind.EACH),)

    name: str = Field(..., description="Unique wheel name")
    slots: tuple[Slot, ...] = Field(default=())

    def slot(self, index: int) -> Slot | None:
        """Return the slot with the given 1-based wheel slot index."""
        if 1 <= index <= len(self.slots):
            return self.slots[index - 1]
        return None
