"""FixtureType entity: the complete description of one fixture model."""

from __future__ import annotations

from pydantic import Field

from gdtfkit.core.models.attribute_definitions import AttributeDefinitions
from gdtfkit.core.models.dmx_modes import DmxMode
from gdtfkit.core.models.physical_descriptions import PhysicalDescriptions
from gdtfkit.core.models.wheels import Wheel
from gdtfkit.core.parsers.decode import ChildKind, GdtfNode, XmlAttr, XmlChild
from gdtfkit.core.units import Node, PathNode, parse_guid, parse_name


def _parse_reference_guid(text: str) -> str | None:
    return parse_guid(text) or None


class FixtureType(GdtfNode):
    """One lighting fixture model.

    Attributes:
        name: Fixture name, unique for the manufacturer
        short_name: Abbreviated name
        long_name: Detailed name
        manufacturer: Manufacturer name
        description: Free-text description
        fixture_type_id: GUID of this fixture type
        thumbnail: Thumbnail file name (without extension) in the archive
        ref_ft: GUID of the fixture type this one was derived from
        attribute_definitions: Attribute catalog
        wheels: Wheels in document order
        physical_descriptions: Emitters and filters
        dmx_modes: DMX modes in document order
    """

    TAG = "FixtureType"
    XML_ATTRIBUTES = (
        XmlAttr("Name", "name", parse_name, required=True),
        XmlAttr("ShortName", "short_name", parse_name, required=True),
        XmlAttr("LongName", "long_name", parse_name, required=True),
        XmlAttr("Manufacturer", "manufacturer", parse_name, required=True),
        XmlAttr("Description", "description", str, required=True),
        XmlAttr("FixtureTypeID", "fixture_type_id", parse_guid, required=True),
        XmlAttr("Thumbnail", "thumbnail", str),
        XmlAttr("RefFT", "ref_ft", _parse_reference_guid),
    )
    XML_CHILDREN = (
        XmlChild("AttributeDefinitions", "attribute_definitions", AttributeDefinitions, required=True),
        XmlChild("Wheels", "wheels", Wheel, ChildKind.GROUP),
        XmlChild("PhysicalDescriptions", "physical_descriptions", PhysicalDescriptions),
        XmlChild("DMXModes", "dmx_modes", DmxMode, ChildKind.GROUP),
    )

    name: str = Field(..., description="Fixture name")
    short_name: str = Field(..., description="Abbreviated fixture name")
    long_name: str = Field(..., description="Detailed fixture name")
    manufacturer: str = Field(..., description="Manufacturer name")
    description: str = Field(..., description="Fixture description")
    fixture_type_id: str = Field(..., description="Fixture type GUID")
    thumbnail: str | None = Field(default=None, description="Thumbnail resource name")
    ref_ft: str | None = Field(default=None, description="Referenced fixture type GUID")
    attribute_definitions: AttributeDefinitions
    wheels: tuple[Wheel, ...] = Field(default=())
    physical_descriptions: PhysicalDescriptions = Field(default_factory=PhysicalDescriptions)
    dmx_modes: tuple[DmxMode, ...] = Field(default=())

    def find_dmx_mode(self, name: str) -> DmxMode | None:
        return next((mode for mode in self.dmx_modes if mode.name == name), None)

    def find_wheel(self, reference: str | Node) -> Wheel | None:
        """Look up a wheel by name or by a ChannelFunction/Slot wheel link."""
        if not isinstance(reference, str):
            if not isinstance(reference, PathNode):
                return None
            reference = reference.name
        return next((wheel for wheel in self.wheels if wheel.name == reference), None)
