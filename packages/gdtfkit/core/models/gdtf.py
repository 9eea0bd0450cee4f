"""Document root entity."""

from __future__ import annotations

from pydantic import Field

from gdtfkit.core.models.fixture_type import FixtureType
from gdtfkit.core.parsers.decode import GdtfNode, XmlAttr, XmlChild
from gdtfkit.core.units import DataVersion


class Gdtf(GdtfNode):
    """A decoded fixture description document.

    Attributes:
        data_version: Schema version declared by the document
        fixture_type: The single fixture type described
    """

    TAG = "GDTF"
    XML_ATTRIBUTES = (XmlAttr("DataVersion", "data_version", DataVersion.parse, required=True),)
    XML_CHILDREN = (XmlChild("FixtureType", "fixture_type", FixtureType, required=True),)

    data_version: DataVersion = Field(..., description="Declared schema version")
    fixture_type: FixtureType = Field(..., description="Described fixture type")
