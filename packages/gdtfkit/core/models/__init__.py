"""Decoded GDTF entity tree."""

from gdtfkit.core.models.attribute_definitions import (
    ActivationGroup,
    Attribute,
    AttributeDefinitions,
    Feature,
    FeatureGroup,
)
from gdtfkit.core.models.dmx_modes import (
    ChannelFunction,
    ChannelSet,
    DmxChannel,
    DmxMode,
    FtMacro,
    LogicalChannel,
    MacroDmx,
    MacroDmxStep,
    MacroDmxValue,
    Relation,
)
from gdtfkit.core.models.fixture_type import FixtureType
from gdtfkit.core.models.gdtf import Gdtf
from gdtfkit.core.models.physical_descriptions import (
    Emitter,
    Filter,
    Measurement,
    MeasurementPoint,
    PhysicalDescriptions,
)
from gdtfkit.core.models.wheels import AnimationSystem, Facet, Slot, Wheel

__all__ = [
    "ActivationGroup",
    "AnimationSystem",
    "Attribute",
    "AttributeDefinitions",
    "ChannelFunction",
    "ChannelSet",
    "DmxChannel",
    "DmxMode",
    "Emitter",
    "Facet",
    "Feature",
    "FeatureGroup",
    "Filter",
    "FixtureType",
    "FtMacro",
    "Gdtf",
    "LogicalChannel",
    "MacroDmx",
    "MacroDmxStep",
    "MacroDmxValue",
    "Measurement",
    "MeasurementPoint",
    "PhysicalDescriptions",
    "Relation",
    "Slot",
    "Wheel",
]
