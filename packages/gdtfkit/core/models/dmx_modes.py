"""DMX mode entities.

A DMX mode is one channel layout of the fixture:

    DMXMode
    ├── DMXChannels/DMXChannel
    │   └── LogicalChannel
    │       └── ChannelFunction
    │           └── ChannelSet
    ├── Relations/Relation
    └── FTMacros/FTMacro
        └── MacroDMX/MacroDMXStep/MacroDMXValue
"""

from __future__ import annotations

from pydantic import Field

from gdtfkit.core.parsers.decode import ChildKind, GdtfNode, XmlAttr, XmlChild
from gdtfkit.core.units import (
    DMX_DEFAULT,
    UNSET_NODE,
    DmxBreak,
    DmxValue,
    Master,
    Node,
    RelationType,
    Snap,
    parse_float,
    parse_highlight,
    parse_int,
    parse_name,
    parse_node,
    parse_offset,
)


class ChannelSet(GdtfNode):
    """Named sub-range of a channel function (e.g. one gobo position).

    Attributes:
        name: Display name of the set; may be empty
        dmx_from: Start of the set's DMX range
        physical_from: Physical start value, None if absent or malformed
        physical_to: Physical end value, None if absent or malformed
        wheel_slot_index: 1-based slot of the linked wheel, None if absent
    """

    TAG = "ChannelSet"
    XML_ATTRIBUTES = (
        XmlAttr("Name", "name", parse_name),
        XmlAttr("DMXFrom", "dmx_from", DmxValue.parse),
        XmlAttr("PhysicalFrom", "physical_from", parse_float, tolerant=True),
        XmlAttr("PhysicalTo", "physical_to", parse_float, tolerant=True),
        XmlAttr("WheelSlotIndex", "wheel_slot_index", parse_int, tolerant=True),
    )

    name: str = Field(default="", description="Set name")
    dmx_from: DmxValue = Field(default=DMX_DEFAULT, description="Start DMX value")
    physical_from: float | None = Field(default=None, description="Physical start value")
    physical_to: float | None = Field(default=None, description="Physical end value")
    wheel_slot_index: int | None = Field(default=None, description="Linked wheel slot index")


class ChannelFunction(GdtfNode):
    """Behavior of a logical channel within one DMX sub-range.

    ``attribute`` defaults to the explicit "no feature" link because the
    schema's default for this attribute is ``NoFeature``; the other links
    default to None when absent.
    """

    TAG = "ChannelFunction"
    XML_ATTRIBUTES = (
        XmlAttr("Name", "name", parse_name),
        XmlAttr("Attribute", "attribute", parse_node),
        XmlAttr("OriginalAttribute", "original_attribute", str),
        XmlAttr("DMXFrom", "dmx_from", DmxValue.parse, tolerant=True),
        XmlAttr("Default", "default", DmxValue.parse, tolerant=True),
        XmlAttr("PhysicalFrom", "physical_from", parse_float, tolerant=True),
        XmlAttr("PhysicalTo", "physical_to", parse_float, tolerant=True),
        XmlAttr("RealFade", "real_fade", parse_float, tolerant=True),
        XmlAttr("RealAcceleration", "real_acceleration", parse_float, tolerant=True),
        XmlAttr("Wheel", "wheel", parse_node, tolerant=True),
        XmlAttr("Emitter", "emitter", parse_node, tolerant=True),
        XmlAttr("Filter", "filter", parse_node, tolerant=True),
        XmlAttr("ModeMaster", "mode_master", parse_node, tolerant=True),
        XmlAttr("ModeFrom", "mode_from", DmxValue.parse),
        XmlAttr("ModeTo", "mode_to", DmxValue.parse),
    )
    XML_CHILDREN = (XmlChild("ChannelSet", "channel_sets", ChannelSet, ChildKind.EACH),)

    name: str = Field(default="", description="Function name")
    attribute: Node = Field(default=UNSET_NODE, description="Attribute link")
    original_attribute: str = Field(default="", description="Attribute name as written by the vendor")
    dmx_from: DmxValue = Field(default=DMX_DEFAULT, description="Start DMX value")
    default: DmxValue = Field(default=DMX_DEFAULT, description="Default DMX value")
    physical_from: float = Field(default=0.0, description="Physical start value")
    physical_to: float = Field(default=0.0, description="Physical end value")
    real_fade: float = Field(default=0.0, description="Fade time in seconds")
    real_acceleration: float = Field(default=0.0, description="Acceleration time in seconds")
    wheel: Node | None = Field(default=None, description="Wheel link")
    emitter: Node | None = Field(default=None, description="Emitter link")
    filter: Node | None = Field(default=None, description="Filter link")
    mode_master: Node | None = Field(default=None, description="Mode master channel link")
    mode_from: DmxValue | None = Field(default=None, description="Mode master range start")
    mode_to: DmxValue | None = Field(default=None, description="Mode master range end")
    channel_sets: tuple[ChannelSet, ...] = Field(default=(), description="Channel sets")


class LogicalChannel(GdtfNode):
    """Semantic sub-channel of a DMX channel."""

    TAG = "LogicalChannel"
    XML_ATTRIBUTES = (
        XmlAttr("Attribute", "attribute", parse_node),
        XmlAttr("Snap", "snap", Snap.parse),
        XmlAttr("Master", "master", Master.parse),
        XmlAttr("MibFade", "mib_fade", parse_float, tolerant=True),
        XmlAttr("DMXChangeTimeLimit", "dmx_change_time_limit", parse_float, tolerant=True),
    )
    XML_CHILDREN = (
        XmlChild("ChannelFunction", "channel_functions", ChannelFunction, ChildKind.EACH),
    )

    attribute: Node | None = Field(default=None, description="Attribute link")
    snap: Snap = Field(default=Snap.NO, description="Whether the channel jumps instead of fades")
    master: Master = Field(default=Master.NONE, description="Master dimming behavior")
    mib_fade: float = Field(default=0.0, description="Move-in-black fade time in seconds")
    dmx_change_time_limit: float = Field(default=0.0, description="Minimum DMX change interval")
    channel_functions: tuple[ChannelFunction, ...] = Field(default=())


class DmxChannel(GdtfNode):
    """One DMX channel (possibly spanning several addresses)."""

    TAG = "DMXChannel"
    XML_ATTRIBUTES = (
        XmlAttr("DMXBreak", "dmx_break", DmxBreak.parse, tolerant=True),
        XmlAttr("Offset", "offset", parse_offset, tolerant=True),
        XmlAttr("Default", "default", DmxValue.parse, tolerant=True),
        XmlAttr("Highlight", "highlight", parse_highlight, tolerant=True),
        XmlAttr("Geometry", "geometry", parse_node),
        XmlAttr("InitialFunction", "initial_function", parse_node),
    )
    XML_CHILDREN = (
        XmlChild("LogicalChannel", "logical_channels", LogicalChannel, ChildKind.EACH),
    )

    dmx_break: DmxBreak = Field(default=DmxBreak(), description="DMX break")
    offset: tuple[int, ...] | None = Field(
        default=None, description="Relative addresses, coarsest first; None for virtual channels"
    )
    default: DmxValue = Field(default=DMX_DEFAULT, description="Default DMX value")
    highlight: DmxValue | None = Field(default=None, description="Highlight DMX value")
    geometry: Node | None = Field(default=None, description="Geometry link")
    initial_function: Node | None = Field(default=None, description="Initial channel function")
    logical_channels: tuple[LogicalChannel, ...] = Field(default=())

    @property
    def name(self) -> str:
        """Channel name as used by references: ``<Geometry>_<Attribute>``."""
        geometry = str(self.geometry) if self.geometry is not None else ""
        attribute = ""
        if self.logical_channels and self.logical_channels[0].attribute is not None:
            attribute = str(self.logical_channels[0].attribute)
        return f"{geometry}_{attribute}"


class Relation(GdtfNode):
    """Dependency between a master and a follower channel."""

    TAG = "Relation"
    XML_ATTRIBUTES = (
        XmlAttr("Name", "name", parse_name),
        XmlAttr("Master", "master", parse_node, required=True),
        XmlAttr("Follower", "follower", parse_node, required=True),
        XmlAttr("Type", "relation_type", RelationType.parse),
    )

    name: str = Field(default="", description="Relation name")
    master: Node = Field(..., description="Master DMX channel link")
    follower: Node = Field(..., description="Follower channel function link")
    relation_type: RelationType = Field(default=RelationType.MULTIPLY)


class MacroDmxValue(GdtfNode):
    """DMX value sent to one channel during a macro step."""

    TAG = "MacroDMXValue"
    XML_ATTRIBUTES = (
        XmlAttr("Value", "value", DmxValue.parse, required=True),
        XmlAttr("DMXChannel", "dmx_channel", parse_node, required=True),
    )

    value: DmxValue = Field(..., description="Value to send")
    dmx_channel: Node = Field(..., description="Target DMX channel link")


class MacroDmxStep(GdtfNode):
    TAG = "MacroDMXStep"
    XML_ATTRIBUTES = (XmlAttr("Duration", "duration", parse_float, tolerant=True),)
    XML_CHILDREN = (XmlChild("MacroDMXValue", "dmx_values", MacroDmxValue, ChildKind.EACH),)

    duration: float = Field(default=1.0, description="Step duration in seconds")
    dmx_values: tuple[MacroDmxValue, ...] = Field(default=())


class MacroDmx(GdtfNode):
    TAG = "MacroDMX"
    XML_CHILDREN = (XmlChild("MacroDMXStep", "steps", MacroDmxStep, ChildKind.EACH),)

    steps: tuple[MacroDmxStep, ...] = Field(default=())


class FtMacro(GdtfNode):
    """Fixture-type macro: a named sequence of DMX steps."""

    TAG = "FTMacro"
    XML_ATTRIBUTES = (
        XmlAttr("Name", "name", parse_name, required=True),
        XmlAttr("ChannelFunction", "channel_function", parse_node),
    )
    XML_CHILDREN = (XmlChild("MacroDMX", "macro_dmx", MacroDmx),)

    name: str = Field(..., description="Macro name")
    channel_function: Node | None = Field(default=None, description="Triggering channel function")
    macro_dmx: MacroDmx | None = Field(default=None, description="DMX sequence")


class DmxMode(GdtfNode):
    """One operating mode (channel layout) of the fixture."""

    TAG = "DMXMode"
    XML_ATTRIBUTES = (
        XmlAttr("Name", "name", parse_name, required=True),
        XmlAttr("Geometry", "geometry", parse_node),
    )
    XML_CHILDREN = (
        XmlChild("DMXChannels", "dmx_channels", DmxChannel, ChildKind.GROUP),
        XmlChild("Relations", "relations", Relation, ChildKind.GROUP),
        XmlChild("FTMacros", "ft_macros", FtMacro, ChildKind.GROUP),
    )

    name: str = Field(..., description="Mode name")
    geometry: Node | None = Field(default=None, description="Top-level geometry link")
    dmx_channels: tuple[DmxChannel, ...] = Field(default=())
    relations: tuple[Relation, ...] = Field(default=())
    ft_macros: tuple[FtMacro, ...] = Field(default=())

    @property
    def footprint(self) -> int:
        """Number of DMX addresses the mode occupies in its first break."""
        addresses = [
            address
            for channel in self.dmx_channels
            if channel.offset is not None and channel.dmx_break.value == 1
            for address in channel.offset
        ]
        return max(addresses, default=0)
