"""Value codecs for GDTF attribute strings."""

from gdtfkit.core.units.color_cie import WHITE, ColorCie
from gdtfkit.core.units.data_version import DataVersion
from gdtfkit.core.units.dmx_value import DMX_DEFAULT, DmxValue
from gdtfkit.core.units.enums import (
    DmxBreak,
    InterpolationTo,
    Master,
    RelationType,
    Snap,
    parse_highlight,
    parse_offset,
)
from gdtfkit.core.units.geometry import PixelArray, Rotation
from gdtfkit.core.units.name import is_unset, parse_guid, parse_name
from gdtfkit.core.units.node import UNSET_NODE, Node, PathNode, UnsetNode, parse_node
from gdtfkit.core.units.numeric import parse_float, parse_int
from gdtfkit.core.units.physical_unit import PhysicalUnit

__all__ = [
    "DMX_DEFAULT",
    "UNSET_NODE",
    "WHITE",
    "ColorCie",
    "DataVersion",
    "DmxBreak",
    "DmxValue",
    "InterpolationTo",
    "Master",
    "Node",
    "PathNode",
    "PhysicalUnit",
    "PixelArray",
    "RelationType",
    "Rotation",
    "Snap",
    "UnsetNode",
    "is_unset",
    "parse_float",
    "parse_guid",
    "parse_highlight",
    "parse_int",
    "parse_name",
    "parse_node",
    "parse_offset",
]
