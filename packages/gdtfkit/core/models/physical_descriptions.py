"""Physical description entities: emitters, filters and their measurements.

Color spaces, CRIs, DMX profiles, connectors and properties are not modeled
and are skipped when present.
"""

from __future__ import annotations

from pydantic import Field

from gdtfkit.core.parsers.decode import ChildKind, GdtfNode, XmlAttr, XmlChild
from gdtfkit.core.units import ColorCie, InterpolationTo, parse_float, parse_name


class MeasurementPoint(GdtfNode):
    TAG = "MeasurementPoint"
    XML_ATTRIBUTES = (
        XmlAttr("WaveLength", "wave_length", parse_float, tolerant=True),
        XmlAttr("Energy", "energy", parse_float, tolerant=True),
    )

    wave_length: float = Field(default=0.0, description="Center wavelength in nm")
    energy: float = Field(default=0.0, description="Lighting energy in W/m2/nm")


class Measurement(GdtfNode):
    """Spectral measurement of an emitter or filter at one physical value."""

    TAG = "Measurement"
    XML_ATTRIBUTES = (
        XmlAttr("Physical", "physical", parse_float, tolerant=True),
        XmlAttr("LuminousIntensity", "luminous_intensity", parse_float, tolerant=True),
        XmlAttr("Transmission", "transmission", parse_float, tolerant=True),
        XmlAttr("InterpolationTo", "interpolation_to", InterpolationTo.parse),
    )
    XML_CHILDREN = (
        XmlChild("MeasurementPoint", "measurement_points", MeasurementPoint, ChildKind.EACH),
    )

    physical: float = Field(default=0.0, description="Physical value (percent) of the source")
    luminous_intensity: float = Field(default=0.0, description="Intensity in cd (emitters)")
    transmission: float = Field(default=0.0, description="Transmission in percent (filters)")
    interpolation_to: InterpolationTo = Field(default=InterpolationTo.LINEAR)
    measurement_points: tuple[MeasurementPoint, ...] = Field(default=())


class Emitter(GdtfNode):
    """A light source (LED die, lamp) of the fixture."""

    TAG = "Emitter"
    XML_ATTRIBUTES = (
        XmlAttr("Name", "name", parse_name, required=True),
        XmlAttr("Color", "color", ColorCie.parse),
        XmlAttr("DominantWaveLength", "dominant_wave_length", parse_float, tolerant=True),
        XmlAttr("DiodePart", "diode_part", str),
    )
    XML_CHILDREN = (XmlChild("Measurement", "measurements", Measurement, ChildKind.EACH),)

    name: str = Field(..., description="Unique emitter name")
    color: ColorCie | None = Field(default=None, description="Approximate emitter color")
    dominant_wave_length: float | None = Field(default=None, description="Dominant wavelength in nm")
    diode_part: str | None = Field(default=None, description="Manufacturer part number")
    measurements: tuple[Measurement, ...] = Field(default=())


class Filter(GdtfNode):
    TAG = "Filter"
    XML_ATTRIBUTES = (
        XmlAttr("Name", "name", parse_name, required=True),
        XmlAttr("Color", "color", ColorCie.parse, required=True),
    )
    XML_CHILDREN = (XmlChild("Measurement", "measurements", Measurement, ChildKind.EACH),)

    name: str = Field(..., description="Unique filter name")
    color: ColorCie = Field(..., description="Approximate filter color")
    measurements: tuple[Measurement, ...] = Field(default=())


class PhysicalDescriptions(GdtfNode):
    TAG = "PhysicalDescriptions"
    XML_CHILDREN = (
        XmlChild("Emitters", "emitters", Emitter, ChildKind.GROUP),
        XmlChild("Filters", "filters", Filter, ChildKind.GROUP),
    )

    emitters: tuple[Emitter, ...] = Field(default=())
    filters: tuple[Filter, ...] = Field(default=())
