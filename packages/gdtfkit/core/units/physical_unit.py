"""Physical unit enumeration."""

from __future__ import annotations

from enum import Enum


class PhysicalUnit(str, Enum):
    """Physical unit of an attribute's value range.

    Unknown strings decode to ``NONE``; new units appear in newer schema
    revisions and must not reject otherwise valid documents.
    """

    NONE = "None"
    PERCENT = "Percent"
    LENGTH = "Length"
    MASS = "Mass"
    TIME = "Time"
    TEMPERATURE = "Temperature"
    LUMINOUS_INTENSITY = "LuminousIntensity"
    ANGLE = "Angle"
    FORCE = "Force"
    FREQUENCY = "Frequency"
    CURRENT = "Current"
    VOLTAGE = "Voltage"
    POWER = "Power"
    ENERGY = "Energy"
    AREA = "Area"
    VOLUME = "Volume"
    SPEED = "Speed"
    ACCELERATION = "Acceleration"
    ANGULAR_SPEED = "AngularSpeed"
    ANGULAR_ACCC = "AngularAccc"
    WAVE_LENGTH = "WaveLength"
    COLOR_COMPONENT = "ColorComponent"

    @classmethod
    def parse(cls, text: str) -> PhysicalUnit:
        try:
            return cls(text)
        except ValueError:
            return cls.NONE
