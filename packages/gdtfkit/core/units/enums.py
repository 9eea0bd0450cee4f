"""Small closed enumerations and channel-layout values.

All enums here fall back to their schema default for unknown strings, the
same way ``PhysicalUnit`` does.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Self

from pydantic import BaseModel, ConfigDict, Field

from gdtfkit.core.errors import InvalidValueError
from gdtfkit.core.units.dmx_value import DmxValue


class _DefaultingEnum(str, Enum):
    """String enum whose ``parse`` falls back to the first member."""

    @classmethod
    def parse(cls, text: str) -> Self:
        """Return the member whose value is ``text``, or the first member if none is."""
        try:
            return cls(text)
        except ValueError:
            return next(iter(cls))


class Snap(_DefaultingEnum):
    """Whether a logical channel jumps instead of fading.

    Attributes:
        NO: Fade (default)
        YES: Snap
        ON: Snap
        OFF: Fade
    """

    NO = "No"
    YES = "Yes"
    ON = "On"
    OFF = "Off"


class Master(_DefaultingEnum):
    """Master dimming behavior of a logical channel.

    Attributes:
        NONE: Not affected by masters (default)
        GRAND: Affected by the grand master
        GROUP: Affected by group masters
    """

    NONE = "None"
    GRAND = "Grand"
    GROUP = "Group"


class RelationType(_DefaultingEnum):
    """How a master channel affects a follower channel.

    Attributes:
        MULTIPLY: Follower is scaled by the master (default)
        OVERRIDE: Master overrides the follower
    """

    MULTIPLY = "Multiply"
    OVERRIDE = "Override"


class InterpolationTo(_DefaultingEnum):
    """Interpolation between a measurement and the next one.

    Attributes:
        LINEAR: Linear interpolation (default)
        STEP: Hold until the next measurement
        LOG: Logarithmic interpolation
    """

    LINEAR = "Linear"
    STEP = "Step"
    LOG = "Log"


class DmxBreak(BaseModel):
    """DMX break of a channel: a break number, or ``Overwrite``.

    Attributes:
        value: Break number, or "Overwrite" to use the break of the patch
    """

    model_config = ConfigDict(frozen=True)

    value: int | Literal["Overwrite"] = Field(default=1, description="Break number or Overwrite")

    @classmethod
    def parse(cls, text: str) -> DmxBreak:
        if text == "Overwrite":
            return cls(value="Overwrite")
        try:
            number = int(text)
        except ValueError as e:
            raise InvalidValueError("DMXBreak", text, "expected an integer or 'Overwrite'") from e
        if number < 1:
            raise InvalidValueError("DMXBreak", text, "break numbers start at 1")
        return cls(value=number)

    @property
    def is_overwrite(self) -> bool:
        return self.value == "Overwrite"


def parse_offset(text: str) -> tuple[int, ...] | None:
    """Parse a channel offset: ``None`` or comma-separated addresses.

    Addresses are 1-based, so zero and negative values are rejected.

    Example:
        >>> parse_offset("1,2")
        (1, 2)
        >>> parse_offset("None") is None
        True
    """
    if text in ("None", ""):
        return None
    try:
        addresses = tuple(int(part) for part in text.split(","))
    except ValueError as e:
        raise InvalidValueError("Offset", text, "expected comma-separated integers") from e
    if min(addresses) < 1:
        raise InvalidValueError("Offset", text, "addresses start at 1")
    return addresses


def parse_highlight(text: str) -> DmxValue | None:
    """Parse a highlight value: ``None`` or a DMX value."""
    if text in ("None", ""):
        return None
    return DmxValue.parse(text)
