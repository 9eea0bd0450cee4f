"""DMX value codec.

A DMX value is written ``<value>/<byte_count>`` with an optional trailing
``s`` marking byte-shifting semantics for fine channels, e.g. ``255/1``,
``32768/2`` or ``1/1s``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from gdtfkit.core.errors import InvalidDmxValueError

SHIFT_MARKER = "s"
MAX_BYTE_COUNT = 4


class DmxValue(BaseModel):
    """A fractional DMX value.

    Equality compares all three fields; ``1/1`` and ``256/2`` are different
    values even though they address the same coarse level.

    Attributes:
        value: Unsigned numerator
        byte_count: Resolution in bytes (1-4)
        byte_shifting: True when the value uses byte-shifting semantics
    """

    model_config = ConfigDict(frozen=True)

    value: int = Field(..., ge=0, description="Unsigned numerator")
    byte_count: int = Field(..., ge=1, le=MAX_BYTE_COUNT, description="Resolution in bytes")
    byte_shifting: bool = Field(default=False, description="Byte-shifting marker")

    @classmethod
    def parse(cls, text: str) -> DmxValue:
        """Parse a DMX value string.

        Args:
            text: Raw attribute text such as ``"128/1"`` or ``"1/2s"``

        Returns:
            Parsed DmxValue

        Raises:
            InvalidDmxValueError: If the text does not match the grammar

        Example:
            >>> DmxValue.parse("255/1")
            DmxValue(value=255, byte_count=1, byte_shifting=False)
        """
        raw = text.strip()
        byte_shifting = raw.endswith(SHIFT_MARKER)
        if byte_shifting:
            raw = raw[: -len(SHIFT_MARKER)]

        parts = raw.split("/")
        if len(parts) != 2:
            raise InvalidDmxValueError(text, "expected '<value>/<byte_count>'")

        numerator, denominator = parts
        if not numerator.isdecimal() or not denominator.isdecimal():
            raise InvalidDmxValueError(text, "value and byte count must be unsigned integers")

        value = int(numerator)
        byte_count = int(denominator)
        if not 1 <= byte_count <= MAX_BYTE_COUNT:
            raise InvalidDmxValueError(text, f"byte count must be 1-{MAX_BYTE_COUNT}")
        if value >= 256**byte_count:
            raise InvalidDmxValueError(text, f"value does not fit in {byte_count} byte(s)")

        return cls(value=value, byte_count=byte_count, byte_shifting=byte_shifting)

    def __str__(self) -> str:
        suffix = SHIFT_MARKER if self.byte_shifting else ""
        return f"{self.value}/{self.byte_count}{suffix}"


DMX_DEFAULT = DmxValue(value=0, byte_count=1)
