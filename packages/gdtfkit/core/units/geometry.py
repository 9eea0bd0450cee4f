"""Pixel coordinates and rotation matrices used by wheel slots."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field

from gdtfkit.core.errors import InvalidValueError

_ROTATION_ROW = re.compile(r"\{([^{}]*)\}")


class PixelArray(BaseModel):
    """A point in media-file pixel space, written ``"x,y"``."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    @classmethod
    def parse(cls, text: str) -> PixelArray:
        parts = text.split(",")
        if len(parts) != 2:
            raise InvalidValueError("PixelArray", text, "expected 'x,y'")
        try:
            return cls(x=float(parts[0]), y=float(parts[1]))
        except ValueError as e:
            raise InvalidValueError("PixelArray", text, "coordinates must be floats") from e


class Rotation(BaseModel):
    """3x3 rotation matrix, written ``"{a,b,c}{d,e,f}{g,h,i}"``.

    Attributes:
        rows: Matrix rows, top to bottom
    """

    model_config = ConfigDict(frozen=True)

    rows: tuple[tuple[float, float, float], ...] = Field(
        ..., min_length=3, max_length=3, description="Matrix rows"
    )

    @classmethod
    def parse(cls, text: str) -> Rotation:
        """Parse a rotation matrix.

        Example:
            >>> Rotation.parse("{1,0,0}{0,1,0}{0,0,1}").rows[1]
            (0.0, 1.0, 0.0)
        """
        compact = text.replace(" ", "")
        groups = _ROTATION_ROW.findall(compact)
        if len(groups) != 3 or "".join(f"{{{g}}}" for g in groups) != compact:
            raise InvalidValueError("Rotation", text, "expected three '{a,b,c}' rows")

        rows = []
        for group in groups:
            cells = group.split(",")
            if len(cells) != 3:
                raise InvalidValueError("Rotation", text, "each row needs three values")
            try:
                rows.append(tuple(float(cell) for cell in cells))
            except ValueError as e:
                raise InvalidValueError("Rotation", text, "matrix values must be floats") from e
        return cls(rows=tuple(rows))
