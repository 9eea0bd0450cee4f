"""CIE 1931 xyY color codec."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from gdtfkit.core.errors import InvalidColorTripleError


class ColorCie(BaseModel):
    """CIE 1931 xyY color.

    Attributes:
        x: Chromaticity x
        y: Chromaticity y
        Y: Luminance
    """

    model_config = ConfigDict(frozen=True)

    x: float = Field(..., description="Chromaticity x")
    y: float = Field(..., description="Chromaticity y")
    Y: float = Field(..., description="Luminance")

    @classmethod
    def parse(cls, text: str) -> ColorCie:
        """Parse ``"x,y,Y"``.

        Raises:
            InvalidColorTripleError: If there are not exactly three float components

        Example:
            >>> ColorCie.parse("0.3127,0.3290,100.0")
            ColorCie(x=0.3127, y=0.329, Y=100.0)
        """
        parts = text.split(",")
        if len(parts) != 3:
            raise InvalidColorTripleError(text, f"expected 3 components, got {len(parts)}")
        try:
            x, y, luminance = (float(part) for part in parts)
        except ValueError as e:
            raise InvalidColorTripleError(text, "components must be floats") from e
        return cls(x=x, y=y, Y=luminance)

    def __str__(self) -> str:
        return f"{self.x},{self.y},{self.Y}"


WHITE = ColorCie(x=0.3127, y=0.3290, Y=100.0)
