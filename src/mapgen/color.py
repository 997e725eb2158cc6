"""RGB colors for visualizing attributes."""

from pydantic import BaseModel, Field

from .interpolation import lerp


class Color(BaseModel, frozen=True):
    """Immutable RGB color with one byte per channel."""

    r: int = Field(default=0, ge=0, le=255)
    g: int = Field(default=0, ge=0, le=255)
    b: int = Field(default=0, ge=0, le=255)

    @classmethod
    def gray(cls, value: int) -> "Color":
        return cls(r=value, g=value, b=value)

    def lerp(self, other: "Color", factor: float) -> "Color":
        """Blend each channel towards the other color."""
        return Color(
            r=lerp(self.r, other.r, factor),
            g=lerp(self.g, other.g, factor),
            b=lerp(self.b, other.b, factor),
        )

    def __str__(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"
