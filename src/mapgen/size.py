"""2D sizes and index conversion."""

from pydantic import BaseModel, Field


class Size2d(BaseModel, frozen=True):
    """Immutable width & height of a 2D grid.

    Grids are stored row-major, so the point (x, y) lives at
    index ``x + y * width``.
    """

    width: int = Field(ge=0)
    height: int = Field(ge=0)

    @property
    def area(self) -> int:
        """Number of cells in the grid."""
        return self.width * self.height

    def to_index_risky(self, x: int, y: int) -> int:
        """Convert a point to an index without bounds checks.

        The caller guarantees x < width and y < height.
        """
        return x + y * self.width

    def saturating_to_index(self, x: int, y: int) -> int:
        """Convert a point to an index after clamping it into the grid."""
        x = max(0, min(x, self.width - 1))
        y = max(0, min(y, self.height - 1))
        return self.to_index_risky(x, y)

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"
