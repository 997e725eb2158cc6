"""Linear ramps between 2 byte values."""

from pydantic import BaseModel, Field

from ..distance import abs_diff
from ..interpolation import lerp


class Gradient(BaseModel, frozen=True):
    """A ramp from value_start to value_end over length units after start.

    The ramp saturates: inputs past start + length return value_end.
    A length of 0 turns the ramp into a step.
    """

    value_start: int = Field(ge=0, le=255)
    value_end: int = Field(ge=0, le=255)
    start: int = Field(ge=0)
    length: int = Field(ge=0)

    def _interpolate(self, distance: int) -> int:
        if self.length == 0:
            return self.value_start if distance == 0 else self.value_end
        return lerp(self.value_start, self.value_end, distance / self.length)

    def generate(self, input: int) -> int:
        """Generates the gradient. Inputs up to start return value_start."""
        if input <= self.start:
            return self.value_start
        return self._interpolate(input - self.start)

    def generate_absolute(self, input: int) -> int:
        """Generates the gradient in both directions around start."""
        return self._interpolate(abs_diff(self.start, input))
