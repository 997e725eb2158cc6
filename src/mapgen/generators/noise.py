"""Seeded value noise for 1D & 2D coordinates.

The noise is a smooth lattice noise: every integer lattice point gets a
pseudo-random value from a permutation table seeded with numpy's default
generator, and points in between are blended with a quintic fade curve.
The same parameters always produce the same field.
"""

import math

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, Field

from ..exceptions import NoiseError

TABLE_SIZE = 256


def _fade(t: float) -> float:
    """Quintic smoothstep used to blend between lattice points."""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _make_tables(seed: int) -> tuple[NDArray[np.int32], NDArray[np.float64]]:
    """Create the doubled permutation table & the lattice values."""
    rng = np.random.default_rng(seed)
    permutation = rng.permutation(TABLE_SIZE).astype(np.int32)
    lattice = rng.random(TABLE_SIZE)
    return np.concatenate([permutation, permutation]), lattice


class Noise:
    """Deterministic noise with output in [min_value, max_value].

    Args:
        seed: Seed of the permutation table.
        scale: Size of a noise feature in cells.
        min_value: Smallest possible output.
        max_value: Largest possible output.

    Raises:
        NoiseError: If scale is 0 or min_value > max_value.
    """

    def __init__(self, seed: int, scale: int, min_value: int, max_value: int):
        if scale == 0:
            raise NoiseError("Noise scale must be greater than 0")
        if min_value > max_value:
            raise NoiseError(
                f"Noise min_value {min_value} is greater than "
                f"max_value {max_value}"
            )

        self.seed = seed
        self.scale = scale
        self.min_value = min_value
        self.max_value = max_value
        self._permutation, self._lattice = _make_tables(seed)

    def _lattice_value(self, x: int, y: int) -> float:
        hashed = self._permutation[self._permutation[x & 255] + (y & 255)]
        return float(self._lattice[hashed])

    def _sample(self, x: float, y: float) -> float:
        """Sample the raw field in [0, 1)."""
        x0 = math.floor(x)
        y0 = math.floor(y)
        u = _fade(x - x0)
        v = _fade(y - y0)

        top = self._blend(self._lattice_value(x0, y0), self._lattice_value(x0 + 1, y0), u)
        bottom = self._blend(
            self._lattice_value(x0, y0 + 1), self._lattice_value(x0 + 1, y0 + 1), u
        )
        return self._blend(top, bottom, v)

    @staticmethod
    def _blend(a: float, b: float, t: float) -> float:
        return a + (b - a) * t

    def _to_output(self, value: float) -> int:
        output = round(self.min_value + value * (self.max_value - self.min_value))
        return max(self.min_value, min(output, self.max_value))

    def generate1d(self, x: int) -> int:
        """Generate noise for a 1D coordinate."""
        return self._to_output(self._sample(x / self.scale, 0.0))

    def generate2d(self, x: int, y: int) -> int:
        """Generate noise for a 2D coordinate."""
        return self._to_output(self._sample(x / self.scale, y / self.scale))

    def to_data(self) -> "NoiseData":
        return NoiseData(
            seed=self.seed,
            scale=self.scale,
            min_value=self.min_value,
            max_value=self.max_value,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Noise):
            return NotImplemented
        return self.to_data() == other.to_data()

    def __hash__(self) -> int:
        return hash((self.seed, self.scale, self.min_value, self.max_value))

    def __repr__(self) -> str:
        return (
            f"Noise(seed={self.seed}, scale={self.scale}, "
            f"min_value={self.min_value}, max_value={self.max_value})"
        )


class NoiseData(BaseModel, frozen=True):
    """Serializable noise parameters."""

    seed: int = Field(ge=0)
    scale: int = Field(ge=0, description="Size of a noise feature in cells")
    min_value: int = Field(default=0, ge=0, le=255)
    max_value: int = Field(default=255, ge=0, le=255)

    def to_noise(self) -> Noise:
        """Validate & build the noise.

        Raises:
            NoiseError: If the parameters are invalid.
        """
        return Noise(self.seed, self.scale, self.min_value, self.max_value)
