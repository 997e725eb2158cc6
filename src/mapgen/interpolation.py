"""Interpolation primitives shared by generators and selectors."""

from bisect import bisect_right
from dataclasses import dataclass
from typing import Generic, Protocol, Sequence, TypeVar

from .exceptions import InterpolationError

T = TypeVar("T")


class Interpolate(Protocol):
    """A value that can be blended with another value of its type."""

    def lerp(self, other, factor: float): ...


def lerp(start: int, end: int, factor: float) -> int:
    """Linear interpolation between 2 bytes.

    The factor is clamped to [0, 1], so the result never leaves the
    range spanned by start & end. Fractions are truncated.
    """
    factor = max(0.0, min(factor, 1.0))
    return int(start + (end - start) * factor)


def interpolate(first: T, second: T, factor: float) -> T:
    """Interpolate bytes with `lerp` and anything else with its own lerp()."""
    if isinstance(first, int):
        return lerp(first, second, factor)  # type: ignore[arg-type,return-value]
    return first.lerp(second, factor)  # type: ignore[attr-defined]


@dataclass(frozen=True)
class VectorInterpolation(Generic[T]):
    """Piecewise linear interpolation between sorted control points.

    Inputs below the first or above the last key are clamped to the
    values of those keys.
    """

    keys: tuple[int, ...]
    values: tuple[T, ...]

    @classmethod
    def new(cls, points: Sequence[tuple[int, T]]) -> "VectorInterpolation[T]":
        """Validate & build from (key, value) pairs.

        Raises:
            InterpolationError: If there are fewer than 2 points or the
                keys are not strictly ascending.
        """
        if len(points) < 2:
            raise InterpolationError(
                f"Need at least 2 control points, got {len(points)}"
            )

        keys = tuple(key for key, _ in points)

        for previous, current in zip(keys, keys[1:]):
            if previous >= current:
                raise InterpolationError(
                    f"Keys must be strictly ascending, but {previous} is "
                    f"followed by {current}"
                )

        return cls(keys=keys, values=tuple(value for _, value in points))

    @property
    def points(self) -> list[tuple[int, T]]:
        return list(zip(self.keys, self.values))

    def interpolate(self, input: int) -> T:
        if input <= self.keys[0]:
            return self.values[0]
        if input >= self.keys[-1]:
            return self.values[-1]

        index = bisect_right(self.keys, input)
        start, end = self.keys[index - 1], self.keys[index]
        factor = (input - start) / (end - start)

        return interpolate(self.values[index - 1], self.values[index], factor)
