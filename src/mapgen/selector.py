"""Selectors pick a value of type T based on a byte input.

A selector is used wherever an attribute value has to be turned into
something else, e.g. a color for display or a byte for another attribute.
Every selector is total over the 256 possible inputs.
"""

from dataclasses import dataclass
from typing import Generic, Mapping, Sequence, TypeVar, Union

from .interpolation import VectorInterpolation, interpolate

T = TypeVar("T")


@dataclass(frozen=True)
class Const(Generic[T]):
    """Returns the same value for every input."""

    value: T

    def get(self, input: int) -> T:
        return self.value


@dataclass(frozen=True)
class InterpolatePair(Generic[T]):
    """Blends 2 values across the full byte range.

    ``get(0)`` returns first & ``get(255)`` returns second.
    """

    first: T
    second: T

    def get(self, input: int) -> T:
        return interpolate(self.first, self.second, input / 255.0)


@dataclass(frozen=True)
class InterpolateVector(Generic[T]):
    """Interpolates between multiple control points keyed by byte."""

    interpolation: VectorInterpolation[T]

    def get(self, input: int) -> T:
        return self.interpolation.interpolate(input)


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """Looks the input up or returns the default value. No interpolation."""

    lookup: Mapping[int, T]
    default: T

    def get(self, input: int) -> T:
        return self.lookup.get(input, self.default)


Selector = Union[Const[T], InterpolatePair[T], InterpolateVector[T], Lookup[T]]


def new_interpolate_vector(points: Sequence[tuple[int, T]]) -> InterpolateVector[T]:
    """Build an interpolating selector from (byte key, value) pairs.

    Raises:
        InterpolationError: If the points are too few or unsorted.
    """
    return InterpolateVector(VectorInterpolation.new(points))
