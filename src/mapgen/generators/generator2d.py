"""Generators for 2D points, used to fill whole attributes."""

from dataclasses import dataclass
from typing import Annotated, Literal, Union

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, Field

from ..distance import calculate_distance
from ..exceptions import GeneratorError, NoiseError
from ..size import Size2d
from .generator1d import Generator1d, Generator1dData
from .noise import Noise, NoiseData


# --- Runtime generators ---


@dataclass(frozen=True)
class ApplyToX:
    """Feeds the x coordinate to a 1D generator."""

    generator: Generator1d

    def generate(self, x: int, y: int) -> int:
        return self.generator.generate(x)

    def to_data(self) -> "ApplyToXData":
        return ApplyToXData(generator=self.generator.to_data())


@dataclass(frozen=True)
class ApplyToY:
    """Feeds the y coordinate to a 1D generator."""

    generator: Generator1d

    def generate(self, x: int, y: int) -> int:
        return self.generator.generate(y)

    def to_data(self) -> "ApplyToYData":
        return ApplyToYData(generator=self.generator.to_data())


@dataclass(frozen=True)
class ApplyToDistance:
    """Feeds the distance from a center point to a 1D generator."""

    generator: Generator1d
    center_x: int
    center_y: int

    def generate(self, x: int, y: int) -> int:
        distance = calculate_distance(self.center_x, self.center_y, x, y)
        return self.generator.generate(distance)

    def to_data(self) -> "ApplyToDistanceData":
        return ApplyToDistanceData(
            generator=self.generator.to_data(),
            center_x=self.center_x,
            center_y=self.center_y,
        )


@dataclass(frozen=True)
class IndexGenerator:
    """Generates the index of each point, wrapped into a byte.

    Meant for debugging & visualization.
    """

    size: Size2d

    def generate(self, x: int, y: int) -> int:
        return self.size.saturating_to_index(x, y) % 256

    def to_data(self) -> "IndexGeneratorData":
        return IndexGeneratorData(size=self.size)


@dataclass(frozen=True)
class Noise2d:
    """Generates 2D noise."""

    noise: Noise

    def generate(self, x: int, y: int) -> int:
        return self.noise.generate2d(x, y)

    def to_data(self) -> "Noise2dData":
        return Noise2dData(**self.noise.to_data().model_dump())


Generator2d = Union[ApplyToX, ApplyToY, ApplyToDistance, IndexGenerator, Noise2d]


# --- Data mirrors ---


class ApplyToXData(BaseModel, frozen=True):
    type: Literal["apply_to_x"] = "apply_to_x"
    generator: Generator1dData

    def to_generator(self) -> ApplyToX:
        return ApplyToX(self.generator.to_generator())


class ApplyToYData(BaseModel, frozen=True):
    type: Literal["apply_to_y"] = "apply_to_y"
    generator: Generator1dData

    def to_generator(self) -> ApplyToY:
        return ApplyToY(self.generator.to_generator())


class ApplyToDistanceData(BaseModel, frozen=True):
    type: Literal["apply_to_distance"] = "apply_to_distance"
    generator: Generator1dData
    center_x: int = Field(ge=0)
    center_y: int = Field(ge=0)

    def to_generator(self) -> ApplyToDistance:
        return ApplyToDistance(
            self.generator.to_generator(), self.center_x, self.center_y
        )


class IndexGeneratorData(BaseModel, frozen=True):
    type: Literal["index"] = "index"
    size: Size2d

    def to_generator(self) -> IndexGenerator:
        return IndexGenerator(self.size)


class Noise2dData(NoiseData, frozen=True):
    type: Literal["noise"] = "noise"

    def to_generator(self) -> Noise2d:
        """Raises GeneratorError if the noise parameters are invalid."""
        try:
            return Noise2d(self.to_noise())
        except NoiseError as err:
            raise GeneratorError(f"Invalid noise: {err}") from err


Generator2dData = Annotated[
    Union[
        ApplyToXData,
        ApplyToYData,
        ApplyToDistanceData,
        IndexGeneratorData,
        Noise2dData,
    ],
    Field(discriminator="type"),
]


def generate_grid(generator: Generator2d, size: Size2d) -> NDArray[np.uint8]:
    """Evaluate a generator for every cell, in row-major order."""
    values = (
        generator.generate(x, y)
        for y in range(size.height)
        for x in range(size.width)
    )
    return np.fromiter(values, dtype=np.uint8, count=size.area)
