"""Generators for 1D inputs.

Each generator is an immutable value with ``generate(input) -> byte``
that is total over all non-negative inputs. Every generator has a
serializable data mirror; ``data.to_generator()`` validates it and
``generator.to_data()`` converts back.
"""

from dataclasses import dataclass
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from ..exceptions import GeneratorError, InterpolationError, NoiseError
from ..interpolation import VectorInterpolation
from .gradient import Gradient
from .noise import Noise, NoiseData


# --- Runtime generators ---


@dataclass(frozen=True)
class InputAsOutput:
    """Returns the input, saturated at 255."""

    def generate(self, input: int) -> int:
        return min(input, 255)

    def to_data(self) -> "InputAsOutputData":
        return InputAsOutputData()


@dataclass(frozen=True)
class Constant:
    """Returns the same value for every input."""

    value: int

    def generate(self, input: int) -> int:
        return self.value

    def to_data(self) -> "ConstantData":
        return ConstantData(value=self.value)


@dataclass(frozen=True)
class ApplyGradient:
    """Feeds the input to `Gradient.generate`."""

    gradient: Gradient

    def generate(self, input: int) -> int:
        return self.gradient.generate(input)

    def to_data(self) -> "GradientData":
        return GradientData(**self.gradient.model_dump())


@dataclass(frozen=True)
class ApplyAbsoluteGradient:
    """Feeds the input to `Gradient.generate_absolute`."""

    gradient: Gradient

    def generate(self, input: int) -> int:
        return self.gradient.generate_absolute(input)

    def to_data(self) -> "AbsoluteGradientData":
        return AbsoluteGradientData(**self.gradient.model_dump())


@dataclass(frozen=True)
class InterpolateVector:
    """Interpolates between control points keyed by input threshold."""

    interpolation: VectorInterpolation[int]

    def generate(self, input: int) -> int:
        return self.interpolation.interpolate(input)

    def to_data(self) -> "InterpolateVectorData":
        return InterpolateVectorData(
            vector=tuple(
                ThresholdValue(threshold=threshold, value=value)
                for threshold, value in self.interpolation.points
            )
        )


@dataclass(frozen=True)
class ApplyNoise:
    """Generates 1D noise."""

    noise: Noise

    def generate(self, input: int) -> int:
        return self.noise.generate1d(input)

    def to_data(self) -> "NoiseGeneratorData":
        return NoiseGeneratorData(**self.noise.to_data().model_dump())


Generator1d = Union[
    InputAsOutput,
    Constant,
    ApplyGradient,
    ApplyAbsoluteGradient,
    InterpolateVector,
    ApplyNoise,
]


# --- Data mirrors ---


class InputAsOutputData(BaseModel, frozen=True):
    type: Literal["input_as_output"] = "input_as_output"

    def to_generator(self) -> InputAsOutput:
        return InputAsOutput()


class ConstantData(BaseModel, frozen=True):
    type: Literal["constant"] = "constant"
    value: int = Field(ge=0, le=255)

    def to_generator(self) -> Constant:
        return Constant(self.value)


class GradientData(Gradient, frozen=True):
    type: Literal["gradient"] = "gradient"

    def to_generator(self) -> ApplyGradient:
        return ApplyGradient(Gradient(**self.model_dump(exclude={"type"})))


class AbsoluteGradientData(Gradient, frozen=True):
    type: Literal["absolute_gradient"] = "absolute_gradient"

    def to_generator(self) -> ApplyAbsoluteGradient:
        return ApplyAbsoluteGradient(Gradient(**self.model_dump(exclude={"type"})))


class ThresholdValue(BaseModel, frozen=True):
    """A control point of `InterpolateVectorData`."""

    threshold: int = Field(ge=0)
    value: int = Field(ge=0, le=255)


class InterpolateVectorData(BaseModel, frozen=True):
    type: Literal["interpolate_vector"] = "interpolate_vector"
    vector: tuple[ThresholdValue, ...]

    def to_generator(self) -> InterpolateVector:
        """Raises GeneratorError if the control points are invalid."""
        points = [(point.threshold, point.value) for point in self.vector]
        try:
            return InterpolateVector(VectorInterpolation.new(points))
        except InterpolationError as err:
            raise GeneratorError(f"Invalid interpolate_vector: {err}") from err


class NoiseGeneratorData(NoiseData, frozen=True):
    type: Literal["noise"] = "noise"

    def to_generator(self) -> ApplyNoise:
        """Raises GeneratorError if the noise parameters are invalid."""
        try:
            return ApplyNoise(self.to_noise())
        except NoiseError as err:
            raise GeneratorError(f"Invalid noise: {err}") from err


Generator1dData = Annotated[
    Union[
        InputAsOutputData,
        ConstantData,
        GradientData,
        AbsoluteGradientData,
        InterpolateVectorData,
        NoiseGeneratorData,
    ],
    Field(discriminator="type"),
]
