"""Composable value generators for 1D & 2D coordinates."""

from .generator1d import (
    ApplyAbsoluteGradient,
    ApplyGradient,
    ApplyNoise,
    Constant,
    Generator1d,
    Generator1dData,
    InputAsOutput,
    InterpolateVector,
)
from .generator2d import (
    ApplyToDistance,
    ApplyToX,
    ApplyToY,
    Generator2d,
    Generator2dData,
    IndexGenerator,
    Noise2d,
    generate_grid,
)
from .gradient import Gradient
from .noise import Noise, NoiseData

__all__ = [
    # 1D
    "Generator1d",
    "Generator1dData",
    "InputAsOutput",
    "Constant",
    "ApplyGradient",
    "ApplyAbsoluteGradient",
    "InterpolateVector",
    "ApplyNoise",
    # 2D
    "Generator2d",
    "Generator2dData",
    "ApplyToX",
    "ApplyToY",
    "ApplyToDistance",
    "IndexGenerator",
    "Noise2d",
    "generate_grid",
    # Building blocks
    "Gradient",
    "Noise",
    "NoiseData",
]
