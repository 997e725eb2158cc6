"""Procedural generation of 2D maps made of byte attributes."""

from .color import Color
from .config import load_generation, parse_generation
from .exceptions import (
    AttributeSizeError,
    DuplicateAttributeError,
    GenerationStepError,
    GeneratorError,
    InterpolationError,
    MapGenError,
    NoiseError,
    UnknownAttributeError,
)
from .log import configure_logging
from .map import Attribute, Map2d
from .pipeline import MapGeneration, MapGenerationData
from .size import Size2d

__all__ = [
    # Map
    "Size2d",
    "Attribute",
    "Map2d",
    "Color",
    # Pipeline
    "MapGeneration",
    "MapGenerationData",
    "load_generation",
    "parse_generation",
    "configure_logging",
    # Exceptions
    "MapGenError",
    "AttributeSizeError",
    "DuplicateAttributeError",
    "NoiseError",
    "InterpolationError",
    "GeneratorError",
    "GenerationStepError",
    "UnknownAttributeError",
]
