"""Run an ordered list of generation steps on a new map."""

import time
from dataclasses import dataclass

import structlog
from pydantic import BaseModel

from .exceptions import MapGenError
from .map import Map2d
from .size import Size2d
from .steps import CreateAttribute, GenerationStep, GenerationStepData

logger = structlog.get_logger()


@dataclass(frozen=True)
class MapGeneration:
    """Validated steps that generate a map of a given size."""

    name: str
    size: Size2d
    steps: tuple[GenerationStep, ...]

    def generate(self) -> Map2d:
        """Create an empty map & run every step on it in order."""
        map2d = Map2d(size=self.size, name=self.name)
        logger.info(
            "generation_started", map=self.name, size=str(self.size), steps=len(self.steps)
        )

        start_time = time.perf_counter()
        for step in self.steps:
            step.run(map2d)

        logger.info(
            "generation_finished",
            map=self.name,
            attributes=map2d.get_attribute_names(),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 1),
        )
        return map2d

    def convert(self) -> "MapGenerationData":
        attributes: list[str] = []
        steps = []

        for step in self.steps:
            steps.append(step.convert(attributes))
            if isinstance(step, CreateAttribute):
                attributes.append(step.name)

        return MapGenerationData(name=self.name, size=self.size, steps=tuple(steps))


class MapGenerationData(BaseModel, frozen=True):
    """For serializing, deserializing & validating `MapGeneration`."""

    name: str
    size: Size2d
    steps: tuple[GenerationStepData, ...] = ()

    def try_convert(self) -> MapGeneration:
        """Validate every step against the attributes created before it.

        Raises:
            MapGenError: If any step is invalid.
        """
        attributes: list[str] = []
        steps = []

        for index, data in enumerate(self.steps):
            try:
                step = data.try_convert(attributes)
            except MapGenError as err:
                logger.warning(
                    "step_conversion_failed",
                    map=self.name,
                    step=index,
                    type=data.type,
                    error=str(err),
                )
                raise
            steps.append(step)
            if isinstance(step, CreateAttribute):
                attributes.append(step.name)

        return MapGeneration(name=self.name, size=self.size, steps=tuple(steps))
