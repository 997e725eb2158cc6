"""Add the output of a 2D generator to an attribute."""

from dataclasses import dataclass
from typing import Literal, Sequence

import numpy as np
import structlog
from pydantic import BaseModel

from ..exceptions import GenerationStepError, GeneratorError
from ..generators import Generator2d, Generator2dData, generate_grid
from ..map import Map2d
from .base import get_attribute_id

logger = structlog.get_logger()


@dataclass(frozen=True)
class GeneratorAdd:
    """Adds generated values to each cell, saturating at 255."""

    name: str
    attribute_id: int
    generator: Generator2d

    def run(self, map2d: Map2d) -> None:
        attribute = map2d.get_attribute(self.attribute_id)
        logger.info(
            "add_generator",
            step=self.name,
            attribute=attribute.get_name(),
            map=map2d.get_name(),
        )

        generated = generate_grid(self.generator, map2d.size).astype(np.uint16)
        values = np.minimum(attribute.get_all() + generated, 255)
        attribute.replace_all(values.astype(np.uint8))

    def convert(self, attributes: Sequence[str]) -> "GeneratorAddData":
        return GeneratorAddData(
            name=self.name,
            attribute=attributes[self.attribute_id],
            generator=self.generator.to_data(),
        )


class GeneratorAddData(BaseModel, frozen=True):
    """For serializing, deserializing & validating `GeneratorAdd`."""

    type: Literal["generator_add"] = "generator_add"
    name: str
    attribute: str
    generator: Generator2dData

    def try_convert(self, attributes: Sequence[str]) -> GeneratorAdd:
        """Validate against the attribute names & build the step.

        Raises:
            UnknownAttributeError: If the attribute doesn't exist.
            GenerationStepError: If the generator is invalid.
        """
        attribute_id = get_attribute_id(self.attribute, attributes)
        try:
            generator = self.generator.to_generator()
        except GeneratorError as err:
            raise GenerationStepError(f"Invalid generator for '{self.name}': {err}") from err
        return GeneratorAdd(self.name, attribute_id, generator)
