"""Modify one attribute with another one."""

from dataclasses import dataclass
from typing import Literal, Sequence

import numpy as np
import structlog
from numpy.typing import NDArray
from pydantic import BaseModel, Field

from ..map import Map2d
from .base import get_attribute_id

logger = structlog.get_logger()


@dataclass(frozen=True)
class ModifyWithAttribute:
    """Increases or decreases the target by the source above a minimum.

    Each cell becomes ``target + (max(source, minimum) - minimum) * factor``,
    saturated to [0, 255] and truncated.
    """

    source_id: int
    target_id: int
    factor: float
    minimum: int

    def calculate_values(
        self, source: NDArray[np.uint8], target: NDArray[np.uint8]
    ) -> NDArray[np.uint8]:
        above_minimum = np.maximum(source, self.minimum).astype(np.float64) - self.minimum
        values = target.astype(np.float64) + above_minimum * self.factor
        return np.clip(values, 0, 255).astype(np.uint8)

    def run(self, map2d: Map2d) -> None:
        source = map2d.get_attribute(self.source_id)
        target = map2d.get_attribute(self.target_id)
        logger.info(
            "modify_attribute",
            direction="decrease" if self.factor < 0 else "increase",
            target=target.get_name(),
            source=source.get_name(),
            map=map2d.get_name(),
        )

        values = self.calculate_values(source.get_all(), target.get_all())
        target.replace_all(values)

    def convert(self, attributes: Sequence[str]) -> "ModifyWithAttributeData":
        return ModifyWithAttributeData(
            source=attributes[self.source_id],
            target=attributes[self.target_id],
            percentage=round(self.factor * 100),
            minimum=self.minimum,
        )


class ModifyWithAttributeData(BaseModel, frozen=True):
    """For serializing, deserializing & validating `ModifyWithAttribute`."""

    type: Literal["modify_with_attribute"] = "modify_with_attribute"
    source: str
    target: str
    percentage: int = Field(description="Factor in percent, negative decreases")
    minimum: int = Field(default=0, ge=0, le=255)

    def try_convert(self, attributes: Sequence[str]) -> ModifyWithAttribute:
        """Validate against the attribute names & build the step.

        Raises:
            UnknownAttributeError: If source or target doesn't exist.
        """
        source_id = get_attribute_id(self.source, attributes)
        target_id = get_attribute_id(self.target, attributes)
        return ModifyWithAttribute(
            source_id, target_id, self.percentage / 100, self.minimum
        )
