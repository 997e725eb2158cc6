"""Shift rows or columns of an attribute.

The amount of the shift comes from a 1D generator evaluated at the row or
column. Vacated cells repeat the original edge value & values shifted past
the far edge are dropped:

    before    along x (shift = y)   along y (shift = x)
    1 2 3     1 2 3                 1 2 3
    4 5 6     4 4 5                 4 2 3
    7 8 9     7 7 7                 7 5 3
"""

from dataclasses import dataclass
from typing import Literal, Sequence

import numpy as np
import structlog
from numpy.typing import NDArray
from pydantic import BaseModel

from ..exceptions import GenerationStepError, GeneratorError
from ..generators import Generator1d, Generator1dData
from ..map import Map2d
from .base import get_attribute_id

logger = structlog.get_logger()


def _shift_line(line: NDArray[np.uint8], shift: int, out: NDArray[np.uint8]) -> None:
    """Write the line shifted towards its end into out."""
    length = line.shape[0]
    shift = min(shift, length)
    out[:shift] = line[0]
    out[shift:] = line[: length - shift]


@dataclass(frozen=True)
class Distortion1d:
    """Shifts each row or column of an attribute based on a 1D generator."""

    attribute_id: int
    generator: Generator1d

    def _distort_rows(self, grid: NDArray[np.uint8]) -> NDArray[np.uint8]:
        values = np.empty_like(grid)
        for y in range(grid.shape[0]):
            _shift_line(grid[y], self.generator.generate(y), values[y])
        return values

    def _distort(self, map2d: Map2d, axis: str) -> None:
        attribute = map2d.get_attribute(self.attribute_id)
        logger.info(
            "distort_attribute",
            attribute=attribute.get_name(),
            map=map2d.get_name(),
            axis=axis,
        )

        if map2d.size.area == 0:
            return

        grid = attribute.get_grid()
        if axis == "x":
            values = self._distort_rows(grid)
        else:
            # Columns of the grid are the rows of its transpose
            values = self._distort_rows(grid.T).T

        attribute.replace_all(values)

    def distort_along_x(self, map2d: Map2d) -> None:
        """Shift each row along the x-axis by generator(y)."""
        self._distort(map2d, "x")

    def distort_along_y(self, map2d: Map2d) -> None:
        """Shift each column along the y-axis by generator(x)."""
        self._distort(map2d, "y")

    def convert(self, attributes: Sequence[str]) -> "Distortion1dData":
        return Distortion1dData(
            attribute=attributes[self.attribute_id],
            generator=self.generator.to_data(),
        )


class Distortion1dData(BaseModel, frozen=True):
    """For serializing, deserializing & validating `Distortion1d`."""

    attribute: str
    generator: Generator1dData

    def _resolve(self, attributes: Sequence[str]) -> tuple[int, Generator1d]:
        attribute_id = get_attribute_id(self.attribute, attributes)
        try:
            generator = self.generator.to_generator()
        except GeneratorError as err:
            raise GenerationStepError(
                f"Invalid generator for distorting '{self.attribute}': {err}"
            ) from err
        return attribute_id, generator

    def try_convert(self, attributes: Sequence[str]) -> Distortion1d:
        """Validate against the attribute names & build the step.

        Raises:
            UnknownAttributeError: If the attribute doesn't exist.
            GenerationStepError: If the generator is invalid.
        """
        return Distortion1d(*self._resolve(attributes))


# --- Pipeline steps ---


@dataclass(frozen=True)
class DistortAlongX(Distortion1d):
    def run(self, map2d: Map2d) -> None:
        self.distort_along_x(map2d)

    def convert(self, attributes: Sequence[str]) -> "DistortAlongXData":
        return DistortAlongXData(**super().convert(attributes).model_dump())


@dataclass(frozen=True)
class DistortAlongY(Distortion1d):
    def run(self, map2d: Map2d) -> None:
        self.distort_along_y(map2d)

    def convert(self, attributes: Sequence[str]) -> "DistortAlongYData":
        return DistortAlongYData(**super().convert(attributes).model_dump())


class DistortAlongXData(Distortion1dData, frozen=True):
    type: Literal["distort_along_x"] = "distort_along_x"

    def try_convert(self, attributes: Sequence[str]) -> DistortAlongX:
        return DistortAlongX(*self._resolve(attributes))


class DistortAlongYData(Distortion1dData, frozen=True):
    type: Literal["distort_along_y"] = "distort_along_y"

    def try_convert(self, attributes: Sequence[str]) -> DistortAlongY:
        return DistortAlongY(*self._resolve(attributes))
