"""Combine 2 attributes into a third one."""

from dataclasses import dataclass
from typing import Annotated, Literal, Sequence, Union

import numpy as np
import structlog
from numpy.typing import NDArray
from pydantic import BaseModel, Field

from ..exceptions import GenerationStepError
from ..map import Map2d
from ..size import Size2d
from .base import get_attribute_id

logger = structlog.get_logger()


# --- Transformers ---


@dataclass(frozen=True)
class Clusterer:
    """Splits the 2 inputs into a grid of clusters & looks up their ids.

    The first input selects the column, the second input the row.
    """

    size: Size2d
    cluster_id_lookup: tuple[int, ...]

    def transform(
        self, input0: NDArray[np.uint8], input1: NDArray[np.uint8]
    ) -> NDArray[np.uint8]:
        x = input0.astype(np.int64) * self.size.width // 256
        y = input1.astype(np.int64) * self.size.height // 256
        lookup = np.array(self.cluster_id_lookup, dtype=np.uint8)
        return lookup[x + y * self.size.width]

    def to_data(self) -> "ClustererData":
        return ClustererData(size=self.size, cluster_id_lookup=self.cluster_id_lookup)


@dataclass(frozen=True)
class OverwriteIfBelow:
    """Returns value where the first input is below the threshold, else the second input."""

    value: int
    threshold: int

    def transform(
        self, input0: NDArray[np.uint8], input1: NDArray[np.uint8]
    ) -> NDArray[np.uint8]:
        return np.where(input0 < self.threshold, self.value, input1).astype(np.uint8)

    def to_data(self) -> "OverwriteIfBelowData":
        return OverwriteIfBelowData(value=self.value, threshold=self.threshold)


@dataclass(frozen=True)
class OverwriteIfAbove:
    """Returns value where the first input is above the threshold, else the second input."""

    value: int
    threshold: int

    def transform(
        self, input0: NDArray[np.uint8], input1: NDArray[np.uint8]
    ) -> NDArray[np.uint8]:
        return np.where(input0 > self.threshold, self.value, input1).astype(np.uint8)

    def to_data(self) -> "OverwriteIfAboveData":
        return OverwriteIfAboveData(value=self.value, threshold=self.threshold)


Transformer = Union[Clusterer, OverwriteIfBelow, OverwriteIfAbove]


class ClustererData(BaseModel, frozen=True):
    type: Literal["clusterer"] = "clusterer"
    size: Size2d
    cluster_id_lookup: tuple[Annotated[int, Field(ge=0, le=255)], ...]

    def to_transformer(self) -> Clusterer:
        """Raises GenerationStepError if the lookup doesn't fit the size."""
        if self.size.area == 0:
            raise GenerationStepError(f"Clusterer size {self.size} has no clusters")
        if len(self.cluster_id_lookup) != self.size.area:
            raise GenerationStepError(
                f"Clusterer of size {self.size} needs {self.size.area} cluster ids, "
                f"got {len(self.cluster_id_lookup)}"
            )
        return Clusterer(self.size, self.cluster_id_lookup)


class OverwriteIfBelowData(BaseModel, frozen=True):
    type: Literal["overwrite_if_below"] = "overwrite_if_below"
    value: int = Field(ge=0, le=255)
    threshold: int = Field(ge=0, le=255)

    def to_transformer(self) -> OverwriteIfBelow:
        return OverwriteIfBelow(self.value, self.threshold)


class OverwriteIfAboveData(BaseModel, frozen=True):
    type: Literal["overwrite_if_above"] = "overwrite_if_above"
    value: int = Field(ge=0, le=255)
    threshold: int = Field(ge=0, le=255)

    def to_transformer(self) -> OverwriteIfAbove:
        return OverwriteIfAbove(self.value, self.threshold)


TransformerData = Annotated[
    Union[ClustererData, OverwriteIfBelowData, OverwriteIfAboveData],
    Field(discriminator="type"),
]


# --- Step ---


@dataclass(frozen=True)
class TransformAttribute2d:
    """Transforms 2 source attributes & writes the result to the target."""

    name: str
    source_id0: int
    source_id1: int
    target_id: int
    transformer: Transformer

    def run(self, map2d: Map2d) -> None:
        source0 = map2d.get_attribute(self.source_id0)
        source1 = map2d.get_attribute(self.source_id1)
        target = map2d.get_attribute(self.target_id)
        logger.info(
            "transform_attributes",
            step=self.name,
            source0=source0.get_name(),
            source1=source1.get_name(),
            target=target.get_name(),
            map=map2d.get_name(),
        )

        values = self.transformer.transform(source0.get_all(), source1.get_all())
        target.replace_all(values)

    def convert(self, attributes: Sequence[str]) -> "TransformAttribute2dData":
        return TransformAttribute2dData(
            name=self.name,
            source0=attributes[self.source_id0],
            source1=attributes[self.source_id1],
            target=attributes[self.target_id],
            transformer=self.transformer.to_data(),
        )


class TransformAttribute2dData(BaseModel, frozen=True):
    """For serializing, deserializing & validating `TransformAttribute2d`."""

    type: Literal["transform_attribute_2d"] = "transform_attribute_2d"
    name: str
    source0: str
    source1: str
    target: str
    transformer: TransformerData

    def try_convert(self, attributes: Sequence[str]) -> TransformAttribute2d:
        """Validate against the attribute names & build the step.

        Raises:
            UnknownAttributeError: If an attribute doesn't exist.
            GenerationStepError: If the transformer is invalid.
        """
        return TransformAttribute2d(
            self.name,
            get_attribute_id(self.source0, attributes),
            get_attribute_id(self.source1, attributes),
            get_attribute_id(self.target, attributes),
            self.transformer.to_transformer(),
        )
