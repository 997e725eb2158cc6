"""Generation steps that create & modify the attributes of a map.

Every step exists twice: as data referencing attributes by name, and as a
runtime step bound to attribute ids. ``data.try_convert(names)`` validates
the data against the current attribute names, ``step.convert(names)`` is
its inverse.
"""

from typing import Annotated, Union

from pydantic import Field

from .base import get_attribute_id
from .create import CreateAttribute, CreateAttributeData
from .distortion import (
    DistortAlongX,
    DistortAlongXData,
    DistortAlongY,
    DistortAlongYData,
    Distortion1d,
    Distortion1dData,
)
from .generator_add import GeneratorAdd, GeneratorAddData
from .modify import ModifyWithAttribute, ModifyWithAttributeData
from .transform import (
    Clusterer,
    OverwriteIfAbove,
    OverwriteIfBelow,
    TransformAttribute2d,
    TransformAttribute2dData,
)

GenerationStep = Union[
    CreateAttribute,
    GeneratorAdd,
    DistortAlongX,
    DistortAlongY,
    ModifyWithAttribute,
    TransformAttribute2d,
]

GenerationStepData = Annotated[
    Union[
        CreateAttributeData,
        GeneratorAddData,
        DistortAlongXData,
        DistortAlongYData,
        ModifyWithAttributeData,
        TransformAttribute2dData,
    ],
    Field(discriminator="type"),
]

__all__ = [
    "get_attribute_id",
    "GenerationStep",
    "GenerationStepData",
    # Steps
    "CreateAttribute",
    "CreateAttributeData",
    "Distortion1d",
    "Distortion1dData",
    "DistortAlongX",
    "DistortAlongXData",
    "DistortAlongY",
    "DistortAlongYData",
    "GeneratorAdd",
    "GeneratorAddData",
    "ModifyWithAttribute",
    "ModifyWithAttributeData",
    "TransformAttribute2d",
    "TransformAttribute2dData",
    # Transformers
    "Clusterer",
    "OverwriteIfAbove",
    "OverwriteIfBelow",
]
