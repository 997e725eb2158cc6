"""Create new attributes."""

from dataclasses import dataclass
from typing import Literal, Sequence

import structlog
from pydantic import BaseModel, Field

from ..exceptions import DuplicateAttributeError
from ..map import Map2d

logger = structlog.get_logger()


@dataclass(frozen=True)
class CreateAttribute:
    """Adds an attribute filled with a default value to the map."""

    name: str
    default: int

    def run(self, map2d: Map2d) -> None:
        logger.info(
            "create_attribute",
            attribute=self.name,
            default=self.default,
            map=map2d.get_name(),
        )
        map2d.create_attribute(self.name, self.default)

    def convert(self, attributes: Sequence[str]) -> "CreateAttributeData":
        return CreateAttributeData(name=self.name, default=self.default)


class CreateAttributeData(BaseModel, frozen=True):
    """For serializing, deserializing & validating `CreateAttribute`."""

    type: Literal["create_attribute"] = "create_attribute"
    name: str
    default: int = Field(default=0, ge=0, le=255)

    def try_convert(self, attributes: Sequence[str]) -> CreateAttribute:
        """Raises DuplicateAttributeError if the name is already taken."""
        if self.name in attributes:
            raise DuplicateAttributeError(self.name)
        return CreateAttribute(self.name, self.default)
