"""2D maps made of named byte attributes."""

from typing import Sequence

import numpy as np
import structlog
from numpy.typing import NDArray
from pydantic import BaseModel, PrivateAttr

from .exceptions import AttributeSizeError, DuplicateAttributeError
from .size import Size2d

logger = structlog.get_logger()


def _to_buffer(
    name: str, size: Size2d, values: Sequence[int] | NDArray[np.uint8]
) -> NDArray[np.uint8]:
    """Copy values into a read-only byte buffer matching the size."""
    buffer = np.array(values, dtype=np.uint8).ravel()
    if buffer.size != size.area:
        raise AttributeSizeError(name, size.area, buffer.size)
    buffer.flags.writeable = False
    return buffer


class Attribute:
    """A named grid of bytes covering every cell of a map.

    The values are stored row-major in a read-only numpy array and can
    only be changed as a whole with `replace_all`.
    """

    def __init__(
        self, name: str, size: Size2d, values: Sequence[int] | NDArray[np.uint8]
    ):
        self.name = name
        self.size = size
        self._values = _to_buffer(name, size, values)

    def get_name(self) -> str:
        return self.name

    def get_size(self) -> Size2d:
        return self.size

    def get(self, index: int) -> int:
        """Get the value at an index."""
        return int(self._values[index])

    def get_all(self) -> NDArray[np.uint8]:
        """Get all values as a flat, read-only array."""
        return self._values

    def get_grid(self) -> NDArray[np.uint8]:
        """Get all values as a read-only (height, width) array."""
        return self._values.reshape(self.size.height, self.size.width)

    def replace_all(self, values: Sequence[int] | NDArray[np.uint8]) -> None:
        """Replace all values at once.

        Raises:
            AttributeSizeError: If the number of values doesn't match the size.
        """
        self._values = _to_buffer(self.name, self.size, values)

    def __repr__(self) -> str:
        return f"Attribute(name={self.name!r}, size={self.size})"


class Map2d(BaseModel):
    """
    A 2D map owning an ordered list of attributes.

    The id of an attribute is its position in the list. Attributes are
    only ever appended, so ids stay valid for the lifetime of the map.
    All attributes share the size of the map.
    """

    size: Size2d
    name: str = "map"

    _attributes: list[Attribute] = PrivateAttr(default_factory=list)

    def get_name(self) -> str:
        return self.name

    def create_attribute(self, name: str, default: int = 0) -> int:
        """Create an attribute filled with a default value & return its id."""
        values = np.full(self.size.area, default, dtype=np.uint8)
        return self.create_attribute_from(name, values)

    def create_attribute_from(
        self, name: str, values: Sequence[int] | NDArray[np.uint8]
    ) -> int:
        """Create an attribute from values & return its id.

        Raises:
            DuplicateAttributeError: If the name is already taken.
            AttributeSizeError: If the number of values doesn't match the size.
        """
        if name in self.get_attribute_names():
            raise DuplicateAttributeError(name)

        attribute = Attribute(name, self.size, values)
        self._attributes.append(attribute)
        attribute_id = len(self._attributes) - 1

        logger.debug(
            "attribute_created", map=self.name, attribute=name, id=attribute_id
        )
        return attribute_id

    def get_attribute(self, attribute_id: int) -> Attribute:
        """Get an attribute by id.

        Raises:
            IndexError: If no attribute has this id.
        """
        return self._attributes[attribute_id]

    def get_attribute_names(self) -> list[str]:
        """Names of all attributes, ordered by id."""
        return [attribute.name for attribute in self._attributes]
