"""Validation shared by all generation steps."""

from typing import Sequence

from ..exceptions import UnknownAttributeError


def get_attribute_id(name: str, attributes: Sequence[str]) -> int:
    """Resolve an attribute name to its id.

    Args:
        name: Name referenced by a step's data.
        attributes: Names of the map's attributes, ordered by id.

    Returns:
        Position of the name in the list.

    Raises:
        UnknownAttributeError: If the name isn't in the list.
    """
    try:
        return list(attributes).index(name)
    except ValueError:
        raise UnknownAttributeError(name) from None
