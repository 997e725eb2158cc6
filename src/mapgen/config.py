"""Map generation configuration from TOML."""

import tomllib
from typing import Any, Mapping

from .pipeline import MapGenerationData


def parse_generation(data: Mapping[str, Any]) -> MapGenerationData:
    """Validate an already decoded configuration.

    Raises:
        pydantic.ValidationError: If the structure is malformed.
    """
    return MapGenerationData.model_validate(data)


def load_generation(text: str) -> MapGenerationData:
    """Parse a map generation configuration from TOML text.

    Steps are an array of tables tagged by ``type``:

        name = "biome example"
        size = { width = 400, height = 300 }

        [[steps]]
        type = "create_attribute"
        name = "elevation"

    Args:
        text: TOML document.

    Returns:
        Parsed, not yet validated against attribute names, configuration.

    Raises:
        tomllib.TOMLDecodeError: If TOML is malformed.
        pydantic.ValidationError: If the structure is malformed.
    """
    return parse_generation(tomllib.loads(text))
