"""Shared test fixtures for map generation tests."""

import pytest

from mapgen.map import Map2d
from mapgen.size import Size2d


@pytest.fixture
def size_3x3() -> Size2d:
    return Size2d(width=3, height=3)


@pytest.fixture
def map_3x3(size_3x3: Size2d) -> Map2d:
    """3x3 map with one attribute "test" holding 1..9.

        1 2 3
        4 5 6
        7 8 9
    """
    map2d = Map2d(size=size_3x3, name="example")
    map2d.create_attribute_from("test", [1, 2, 3, 4, 5, 6, 7, 8, 9])
    return map2d


@pytest.fixture
def map_2x2() -> Map2d:
    """2x2 map with a "source" & a "target" attribute."""
    map2d = Map2d(size=Size2d(width=2, height=2), name="small")
    map2d.create_attribute_from("source", [0, 50, 100, 200])
    map2d.create_attribute_from("target", [100, 100, 100, 100])
    return map2d


@pytest.fixture
def sample_generation_toml() -> str:
    """Small biome-style generation config as TOML string."""
    return """
name = "biome example"
size = { width = 40, height = 30 }

[[steps]]
type = "create_attribute"
name = "elevation"

[[steps]]
type = "create_attribute"
name = "temperature"

[[steps]]
type = "create_attribute"
name = "biome"

[[steps]]
type = "generator_add"
name = "continent"
attribute = "elevation"
generator = { type = "apply_to_distance", center_x = 20, center_y = 15, generator = { type = "gradient", value_start = 125, value_end = 0, start = 0, length = 15 } }

[[steps]]
type = "generator_add"
name = "islands"
attribute = "elevation"
generator = { type = "noise", seed = 0, scale = 5, min_value = 0, max_value = 125 }

[[steps]]
type = "generator_add"
name = "gradient y"
attribute = "temperature"
generator = { type = "apply_to_y", generator = { type = "absolute_gradient", value_start = 255, value_end = 50, start = 15, length = 15 } }

[[steps]]
type = "distort_along_y"
attribute = "temperature"
generator = { type = "noise", seed = 0, scale = 6, min_value = 0, max_value = 2 }

[[steps]]
type = "modify_with_attribute"
source = "elevation"
target = "temperature"
percentage = -115
minimum = 76

[[steps]]
type = "transform_attribute_2d"
name = "select biomes"
source0 = "elevation"
source1 = "temperature"
target = "biome"
transformer = { type = "clusterer", size = { width = 2, height = 2 }, cluster_id_lookup = [0, 1, 2, 3] }

[[steps]]
type = "transform_attribute_2d"
name = "overwrite oceans"
source0 = "elevation"
source1 = "biome"
target = "biome"
transformer = { type = "overwrite_if_below", value = 12, threshold = 76 }
"""
