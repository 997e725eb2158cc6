"""Tests for attributes & maps."""

import numpy as np
import pytest

from mapgen.exceptions import AttributeSizeError, DuplicateAttributeError
from mapgen.map import Attribute, Map2d
from mapgen.size import Size2d


class TestAttribute:
    """Tests for Attribute."""

    def test_get(self, size_3x3):
        attribute = Attribute("test", size_3x3, range(1, 10))
        assert attribute.get(0) == 1
        assert attribute.get(8) == 9

    def test_get_grid(self):
        attribute = Attribute("test", Size2d(width=3, height=2), [1, 2, 3, 4, 5, 6])
        np.testing.assert_array_equal(attribute.get_grid(), [[1, 2, 3], [4, 5, 6]])

    def test_values_are_copied(self, size_3x3):
        """Changing the source buffer doesn't change the attribute."""
        values = np.arange(9, dtype=np.uint8)
        attribute = Attribute("test", size_3x3, values)
        values[0] = 100
        assert attribute.get(0) == 0

    def test_values_read_only(self, size_3x3):
        attribute = Attribute("test", size_3x3, range(9))
        with pytest.raises(ValueError):
            attribute.get_all()[0] = 5

    def test_replace_all(self, size_3x3):
        attribute = Attribute("test", size_3x3, range(9))
        attribute.replace_all([9] * 9)
        np.testing.assert_array_equal(attribute.get_all(), [9] * 9)

    def test_replace_all_wrong_size(self, size_3x3):
        """A mismatched buffer is rejected & the old values stay."""
        attribute = Attribute("test", size_3x3, range(9))
        with pytest.raises(AttributeSizeError):
            attribute.replace_all([1, 2, 3])
        np.testing.assert_array_equal(attribute.get_all(), range(9))

    def test_wrong_size(self, size_3x3):
        with pytest.raises(AttributeSizeError) as exc_info:
            Attribute("test", size_3x3, [1, 2])
        assert exc_info.value.expected == 9
        assert exc_info.value.actual == 2


class TestMap2d:
    """Tests for Map2d."""

    def test_defaults(self, size_3x3):
        map2d = Map2d(size=size_3x3)
        assert map2d.get_name() == "map"
        assert map2d.get_attribute_names() == []

    def test_create_attribute_from(self, size_3x3):
        map2d = Map2d(size=size_3x3, name="world")
        attribute_id = map2d.create_attribute_from("elevation", range(9))

        assert attribute_id == 0
        attribute = map2d.get_attribute(attribute_id)
        assert attribute.get_name() == "elevation"
        assert attribute.get_size() == size_3x3
        np.testing.assert_array_equal(attribute.get_all(), range(9))

    def test_ids_are_positions(self, size_3x3):
        map2d = Map2d(size=size_3x3)
        assert map2d.create_attribute("a") == 0
        assert map2d.create_attribute("b") == 1
        assert map2d.create_attribute("c") == 2
        assert map2d.get_attribute_names() == ["a", "b", "c"]

    def test_ids_stay_valid(self, map_3x3):
        """Creating attributes doesn't move existing ones."""
        map_3x3.create_attribute("other", 4)
        assert map_3x3.get_attribute(0).get_name() == "test"
        assert map_3x3.get_attribute(1).get(0) == 4

    def test_create_attribute_default(self, size_3x3):
        map2d = Map2d(size=size_3x3)
        attribute_id = map2d.create_attribute("rainfall", 42)
        np.testing.assert_array_equal(map2d.get_attribute(attribute_id).get_all(), [42] * 9)

    def test_create_attribute_from_wrong_size(self, size_3x3):
        map2d = Map2d(size=size_3x3)
        with pytest.raises(AttributeSizeError, match="'elevation'"):
            map2d.create_attribute_from("elevation", [1, 2, 3])
        assert map2d.get_attribute_names() == []

    def test_duplicate_name(self, map_3x3):
        with pytest.raises(DuplicateAttributeError):
            map_3x3.create_attribute("test")
        assert map_3x3.get_attribute_names() == ["test"]

    def test_unknown_id(self, map_3x3):
        with pytest.raises(IndexError):
            map_3x3.get_attribute(5)
