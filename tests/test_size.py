"""Tests for Size2d."""

import pytest

from mapgen.size import Size2d


class TestSize2d:
    """Tests for Size2d."""

    def test_area(self):
        assert Size2d(width=3, height=5).area == 15

    def test_degenerate_area(self):
        assert Size2d(width=0, height=5).area == 0

    def test_to_index_risky(self):
        """Index is x + y * width."""
        size = Size2d(width=4, height=3)
        assert size.to_index_risky(0, 0) == 0
        assert size.to_index_risky(3, 0) == 3
        assert size.to_index_risky(0, 1) == 4
        assert size.to_index_risky(3, 2) == 11

    def test_saturating_to_index_inside(self):
        size = Size2d(width=4, height=3)
        assert size.saturating_to_index(2, 1) == 6

    def test_saturating_to_index_clamps(self):
        """Points outside the grid are clamped to the nearest edge."""
        size = Size2d(width=4, height=3)
        assert size.saturating_to_index(10, 0) == 3
        assert size.saturating_to_index(0, 10) == 8
        assert size.saturating_to_index(10, 10) == 11

    def test_negative_size_rejected(self):
        with pytest.raises(Exception):
            Size2d(width=-1, height=3)

    def test_immutable(self):
        size = Size2d(width=4, height=3)
        with pytest.raises(Exception):
            size.width = 5  # type: ignore

    def test_str(self):
        assert str(Size2d(width=400, height=300)) == "400x300"
