"""Unit tests for Region and its derived points."""

import dataclasses

import pytest

from autoeyes.core.region import Point, Region


class TestRegion:
    """Tests for Region construction and derived points."""

    def test_derived_points(self):
        """Verify corner and center points are computed from the rectangle."""
        region = Region(10, 20, 30, 40)

        assert region.top_left == Point(10, 20)
        assert region.top_right == Point(40, 20)
        assert region.bottom_left == Point(10, 60)
        assert region.bottom_right == Point(40, 60)
        assert region.center == Point(25, 40)

    def test_center_uses_integer_division(self):
        """Verify odd sizes round the center down."""
        region = Region(0, 0, 5, 7)

        assert region.center == Point(2, 3)

    def test_region_is_immutable(self):
        """Verify neither the rectangle nor derived points can be reassigned."""
        region = Region(0, 0, 10, 10)

        with pytest.raises(dataclasses.FrozenInstanceError):
            region.x = 5
        with pytest.raises(dataclasses.FrozenInstanceError):
            region.center = Point(0, 0)

    @pytest.mark.parametrize("width, height", [(0, 10), (10, 0), (-1, 10)])
    def test_rejects_non_positive_size(self, width, height):
        """Verify zero or negative dimensions are rejected."""
        with pytest.raises(ValueError, match="Dimensions must be positive"):
            Region(0, 0, width, height)

    def test_equality_compares_rectangle(self):
        """Verify regions with the same rectangle compare equal."""
        assert Region(1, 2, 3, 4) == Region(1, 2, 3, 4)
        assert Region(1, 2, 3, 4) != Region(1, 2, 3, 5)

    def test_alternate_constructors(self):
        """Verify tuple and point/size constructors round-trip."""
        assert Region.from_tuple((1, 2, 3, 4)) == Region(1, 2, 3, 4)
        assert Region.from_point_size((5, 6), (7, 8)) == Region(5, 6, 7, 8)
        assert Region(1, 2, 3, 4).to_tuple() == (1, 2, 3, 4)
        assert Region(1, 2, 3, 4).size == (3, 4)

    def test_offset(self):
        """Verify offset is relative to the top-left corner."""
        region = Region(100, 200, 50, 50)

        assert region.offset(5, 7) == Point(105, 207)
        assert region.offset(-5, 0) == Point(95, 200)
