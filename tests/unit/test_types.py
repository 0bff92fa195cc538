"""
Unit tests for plane_core/types.py.

Point is a pure value: equality and hash come from (x, y) only.
"""

from dataclasses import FrozenInstanceError

import pytest

from plane_core.types import AXIS_X, AXIS_Y, Point, validate_axis, validate_dimensions


class TestPoint:
    """Test Point value semantics."""

    def test_equal_coordinates_are_equal(self):
        """Two Points with the same coordinates are indistinguishable."""
        assert Point(3, 4) == Point(3, 4)
        assert hash(Point(3, 4)) == hash(Point(3, 4))
        assert len({Point(3, 4), Point(3, 4)}) == 1

    def test_different_coordinates_differ(self):
        assert Point(3, 4) != Point(4, 3)

    def test_tuple_unpacking(self):
        x, y = Point(7, -2)
        assert (x, y) == (7, -2)

    def test_axis_indexing(self):
        point = Point(7, -2)
        assert point[AXIS_X] == 7
        assert point[AXIS_Y] == -2

    def test_axis_indexing_invalid(self):
        with pytest.raises(IndexError):
            Point(0, 0)[2]

    def test_replace_axis(self):
        """replace_axis returns a copy; the original is unchanged."""
        point = Point(1, 2)
        assert point.replace_axis(AXIS_X, 9) == Point(9, 2)
        assert point.replace_axis(AXIS_Y, 9) == Point(1, 9)
        assert point == Point(1, 2)

    def test_frozen(self):
        point = Point(1, 2)
        with pytest.raises(FrozenInstanceError):
            point.x = 5

    def test_ordering_is_x_then_y(self):
        points = [Point(2, 0), Point(1, 5), Point(1, 2)]
        assert sorted(points) == [Point(1, 2), Point(1, 5), Point(2, 0)]


class TestValidation:
    """Test axis and dimension validation."""

    def test_valid_axes(self):
        assert validate_axis(0) == 0
        assert validate_axis(1) == 1

    @pytest.mark.parametrize("axis", [-1, 2, 3])
    def test_invalid_axis(self, axis):
        with pytest.raises(ValueError, match="Unknown axis"):
            validate_axis(axis)

    def test_valid_dimensions(self):
        assert validate_dimensions((512, 256)) == (512, 256)
        assert validate_dimensions([3, 4]) == (3, 4)

    @pytest.mark.parametrize("dimensions", [(0, 10), (10, -1), (5,), (1, 2, 3), None])
    def test_invalid_dimensions(self, dimensions):
        with pytest.raises(ValueError):
            validate_dimensions(dimensions)
