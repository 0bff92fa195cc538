"""
Unit tests for plane_raster/fill.py.

Covers:
- Scan window: vertex bounding box grown by one
- Column hits: vertical outline runs collapse to one hit
- Odd hit counts drop the last hit
- Fill result always contains the outline
- Square and triangle scenarios
"""

import pytest

from plane_core.types import Point
from plane_raster.fill import column_hits, join_and_fill_points, scan_bounds
from plane_raster.line import join_points
from plane_raster.mask import points_to_mask
from plane_raster.transform import bounding_box

SQUARE = [Point(10, 10), Point(50, 10), Point(50, 50), Point(10, 50), Point(10, 10)]
TRIANGLE = [Point(150, 190), Point(80, 70), Point(220, 70), Point(150, 190)]


class TestScanBounds:
    """Test the scan window."""

    def test_square_window(self):
        assert scan_bounds(SQUARE) == (9, 51, 9, 51)

    def test_window_may_start_below_zero(self):
        assert scan_bounds([Point(0, 0), Point(4, 4)]) == (-1, 5, -1, 5)

    def test_uses_vertices_not_outline(self):
        """The window follows the vertices even where the outline stops short."""
        assert scan_bounds([Point(0, 0), Point(10, 0)]) == (-1, 11, -1, 1)


class TestColumnHits:
    """Test per-column ray hits."""

    def setup_method(self):
        self.outline = set(join_points(SQUARE))

    def test_interior_column_has_two_hits(self):
        assert column_hits(self.outline, 30, 9, 51) == [10, 50]

    def test_edge_column_collapses_to_one_hit(self):
        """A full vertical run of outline pixels counts once, at its top."""
        assert column_hits(self.outline, 10, 9, 51) == [50]
        assert column_hits(self.outline, 50, 9, 51) == [50]

    def test_column_outside_shape(self):
        assert column_hits(self.outline, 9, 9, 51) == []
        assert column_hits(self.outline, 51, 9, 51) == []

    def test_separate_runs(self):
        outline = {Point(0, 1), Point(0, 2), Point(0, 5), Point(0, 8), Point(0, 9)}
        assert column_hits(outline, 0, 0, 10) == [2, 5, 9]


class TestJoinAndFillPoints:
    """Test the full fill."""

    def test_no_vertices(self):
        assert join_and_fill_points([]) == []

    def test_single_vertex(self):
        assert join_and_fill_points([Point(4, 4)]) == []

    def test_square(self):
        """Square fill covers exactly the 41x41 block [10, 50] x [10, 50]."""
        result = join_and_fill_points(SQUARE)

        assert Point(30, 30) in result
        assert bounding_box(result) == (10, 50, 10, 50)
        assert len(result) == 41 * 41
        assert len(result) == len(set(result))

        x_min, x_max, y_min, y_max = scan_bounds(SQUARE)
        assert all(x_min <= p.x <= x_max and y_min <= p.y <= y_max for p in result)

    def test_square_mask(self):
        mask = points_to_mask(join_and_fill_points(SQUARE), (64, 64))
        assert mask[10:51, 10:51].all()
        assert mask.sum() == 41 * 41

    @pytest.mark.parametrize("shape", [SQUARE, TRIANGLE])
    def test_fill_includes_outline(self, shape):
        outline = set(join_points(shape))
        filled = set(join_and_fill_points(shape))
        assert outline <= filled, f"Missing outline points: {sorted(outline - filled)[:5]}"

    def test_open_polyline_includes_outline(self):
        shape = [Point(3, 3), Point(20, 9), Point(7, 30)]
        assert set(join_points(shape)) <= set(join_and_fill_points(shape))

    def test_triangle_interior(self):
        result = set(join_and_fill_points(TRIANGLE))
        assert Point(150, 110) in result
        assert Point(150, 71) in result
        assert Point(60, 110) not in result

    def test_odd_hit_column_is_not_filled(self):
        """A lone vertical run yields one hit, which is dropped."""
        shape = [Point(5, 0), Point(5, 10)]
        result = join_and_fill_points(shape)
        assert set(result) == set(join_points(shape))
