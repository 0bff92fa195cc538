"""
Plane: a bounded coordinate space owning a PointSet.

Provides:
- write_points / erase_points: bulk mutators with an atomic strict mode
- read_points / read_points_by_filter: snapshots of stored content
- join_points / join_and_fill_points: rasterize vertices (does not store)
- flip / flip_points: reflect stored or standalone points across an axis

The Plane does not itself keep stored points inside its bounds; only strict
write_points checks them. Dimensions are fixed at construction.

A Plane assumes a single writer. Pass thread_safe=True to back it with a
LockedPointSet when several threads add/remove concurrently; flip and strict
erase then run as single locked operations.
"""

import logging
from typing import Callable, Iterable, List, Sequence

from plane_raster.fill import join_and_fill_points
from plane_raster.line import join_points
from plane_raster.transform import flip_point, flip_points

from .errors import NotFoundError, OutOfBoundsError
from .point_set import LockedPointSet, PointSet
from .types import Dimensions, Point, validate_axis, validate_dimensions

logger = logging.getLogger(__name__)


class Plane:
    """Fixed-size 2D point space."""

    def __init__(self, dimensions: Dimensions, thread_safe: bool = False):
        self._dimensions = validate_dimensions(dimensions)
        self._data: PointSet = LockedPointSet() if thread_safe else PointSet()

    @property
    def dimensions(self) -> Dimensions:
        """(width, height), fixed for the Plane's lifetime."""
        return self._dimensions

    def in_bounds(self, point: Point) -> bool:
        """True iff point lies in [0, width] x [0, height] (inclusive)."""
        width, height = self._dimensions
        return 0 <= point.x <= width and 0 <= point.y <= height

    # ==========================================================================
    # Storage
    # ==========================================================================

    def write_points(self, points: Iterable[Point], strict: bool = False) -> None:
        """
        Add points to the plane.

        Args:
            points: Points to store
            strict: If True, validate every point first and write none of
                them if any is out of bounds

        Raises:
            OutOfBoundsError: strict mode, for the first out-of-bounds point
        """
        points = list(points)

        if strict:
            for point in points:
                if not self.in_bounds(point):
                    logger.debug("Strict write rejected %d points at %s", len(points), point)
                    raise OutOfBoundsError(point, self._dimensions)

        self._data.add_all(points)
        logger.debug("Wrote %d points (strict=%s)", len(points), strict)

    def erase_points(self, points: Iterable[Point], strict: bool = False) -> None:
        """
        Remove points from the plane.

        Args:
            points: Points to remove
            strict: If True, verify every point is present first and remove
                none of them if any is missing

        Raises:
            NotFoundError: strict mode, for the first missing point
        """
        points = list(points)

        if strict:
            missing = self._data.remove_all_strict(points)
            if missing is not None:
                logger.debug("Strict erase rejected %d points at %s", len(points), missing)
                raise NotFoundError(missing)
        else:
            self._data.remove_all(points)
        logger.debug("Erased %d points (strict=%s)", len(points), strict)

    def read_points(self) -> List[Point]:
        """All stored points, in no particular order."""
        return self._data.to_list()

    def read_points_by_filter(self, predicate: Callable[[int, int], bool]) -> List[Point]:
        """Stored points for which predicate(x, y) is true."""
        return [point for point in self._data.to_list() if predicate(point.x, point.y)]

    # ==========================================================================
    # Geometry
    # ==========================================================================

    def join_points(self, vertices: Sequence[Point]) -> List[Point]:
        """Rasterized polyline through vertices. Nothing is stored."""
        return join_points(vertices)

    def join_and_fill_points(self, vertices: Sequence[Point]) -> List[Point]:
        """Rasterized outline plus interior of vertices. Nothing is stored."""
        return join_and_fill_points(vertices)

    def flip(self, axis: int) -> None:
        """
        Reflect every stored point across `axis` in place.

        All replacements are computed before any is committed, in one
        operation on the stored set (atomic for a thread-safe Plane).
        """
        validate_axis(axis)
        dimensions = self._dimensions
        self._data.replace_all(lambda point: flip_point(point, axis, dimensions))
        logger.debug("Flipped %d points on axis %d", len(self._data), axis)

    def flip_points(self, points: Iterable[Point], axis: int) -> List[Point]:
        """Reflect standalone points across `axis`; stored points are untouched."""
        return flip_points(points, axis, self._dimensions)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        width, height = self._dimensions
        return f"Plane({width}x{height}, {len(self._data)} points)"
