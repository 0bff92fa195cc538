"""
Axis flips and extents over point collections.

A flip reflects a coordinate across an axis of a plane of fixed size:
x' = width - x (axis 0) or y' = height - y (axis 1). Flipping twice on the
same axis is the identity.
"""

from typing import Iterable, List, Tuple

from plane_core.types import Dimensions, Point, validate_axis


def flip_point(point: Point, axis: int, dimensions: Dimensions) -> Point:
    """
    Reflect one point across `axis` of a plane sized `dimensions`.

    The axis is not validated here; an axis other than 0 or 1 raises
    IndexError. Use flip_points for a checked bulk flip.
    """
    return point.replace_axis(axis, dimensions[axis] - point[axis])


def flip_points(points: Iterable[Point], axis: int, dimensions: Dimensions) -> List[Point]:
    """
    Reflect every point across `axis`, preserving input order.

    Pure: the input is not modified.

    Raises:
        ValueError: If axis is not 0 or 1
    """
    validate_axis(axis)
    return [flip_point(point, axis, dimensions) for point in points]


def bounding_box(points: Iterable[Point]) -> Tuple[int, int, int, int]:
    """
    Inclusive extent (x_min, x_max, y_min, y_max) of `points`.

    Raises:
        ValueError: If points is empty
    """
    points = list(points)
    if not points:
        raise ValueError("bounding_box requires at least one point")

    xs = [p.x for p in points]
    ys = [p.y for p in points]

    return (min(xs), max(xs), min(ys), max(ys))


__all__ = [
    "bounding_box",
    "flip_point",
    "flip_points",
]
