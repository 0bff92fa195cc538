"""
Core type definitions for the point-plane engine.

A Point is a dimensionless integer coordinate pair. Two Points with equal
coordinates are indistinguishable and collapse under set insertion.
"""

from dataclasses import dataclass
from typing import Tuple

# Plane size: (width, height)
Dimensions = Tuple[int, int]

# Axis indices used by flip operations
AXIS_X = 0
AXIS_Y = 1
AXES = (AXIS_X, AXIS_Y)


@dataclass(frozen=True, order=True)
class Point:
    """Integer (x, y) coordinate pair."""
    x: int
    y: int

    def __iter__(self):
        """Allow tuple unpacking: x, y = point"""
        return iter((self.x, self.y))

    def __getitem__(self, axis: int) -> int:
        """Coordinate on an axis (0 = x, 1 = y)."""
        if axis == AXIS_X:
            return self.x
        if axis == AXIS_Y:
            return self.y
        raise IndexError(f"Point has no axis {axis}")

    def replace_axis(self, axis: int, value: int) -> "Point":
        """Copy of this point with the coordinate on `axis` replaced."""
        if axis == AXIS_X:
            return Point(value, self.y)
        if axis == AXIS_Y:
            return Point(self.x, value)
        raise IndexError(f"Point has no axis {axis}")


def validate_axis(axis: int) -> int:
    """Return `axis` unchanged, or raise ValueError if it is not 0 or 1."""
    if axis not in AXES:
        raise ValueError(f"Unknown axis: {axis}. Must be one of {AXES}")
    return axis


def validate_dimensions(dimensions) -> Dimensions:
    """
    Normalize a (width, height) pair.

    Raises:
        ValueError: If dimensions is not a pair of positive integers
    """
    try:
        width, height = dimensions
    except (TypeError, ValueError):
        raise ValueError(f"Dimensions must be a (width, height) pair, got {dimensions!r}") from None

    if width <= 0 or height <= 0:
        raise ValueError(f"Dimensions must be positive, got ({width}, {height})")

    return (int(width), int(height))
