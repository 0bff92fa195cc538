"""
Errors raised by strict-mode Plane mutators.

Non-strict variants never raise; strict variants validate every candidate
before mutating and raise one of these for the first offending point.
"""

from .types import Dimensions, Point


class PlaneError(ValueError):
    """Base class for Plane failures."""


class OutOfBoundsError(PlaneError):
    """A point lies outside [0, width] x [0, height]."""

    def __init__(self, point: Point, dimensions: Dimensions):
        self.point = point
        self.dimensions = dimensions
        width, height = dimensions
        super().__init__(
            f"Point ({point.x}, {point.y}) is outside plane bounds "
            f"[0, {width}] x [0, {height}]"
        )


class NotFoundError(PlaneError):
    """A point to be erased is not present on the plane."""

    def __init__(self, point: Point):
        self.point = point
        super().__init__(f"Point ({point.x}, {point.y}) not found on plane")
