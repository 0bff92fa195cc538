"""
Occupancy mask: hand points to an image-building caller as a numpy array.

The mask is indexed [y, x] (row-major, like an image buffer) and has shape
(height, width). Points outside [0, width) x [0, height) are skipped, since
strict Plane bounds are inclusive of width/height but pixel buffers are not.
"""

from typing import Iterable

import numpy as np

from plane_core.types import Dimensions, Point, validate_dimensions


def points_to_mask(points: Iterable[Point], dimensions: Dimensions) -> np.ndarray:
    """
    Boolean occupancy grid of `points`.

    Args:
        points: Points to mark
        dimensions: (width, height) of the target buffer

    Returns:
        np.ndarray of dtype bool, shape (height, width); mask[y, x] is True
        iff Point(x, y) is in `points`.
    """
    width, height = validate_dimensions(dimensions)
    mask = np.zeros((height, width), dtype=bool)

    coords = np.array([(p.x, p.y) for p in points], dtype=np.int64).reshape(-1, 2)
    if coords.size == 0:
        return mask

    xs, ys = coords[:, 0], coords[:, 1]
    inside = (xs >= 0) & (xs < width) & (ys >= 0) & (ys < height)
    mask[ys[inside], xs[inside]] = True

    return mask


__all__ = [
    "points_to_mask",
]
