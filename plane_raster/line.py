"""
Line joining: rasterize a polyline into integer pixels.

Each segment between consecutive vertices is walked with a floating-point
cursor in round(length) equal steps; every cursor position is rounded to the
nearest pixel. The segment's final endpoint is not emitted by that segment
(it starts the next one).

Rounding is half-away-from-zero throughout, for the segment length and for
the cursor coordinates alike.
"""

import logging
import math
from typing import List, Sequence

from plane_core.point_set import PointSet
from plane_core.types import Point

logger = logging.getLogger(__name__)


def round_half_away(value: float) -> int:
    """
    Round to the nearest integer, ties away from zero.

    Unlike built-in round(), which ties to even. The fraction is compared
    against 0.5 directly; adding 0.5 first would round 0.49999999999999994
    up to 1.

    Examples:
        >>> round_half_away(2.5)
        3
        >>> round_half_away(-2.5)
        -3
    """
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


def _segment_points(prev: Point, curr: Point) -> List[Point]:
    """
    Pixels from prev (inclusive) towards curr (exclusive).

    Points may repeat when consecutive cursor positions round to the same
    pixel; the caller deduplicates.
    """
    dx = curr.x - prev.x
    dy = curr.y - prev.y

    steps = round_half_away(math.sqrt(dx * dx + dy * dy))
    if steps == 0:
        # Repeated vertex: nothing to draw
        return []

    # Vertical segments have no gradient; y is stepped directly below
    if dx == 0:
        gradient = 0.0
    else:
        gradient = dy / dx

    x_increment = dx / steps
    y_increment = x_increment * gradient

    if dx == 0:
        if dy > 0:
            y_increment = 1.0
        elif dy < 0:
            y_increment = -1.0

    cursor_x = float(prev.x)
    cursor_y = float(prev.y)
    points = []
    # TODO: skip cursor positions that round to the pixel just emitted
    for _ in range(steps):
        points.append(Point(round_half_away(cursor_x), round_half_away(cursor_y)))
        cursor_x += x_increment
        cursor_y += y_increment

    return points


def join_points(vertices: Sequence[Point]) -> List[Point]:
    """
    Rasterize the polyline through `vertices`.

    Args:
        vertices: Ordered polyline vertices

    Returns:
        Unique pixels on every segment, in no particular order.
        Empty for zero or one vertex.

    Acceptance:
        - join_points([(0,0), (5,0)]) == {(0,0), ..., (4,0)}
        - join_points([(0,0), (0,5)]) == {(0,0), ..., (0,4)}
        - Crossing or retraced segments contribute each pixel once
    """
    vertices = list(vertices)
    result = PointSet()

    for prev, curr in zip(vertices, vertices[1:]):
        result.add_all(_segment_points(prev, curr))

    logger.debug(
        "Joined %d vertices into %d points", len(vertices), len(result)
    )
    return result.to_list()


__all__ = [
    "join_points",
    "round_half_away",
]
