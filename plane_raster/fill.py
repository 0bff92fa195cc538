"""
Interior fill by column ray casting over a rasterized outline.

Algorithm:
1. Rasterize the outline with join_points
2. Scan window = bounding box of the input vertices, grown by one pixel
3. For each column, walk y upwards and record a hit wherever the outline
   has (x, y) but not (x, y + 1), so a vertical run of outline pixels counts
   as a single crossing
4. Odd hit count: drop the last hit
5. Join hits pairwise, (h0, h1), (h2, h3), ..., with vertical segments

This works on a rasterized outline, not exact polygon geometry. Concave or
self-intersecting shapes may fill incorrectly; the odd-count repair is a
heuristic and is kept as is.
"""

import logging
from typing import Collection, List, Sequence, Tuple

from plane_core.point_set import PointSet
from plane_core.types import Point

from .line import join_points
from .transform import bounding_box

logger = logging.getLogger(__name__)


def scan_bounds(vertices: Sequence[Point]) -> Tuple[int, int, int, int]:
    """
    Scan window (x_min, x_max, y_min, y_max) for filling `vertices`.

    Bounding box of the vertices (not the outline), expanded by one on each
    side. May start at -1 when a vertex touches 0. Both ends are inclusive.
    """
    x_min, x_max, y_min, y_max = bounding_box(vertices)
    return (x_min - 1, x_max + 1, y_min - 1, y_max + 1)


def column_hits(outline: Collection[Point], x: int, y_min: int, y_max: int) -> List[int]:
    """
    Ray hits in column x between y_min and y_max (inclusive), ascending.

    A hit is an outline pixel whose upper neighbour is not on the outline.
    """
    return [
        y
        for y in range(y_min, y_max + 1)
        if Point(x, y) in outline and Point(x, y + 1) not in outline
    ]


def join_and_fill_points(vertices: Sequence[Point]) -> List[Point]:
    """
    Outline of `vertices` plus its interior.

    Args:
        vertices: Ordered vertices of a simple, closed or near-closed shape

    Returns:
        Unique outline and interior pixels, in no particular order.
        Empty for zero vertices.

    Acceptance:
        - Every join_points(vertices) pixel is in the result
        - Square (10,10)-(50,50) is filled, (30, 30) included
    """
    vertices = list(vertices)
    if not vertices:
        return []

    outline = PointSet(join_points(vertices))
    result = PointSet(outline)

    x_min, x_max, y_min, y_max = scan_bounds(vertices)
    filled_columns = 0

    for x in range(x_min, x_max + 1):
        hits = column_hits(outline, x, y_min, y_max)
        if len(hits) % 2 == 1:
            hits = hits[:-1]
        if hits:
            filled_columns += 1

        for start, end in zip(hits[::2], hits[1::2]):
            result.add_all(join_points([Point(x, start), Point(x, end)]))

    logger.debug(
        "Filled %d of %d columns, %d outline points -> %d points",
        filled_columns, x_max - x_min + 1, len(outline), len(result),
    )
    return result.to_list()


__all__ = [
    "column_hits",
    "join_and_fill_points",
    "scan_bounds",
]
