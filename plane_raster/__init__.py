"""
plane_raster: Rasterization algorithms over vertex sequences.

Provides:
- line: join_points (polyline rasterizer), round_half_away
- fill: join_and_fill_points (column ray-casting fill), scan_bounds, column_hits
- transform: flip_point / flip_points, bounding_box
- mask: points_to_mask (numpy occupancy grid for image builders)

All functions are pure: they never touch a Plane's stored points.
"""

__all__ = [
    "fill",
    "line",
    "mask",
    "transform",
]
