"""
plane_core: Core primitives for the point-plane engine.

Provides:
- types: Point, Dimensions, axis constants
- point_set: Deduplicating PointSet (plus a lock-guarded variant)
- errors: OutOfBoundsError / NotFoundError raised by strict mutators
- plane: Bounded Plane owning a PointSet, with join/fill/flip operations
- logging_utils: setup_logger for file + console debug traces
"""

__all__ = [
    "errors",
    "logging_utils",
    "plane",
    "point_set",
    "types",
]
