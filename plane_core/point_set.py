"""
Deduplicating point container.

Provides:
- PointSet: unordered set of Points with add/remove/membership/bulk operations
- LockedPointSet: same contract, every operation guarded by a lock

Iteration order of to_list() is unspecified and may differ between calls.
Callers must not depend on it. Returned lists are detached snapshots.
"""

import threading
from typing import Callable, Iterable, Iterator, List, Optional

from .types import Point


class PointSet:
    """
    Unordered collection of unique Points.

    Invariant: no coordinate pair is stored twice.
    """

    def __init__(self, points: Iterable[Point] = ()):
        self._data: set[Point] = set()
        self.add_all(points)

    def add(self, point: Point) -> None:
        """Insert point; no-op if already present."""
        self._data.add(point)

    def add_all(self, points: Iterable[Point]) -> None:
        for point in points:
            self._data.add(point)

    def remove(self, point: Point) -> None:
        """Delete point; no-op if absent."""
        self._data.discard(point)

    def remove_all(self, points: Iterable[Point]) -> None:
        for point in points:
            self._data.discard(point)

    def contains(self, point: Point) -> bool:
        return point in self._data

    def contains_all(self, points: Iterable[Point]) -> bool:
        """True iff every point is a member. Stops at the first miss."""
        return all(point in self._data for point in points)

    def remove_all_strict(self, points: Iterable[Point]) -> Optional[Point]:
        """
        Remove points only if every one of them is present.

        Returns:
            None after removing all points, or the first missing point
            (in which case nothing is removed)
        """
        points = list(points)
        for point in points:
            if point not in self._data:
                return point
        self._data.difference_update(points)
        return None

    def replace_all(self, transform: Callable[[Point], Point]) -> None:
        """
        Replace every point p with transform(p).

        All replacements are computed before any is committed.
        """
        self._data = {transform(point) for point in self._data}

    def to_list(self) -> List[Point]:
        """Snapshot of current membership, in no particular order."""
        return list(self._data)

    def __contains__(self, point: object) -> bool:
        return self.contains(point)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Point]:
        # Iterate a snapshot so callers may mutate the set while looping
        return iter(self.to_list())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} points)"


class LockedPointSet(PointSet):
    """
    PointSet safe for concurrent add/remove from several threads.

    Each public operation holds the lock for its whole duration, so bulk
    operations (including remove_all_strict and replace_all) are atomic with
    respect to each other. The lock is re-entrant: an iterable or transform
    passed in may call back into the same set.
    """

    def __init__(self, points: Iterable[Point] = ()):
        self._lock = threading.RLock()
        super().__init__(points)

    def add(self, point: Point) -> None:
        with self._lock:
            super().add(point)

    def add_all(self, points: Iterable[Point]) -> None:
        points = list(points)
        with self._lock:
            super().add_all(points)

    def remove(self, point: Point) -> None:
        with self._lock:
            super().remove(point)

    def remove_all(self, points: Iterable[Point]) -> None:
        points = list(points)
        with self._lock:
            super().remove_all(points)

    def remove_all_strict(self, points: Iterable[Point]) -> Optional[Point]:
        points = list(points)
        with self._lock:
            return super().remove_all_strict(points)

    def replace_all(self, transform: Callable[[Point], Point]) -> None:
        with self._lock:
            super().replace_all(transform)

    def contains(self, point: Point) -> bool:
        with self._lock:
            return super().contains(point)

    def contains_all(self, points: Iterable[Point]) -> bool:
        with self._lock:
            return super().contains_all(points)

    def to_list(self) -> List[Point]:
        with self._lock:
            return super().to_list()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)
