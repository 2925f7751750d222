"""Growth boundary bookkeeping.

The :class:`Frontier` holds the uncolored points adjacent to the colored
region. Selection strategies iterate it in slot order and hand back the slot
of their choice; removal swaps that slot with the last one and shrinks, so it
is O(1) regardless of where the point sits.

Slot order is therefore the tie-break order: whichever maximizing point is
found first in ``points`` wins.
"""

from typing import Dict, Iterator, List, Sequence

from rainbow_smoke.components import Point
from rainbow_smoke.types import FrontierIndex


class Frontier:
    """Deduplicated set of points with dense, swap-removable storage."""

    def __init__(self) -> None:
        self._points: List[Point] = []
        self._slots: Dict[Point, FrontierIndex] = {}

    def __len__(self) -> int:
        return len(self._points)

    def __bool__(self) -> bool:
        return bool(self._points)

    def __contains__(self, point: object) -> bool:
        return point in self._slots

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    @property
    def points(self) -> Sequence[Point]:
        """Read-only view of the dense point storage, in slot order."""
        return tuple(self._points)

    def add(self, point: Point) -> bool:
        """Insert ``point`` unless already present. Returns True if inserted."""
        if point in self._slots:
            return False
        self._slots[point] = len(self._points)
        self._points.append(point)
        return True

    def pop_at(self, index: FrontierIndex) -> Point:
        """Remove and return the point stored at slot ``index``.

        The last point is moved into the vacated slot.
        """
        point = self._points[index]
        last = self._points.pop()
        del self._slots[point]
        if index < len(self._points):
            self._points[index] = last
            self._slots[last] = index
        return point

    def discard(self, point: Point) -> bool:
        """Remove ``point`` if present. Returns True if it was removed."""
        index = self._slots.get(point)
        if index is None:
            return False
        self.pop_at(index)
        return True
