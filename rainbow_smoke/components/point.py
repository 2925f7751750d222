"""Point component.

Immutable integer canvas coordinates. Used both as the canvas index and as
the key of the frontier set, so equality and hashing are by coordinate pair.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple

# 8-neighborhood offsets, x-major.
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)


@dataclass(frozen=True)
class Point:
    """Canvas coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def around(self) -> Iterator["Point"]:
        """Yield the 8 surrounding points, without any bounds check."""
        for dx, dy in NEIGHBOR_OFFSETS:
            yield Point(self.x + dx, self.y + dy)
