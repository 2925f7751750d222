"""Write-once output grid.

The :class:`Canvas` is the only observable product of a growth run. Each cell
starts uncolored and transitions to colored exactly once; the growth session
is its single writer and encoders read it after the run completes.

Storage is a ``uint8`` numpy array of shape ``(height, width, 3)`` alongside a
boolean ``filled`` mask, which lets the vectorized selection strategy score a
whole frontier with array indexing instead of per-point lookups.
"""

from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np
import numpy.typing as npt

from rainbow_smoke.components import Color, Point
from rainbow_smoke.errors import CanvasWriteError

UInt8Array = npt.NDArray[np.uint8]
BoolArray = npt.NDArray[np.bool_]


@dataclass(eq=False)
class Canvas:
    """Grid of ``width x height`` optional colors.

    Attributes:
        width (int): Number of columns.
        height (int): Number of rows.
        pixels (UInt8Array): RGB values indexed ``[y, x]``; meaningless where
            ``filled`` is False.
        filled (BoolArray): True where a cell has been colored.
    """

    width: int
    height: int
    pixels: UInt8Array = field(init=False, repr=False)
    filled: BoolArray = field(init=False, repr=False)
    colored_count: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Canvas dimensions must be positive, got {self.width}x{self.height}"
            )
        self.pixels = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        self.filled = np.zeros((self.height, self.width), dtype=np.bool_)

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def center(self) -> Point:
        return Point(self.width // 2, self.height // 2)

    @property
    def is_complete(self) -> bool:
        return self.colored_count == self.size

    def is_in_bounds(self, point: Point) -> bool:
        """Return True if ``point`` lies within the canvas rectangle."""
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def is_colored(self, point: Point) -> bool:
        self._check_bounds(point)
        return bool(self.filled[point.y, point.x])

    def get(self, point: Point) -> Optional[Color]:
        """Return the color at ``point`` or None if it is still uncolored."""
        self._check_bounds(point)
        if not self.filled[point.y, point.x]:
            return None
        r, g, b = self.pixels[point.y, point.x]
        return Color(int(r), int(g), int(b))

    def paint(self, point: Point, color: Color) -> None:
        """Color the cell at ``point``.

        Raises:
            IndexError: If ``point`` is outside the canvas.
            CanvasWriteError: If the cell is already colored.
        """
        self._check_bounds(point)
        if self.filled[point.y, point.x]:
            raise CanvasWriteError(f"Cell {(point.x, point.y)} is already colored")
        self.pixels[point.y, point.x] = color.rgb
        self.filled[point.y, point.x] = True
        self.colored_count += 1

    def neighbors(self, point: Point) -> List[Point]:
        """Return the in-bounds 8-neighbors of ``point``."""
        return [p for p in point.around() if self.is_in_bounds(p)]

    def colored_neighbors(self, point: Point) -> List[Color]:
        """Return the colors of the colored, in-bounds 8-neighbors of ``point``."""
        colors: List[Color] = []
        for p in self.neighbors(point):
            color = self.get(p)
            if color is not None:
                colors.append(color)
        return colors

    def to_array(self) -> UInt8Array:
        """Return a copy of the RGB array, shape ``(height, width, 3)``."""
        return self.pixels.copy()

    # -------- Internal helpers --------

    def _check_bounds(self, point: Point) -> None:
        if not self.is_in_bounds(point):
            raise IndexError(
                f"Out of bounds: {(point.x, point.y)} for canvas {self.width}x{self.height}"
            )
