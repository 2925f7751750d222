"""Common type aliases and enumerations.

``SelectFn`` is the extension point used by :class:`GrowthSession` to find
the frontier point for the next palette color. ``ProgressFn`` is the optional
observer called while a run advances.
"""

from enum import StrEnum, auto
from typing import Callable, Optional, TYPE_CHECKING


# Forward declarations to avoid circular imports:
if TYPE_CHECKING:
    from rainbow_smoke.canvas import Canvas
    from rainbow_smoke.components import Color
    from rainbow_smoke.frontier import Frontier

FrontierIndex = int
Fitness = int

# (canvas, frontier, color) -> slot of the chosen frontier point
SelectFn = Callable[["Canvas", "Frontier", "Color"], FrontierIndex]

# (iteration, total, frontier_size)
ProgressFn = Callable[[int, int, int], None]
OptionalProgressFn = Optional[ProgressFn]


class SelectionName(StrEnum):
    """Names of the built-in selection strategies."""

    SORT = auto()
    SCAN = auto()
    VECTORIZED = auto()
