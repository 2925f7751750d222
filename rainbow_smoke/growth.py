"""Growth engine.

A :class:`GrowthSession` owns everything a run mutates: the canvas and the
frontier. Each :meth:`GrowthSession.step` consumes the next palette color:

1. Pick a point. With an empty frontier this is the seed (canvas center);
   otherwise the session's select function chooses a frontier slot.
2. Paint the color there. Cells are write-once.
3. Drop the point from the frontier (swap-remove).
4. Add its in-bounds, uncolored neighbors that are not already queued.

After ``width * height`` steps every cell is colored exactly once. The loop
has no I/O; progress is reported through logging and an optional callback.
"""

import logging
from dataclasses import dataclass, field

from pyrsistent.typing import PVector

from rainbow_smoke.canvas import Canvas
from rainbow_smoke.components import Color, Point
from rainbow_smoke.config import (
    DEFAULT_PROGRESS_INTERVAL,
    GrowthConfig,
    check_dimensions,
    check_palette_covers,
)
from rainbow_smoke.errors import ConfigurationError
from rainbow_smoke.frontier import Frontier
from rainbow_smoke.palette import build_palette, check_depth
from rainbow_smoke.selection import DEFAULT_SELECTION, get_select_fn
from rainbow_smoke.types import OptionalProgressFn, SelectFn

logger = logging.getLogger(__name__)


@dataclass
class GrowthSession:
    """Mutable state of one growth run.

    Attributes:
        palette (PVector[Color]): Hue-ordered colors; entry ``i`` is placed at step ``i``.
        canvas (Canvas): Output grid, written once per cell.
        select_fn (SelectFn): Strategy that picks the next frontier slot.
        frontier (Frontier): Uncolored points adjacent to the colored region.
        seed (Point): Starting point, the canvas center.
        iteration (int): Number of colors placed so far.
    """

    palette: PVector[Color]
    canvas: Canvas
    select_fn: SelectFn
    frontier: Frontier = field(default_factory=Frontier)
    seed: Point = field(init=False)
    iteration: int = 0

    def __post_init__(self) -> None:
        if len(self.palette) < self.canvas.size:
            raise ConfigurationError(
                f"Palette has {len(self.palette)} colors but the canvas needs "
                f"{self.canvas.size}"
            )
        self.seed = self.canvas.center

    @classmethod
    def create(
        cls, width: int, height: int, depth: int, selection: str = DEFAULT_SELECTION
    ) -> "GrowthSession":
        """Validate the parameters, then build the palette and an empty canvas.

        Raises:
            ConfigurationError: Before anything is allocated, if the
                parameters cannot produce a complete image.
        """
        check_dimensions(width, height)
        check_depth(depth)
        check_palette_covers(width, height, depth)
        select_fn = get_select_fn(selection)
        return cls(
            palette=build_palette(depth),
            canvas=Canvas(width, height),
            select_fn=select_fn,
        )

    @property
    def total(self) -> int:
        return self.canvas.size

    @property
    def done(self) -> bool:
        return self.iteration >= self.total

    def select(self, color: Color) -> Point:
        """Choose where ``color`` goes and take that point off the frontier."""
        if not self.frontier:
            return self.seed
        index = self.select_fn(self.canvas, self.frontier, color)
        return self.frontier.pop_at(index)

    def expand(self, point: Point) -> None:
        for neighbor in self.canvas.neighbors(point):
            if neighbor not in self.frontier and not self.canvas.is_colored(neighbor):
                self.frontier.add(neighbor)

    def step(self) -> Point:
        """Place the next palette color and return where it went."""
        if self.done:
            raise ValueError("Canvas is already complete")
        color = self.palette[self.iteration]
        point = self.select(color)
        self.canvas.paint(point, color)
        self.expand(point)
        self.iteration += 1
        return point

    def run(
        self,
        progress: OptionalProgressFn = None,
        progress_interval: int = DEFAULT_PROGRESS_INTERVAL,
    ) -> Canvas:
        """Step until every cell is colored and return the canvas.

        Arguments:
            progress: Called as ``progress(iteration, total, frontier_size)``
                every ``progress_interval`` iterations, starting with the first.
            progress_interval: Iterations between notifications.
        """
        if progress_interval <= 0:
            raise ConfigurationError(
                f"Progress interval must be positive, got {progress_interval}"
            )
        while not self.done:
            if self.iteration % progress_interval == 0:
                self._notify(progress)
            self.step()
        logger.debug("Grew %dx%d canvas", self.canvas.width, self.canvas.height)
        return self.canvas

    def _notify(self, progress: OptionalProgressFn) -> None:
        if progress is not None:
            progress(self.iteration, self.total, len(self.frontier))


def grow(
    width: int,
    height: int,
    depth: int,
    selection: str = DEFAULT_SELECTION,
    progress: OptionalProgressFn = None,
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL,
) -> Canvas:
    """Grow a fully colored ``width x height`` canvas.

    Args:
        width (int): Canvas width, > 0.
        height (int): Canvas height, > 0.
        depth (int): Color depth, >= 1, with ``(depth + 1) ** 3 >= width * height``.
        selection (str): Name in :data:`rainbow_smoke.selection.SELECT_FN_REGISTRY`.
        progress (ProgressFn | None): Optional progress observer.
        progress_interval (int): Iterations between progress notifications.

    Returns:
        Canvas: Every cell colored exactly once.

    Raises:
        ConfigurationError: If the parameters cannot produce a complete image.
    """
    if progress_interval <= 0:
        raise ConfigurationError(
            f"Progress interval must be positive, got {progress_interval}"
        )
    session = GrowthSession.create(width, height, depth, selection)
    return session.run(progress, progress_interval)


def grow_from_config(
    config: GrowthConfig, progress: OptionalProgressFn = None
) -> Canvas:
    """Validate ``config`` and run :func:`grow` with it."""
    config.validate()
    return grow(
        config.width,
        config.height,
        config.depth,
        selection=config.selection,
        progress=progress,
        progress_interval=config.progress_interval,
    )
