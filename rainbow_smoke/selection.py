"""Frontier scoring and selection strategies.

Each *select function* maps (canvas, frontier, color) -> slot of the frontier
point where ``color`` should be placed. The policy is fixed: the point whose
colored neighbors differ **most** from ``color`` wins, and among equal scores
the lowest slot wins. Strategies only differ in how they find that point.

Contract (``SelectFn``):

* Must not mutate the canvas or the frontier.
* Is only called with a non-empty frontier.
* Must return the first maximizing slot, so every strategy grows the exact
  same image.

Performance: scoring is a full pass over the frontier for every color, since
the score depends on the color about to be placed. ``sort`` is the reference
baseline, ``scan`` drops the sort, and ``vectorized`` moves the pass into
numpy.
"""

from typing import Dict, List

import numpy as np

from rainbow_smoke.canvas import Canvas
from rainbow_smoke.components import NEIGHBOR_OFFSETS, Color, Point
from rainbow_smoke.errors import ConfigurationError
from rainbow_smoke.frontier import Frontier
from rainbow_smoke.types import Fitness, FrontierIndex, SelectFn, SelectionName
from rainbow_smoke.utils.color import distance


def fitness(canvas: Canvas, point: Point, color: Color) -> Fitness:
    """Sum of ``distance(color, c)`` over the colored 8-neighbors of ``point``.

    Out-of-bounds and uncolored neighbors contribute nothing.
    """
    return sum(distance(color, c) for c in canvas.colored_neighbors(point))


def frontier_scores(canvas: Canvas, frontier: Frontier, color: Color) -> List[Fitness]:
    """Return the fitness of every frontier point, in slot order."""
    return [fitness(canvas, p, color) for p in frontier]


def sort_select(canvas: Canvas, frontier: Frontier, color: Color) -> FrontierIndex:
    """Rank the whole frontier by descending fitness and take the head.

    ``sorted`` is stable with ``reverse=True``, so equal scores keep slot
    order.
    """
    scores = frontier_scores(canvas, frontier, color)
    ranked = sorted(range(len(scores)), key=scores.__getitem__, reverse=True)
    return ranked[0]


def scan_select(canvas: Canvas, frontier: Frontier, color: Color) -> FrontierIndex:
    """Single pass keeping the first strict maximum."""
    best_index: FrontierIndex = 0
    best_score: Fitness = -1
    for index, point in enumerate(frontier):
        score = fitness(canvas, point, color)
        if score > best_score:
            best_index, best_score = index, score
    return best_index


def vectorized_select(
    canvas: Canvas, frontier: Frontier, color: Color
) -> FrontierIndex:
    """Score the frontier with numpy array indexing; ``argmax`` breaks ties low."""
    count = len(frontier)
    xs = np.fromiter((p.x for p in frontier), dtype=np.int64, count=count)
    ys = np.fromiter((p.y for p in frontier), dtype=np.int64, count=count)
    target = np.array(color.rgb, dtype=np.int64)
    scores = np.zeros(count, dtype=np.int64)

    for dx, dy in NEIGHBOR_OFFSETS:
        nx = xs + dx
        ny = ys + dy
        in_bounds = (nx >= 0) & (nx < canvas.width) & (ny >= 0) & (ny < canvas.height)
        slots = np.nonzero(in_bounds)[0]
        nx, ny = nx[slots], ny[slots]
        colored = canvas.filled[ny, nx]
        slots, nx, ny = slots[colored], nx[colored], ny[colored]
        diff = canvas.pixels[ny, nx].astype(np.int64) - target
        scores[slots] += (diff * diff).sum(axis=1)

    return int(np.argmax(scores))


SELECT_FN_REGISTRY: Dict[str, SelectFn] = {
    SelectionName.SORT: sort_select,
    SelectionName.SCAN: scan_select,
    SelectionName.VECTORIZED: vectorized_select,
}
"""Registry of built-in selection strategy names to callables."""

DEFAULT_SELECTION: str = SelectionName.VECTORIZED


def get_select_fn(name: str) -> SelectFn:
    """Resolve a strategy name from :data:`SELECT_FN_REGISTRY`.

    Raises:
        ConfigurationError: If ``name`` is not registered.
    """
    try:
        return SELECT_FN_REGISTRY[name]
    except KeyError:
        known = ", ".join(sorted(SELECT_FN_REGISTRY))
        raise ConfigurationError(
            f"Unknown selection strategy {name!r} (expected one of: {known})"
        ) from None
