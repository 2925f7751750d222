"""Palette construction.

The palette is every color of a ``(depth + 1)``-level RGB cube, ordered by
hue. The growth engine consumes it strictly in order, so the ordering here
directly shapes the final image:

* Enumeration runs red outermost, blue innermost.
* The hue sort is stable, so colors of equal hue keep enumeration order.
* Grays all have hue 0 and therefore land among the reds at the start.
"""

import logging

from pyrsistent import pvector
from pyrsistent.typing import PVector

from rainbow_smoke.components import Color
from rainbow_smoke.errors import ConfigurationError
from rainbow_smoke.utils.color import hue, quantize_level

logger = logging.getLogger(__name__)

MIN_DEPTH = 1


def palette_size(depth: int) -> int:
    """Return the number of colors ``build_palette(depth)`` yields."""
    return (depth + 1) ** 3


def check_depth(depth: int) -> None:
    if depth < MIN_DEPTH:
        raise ConfigurationError(
            f"Color depth must be at least {MIN_DEPTH}, got {depth}"
        )


def enumerate_colors(depth: int) -> PVector[Color]:
    """Return the quantized RGB cube in enumeration (unsorted) order."""
    check_depth(depth)
    levels = [quantize_level(k, depth) for k in range(depth + 1)]
    return pvector(Color(r, g, b) for r in levels for g in levels for b in levels)


def build_palette(depth: int) -> PVector[Color]:
    """Return the hue-sorted palette for ``depth``.

    Arguments:
        depth: Number of quantization steps per channel (levels minus one).

    Returns:
        PVector[Color]: ``(depth + 1) ** 3`` colors in non-decreasing hue.

    Raises:
        ConfigurationError: If ``depth`` is below 1.
    """
    colors = enumerate_colors(depth)
    logger.debug("Sorting %d colors by hue", len(colors))
    return pvector(sorted(colors, key=hue))
