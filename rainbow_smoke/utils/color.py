"""Color metric helpers.

Pure functions over :class:`Color`. ``distance`` is only ever used to compare
candidates against each other, so it skips the square root.
"""

from rainbow_smoke.components import Color


def distance(a: Color, b: Color) -> int:
    """Return the squared Euclidean distance between ``a`` and ``b`` in RGB."""
    dr = a.r - b.r
    dg = a.g - b.g
    db = a.b - b.b
    return dr * dr + dg * dg + db * db


def hue(color: Color) -> float:
    """Return the HSV hue of ``color`` in degrees, in ``[0, 360)``.

    Achromatic colors (black, white and every gray) have no defined hue and
    are given 0, which places them alongside the reds when sorting.
    """
    r, g, b = color.r, color.g, color.b
    high = max(r, g, b)
    low = min(r, g, b)
    if high == low:
        return 0.0

    span = float(high - low)
    if high == r:
        h = (g - b) / span
    elif high == g:
        h = 2.0 + (b - r) / span
    else:
        h = 4.0 + (r - g) / span

    h *= 60.0
    if h < 0:
        h += 360.0
    return h


def quantize_level(level: int, depth: int) -> int:
    """Map quantization ``level`` in ``0..depth`` to an 8-bit channel value."""
    if not 0 <= level <= depth:
        raise ValueError(f"Level {level} outside 0..{depth}")
    # Half-up rounding of level * 255 / depth.
    return (2 * level * 255 + depth) // (2 * depth)
