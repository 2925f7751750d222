"""rainbow_smoke.components
=================================

Value types shared by every stage of the growth pipeline.

Both classes are frozen ``@dataclass`` value objects, so they can be used as
dictionary keys and compared by value::

    from rainbow_smoke.components import Color, Point

"""

from .color import Color
from .point import NEIGHBOR_OFFSETS, Point

__all__ = [
    "Color",
    "NEIGHBOR_OFFSETS",
    "Point",
]
