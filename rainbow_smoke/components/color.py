"""Color component.

Three 8-bit channels. No alpha: an opaque alpha channel is only added by the
renderer when a finished canvas is encoded.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Color:
    """RGB color value.

    Attributes:
        r: Red channel, 0..255.
        g: Green channel, 0..255.
        b: Blue channel, 0..255.
    """

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"Channel out of range: {channel}")

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __str__(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"
