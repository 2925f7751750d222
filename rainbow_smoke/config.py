"""Run configuration.

:class:`GrowthConfig` gathers the parameters of a single run so the CLI and
the viewer share one validation path. Validation only inspects the numbers;
nothing is allocated until :func:`rainbow_smoke.growth.grow` runs.
"""

from dataclasses import dataclass

from rainbow_smoke.errors import ConfigurationError
from rainbow_smoke.palette import check_depth, palette_size
from rainbow_smoke.selection import DEFAULT_SELECTION, get_select_fn

DEFAULT_OUTPUT = "rbsmoke.png"
DEFAULT_PROGRESS_INTERVAL = 256


@dataclass(frozen=True)
class GrowthConfig:
    """Parameters for one growth run.

    Attributes:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        depth: Color depth; the palette holds ``(depth + 1) ** 3`` colors.
        selection: Name of a registered selection strategy.
        progress_interval: Iterations between progress notifications.
        output: Destination path used by the CLI.
    """

    width: int
    height: int
    depth: int
    selection: str = DEFAULT_SELECTION
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL
    output: str = DEFAULT_OUTPUT

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def validate(self) -> "GrowthConfig":
        """Check every parameter and return ``self``.

        Raises:
            ConfigurationError: On the first invalid parameter.
        """
        check_dimensions(self.width, self.height)
        check_depth(self.depth)
        check_palette_covers(self.width, self.height, self.depth)
        get_select_fn(self.selection)
        if self.progress_interval <= 0:
            raise ConfigurationError(
                f"Progress interval must be positive, got {self.progress_interval}"
            )
        return self


def check_dimensions(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ConfigurationError(
            f"Canvas dimensions must be positive, got {width}x{height}"
        )


def check_palette_covers(width: int, height: int, depth: int) -> None:
    needed = width * height
    available = palette_size(depth)
    if available < needed:
        raise ConfigurationError(
            f"Depth {depth} yields {available} colors but a {width}x{height} "
            f"canvas needs {needed}"
        )
