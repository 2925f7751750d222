from dataclasses import replace

import pytest

from rainbow_smoke.config import DEFAULT_OUTPUT, GrowthConfig
from rainbow_smoke.errors import ConfigurationError
from rainbow_smoke.selection import DEFAULT_SELECTION


def test_defaults() -> None:
    config = GrowthConfig(width=4, height=4, depth=3)
    assert config.selection == DEFAULT_SELECTION
    assert config.progress_interval == 256
    assert config.output == DEFAULT_OUTPUT == "rbsmoke.png"
    assert config.pixel_count == 16
    assert config.validate() is config


@pytest.mark.parametrize(
    "changes",
    [
        {"width": 0},
        {"height": -1},
        {"depth": 0},
        {"depth": -1},
        {"width": 100, "height": 100, "depth": 1},
        {"selection": "nearest"},
        {"progress_interval": 0},
    ],
)
def test_invalid_config_raises(changes: dict[str, object]) -> None:
    config = replace(GrowthConfig(width=4, height=4, depth=3), **changes)
    with pytest.raises(ConfigurationError):
        config.validate()


def test_palette_exactly_covering_canvas_is_valid() -> None:
    GrowthConfig(width=4, height=2, depth=1).validate()
    with pytest.raises(ConfigurationError):
        GrowthConfig(width=3, height=3, depth=1).validate()


def test_depth_has_no_upper_bound() -> None:
    GrowthConfig(width=2, height=2, depth=300).validate()
