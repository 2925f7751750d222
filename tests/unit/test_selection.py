import random
from typing import Tuple

import pytest

from rainbow_smoke.canvas import Canvas
from rainbow_smoke.components import Color, Point
from rainbow_smoke.errors import ConfigurationError
from rainbow_smoke.selection import (
    SELECT_FN_REGISTRY,
    fitness,
    frontier_scores,
    get_select_fn,
    scan_select,
    sort_select,
    vectorized_select,
)
from rainbow_smoke.types import SelectFn
from tests.test_utils import BLACK, RED, WHITE, boundary_of, make_canvas, make_frontier

ALL_SELECT_FNS = [sort_select, scan_select, vectorized_select]


def test_fitness_without_colored_neighbors_is_zero() -> None:
    canvas = make_canvas(3, 3, {(0, 0): (0, 0, 0)})
    assert fitness(canvas, Point(2, 2), WHITE) == 0


def test_fitness_sums_colored_neighbors() -> None:
    canvas = make_canvas(3, 3, {(0, 0): (0, 0, 0), (2, 2): (255, 0, 0)})
    # white vs black + white vs red
    assert fitness(canvas, Point(1, 1), WHITE) == 3 * 255**2 + 2 * 255**2
    assert fitness(canvas, Point(0, 1), WHITE) == 3 * 255**2


def test_fitness_at_corner_ignores_out_of_bounds() -> None:
    canvas = make_canvas(2, 2, {(1, 0): (255, 0, 0), (1, 1): (255, 0, 0)})
    assert fitness(canvas, Point(0, 0), BLACK) == 2 * 255**2


@pytest.mark.parametrize("select_fn", ALL_SELECT_FNS)
def test_selects_maximum_difference(select_fn: SelectFn) -> None:
    canvas = make_canvas(3, 3, {(0, 0): (0, 0, 0), (2, 2): (255, 0, 0)})
    frontier = make_frontier([(0, 1), (1, 1)])
    assert select_fn(canvas, frontier, WHITE) == 1
    # Black matches (0, 0) exactly; (1, 1) also sees red, so it still wins.
    assert select_fn(canvas, frontier, BLACK) == 1


@pytest.mark.parametrize("select_fn", ALL_SELECT_FNS)
def test_ties_go_to_first_slot(select_fn: SelectFn) -> None:
    canvas = make_canvas(3, 3, {(1, 1): (0, 0, 0)})
    frontier = make_frontier([(0, 0), (2, 0), (0, 2), (2, 2)])
    assert select_fn(canvas, frontier, WHITE) == 0
    frontier = make_frontier([(0, 0), (2, 2), (1, 0)])
    canvas.paint(Point(2, 1), RED)
    # (2, 2) and (1, 0) both see black and red; (2, 2) comes first.
    assert select_fn(canvas, frontier, WHITE) == 1


@pytest.mark.parametrize("select_fn", ALL_SELECT_FNS)
def test_zero_scores_pick_first_slot(select_fn: SelectFn) -> None:
    canvas = make_canvas(4, 4, {(0, 0): (10, 20, 30)})
    frontier = make_frontier([(1, 0), (0, 1), (1, 1)])
    assert select_fn(canvas, frontier, Color(10, 20, 30)) == 0


def random_scene(seed: int) -> Tuple[Canvas, Color]:
    rng = random.Random(seed)
    width, height = rng.randint(2, 9), rng.randint(2, 9)
    canvas = Canvas(width, height)
    for _ in range(rng.randint(1, width * height - 1)):
        point = Point(rng.randrange(width), rng.randrange(height))
        if not canvas.is_colored(point):
            canvas.paint(point, Color(*(rng.choice([0, 85, 170, 255]) for _ in "rgb")))
    color = Color(*(rng.choice([0, 85, 170, 255]) for _ in "rgb"))
    return canvas, color


@pytest.mark.parametrize("seed", range(25))
def test_strategies_agree(seed: int) -> None:
    canvas, color = random_scene(seed)
    frontier = boundary_of(canvas)
    expected = sort_select(canvas, frontier, color)
    scores = frontier_scores(canvas, frontier, color)
    assert scores[expected] == max(scores)
    assert scores.index(max(scores)) == expected
    assert scan_select(canvas, frontier, color) == expected
    assert vectorized_select(canvas, frontier, color) == expected


def test_selection_does_not_mutate() -> None:
    canvas, color = random_scene(3)
    frontier = boundary_of(canvas)
    before_points = frontier.points
    before_pixels = canvas.to_array()
    for select_fn in ALL_SELECT_FNS:
        select_fn(canvas, frontier, color)
    assert frontier.points == before_points
    assert (canvas.pixels == before_pixels).all()


@pytest.mark.parametrize("name", ["sort", "scan", "vectorized"])
def test_registry_lookup(name: str) -> None:
    assert get_select_fn(name) is SELECT_FN_REGISTRY[name]


def test_unknown_strategy_raises() -> None:
    with pytest.raises(ConfigurationError):
        get_select_fn("minimum")
