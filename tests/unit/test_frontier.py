from rainbow_smoke.components import Point
from rainbow_smoke.frontier import Frontier
from tests.test_utils import make_frontier


def test_add_is_insert_if_absent() -> None:
    frontier = Frontier()
    assert frontier.add(Point(1, 1))
    assert not frontier.add(Point(1, 1))
    assert len(frontier) == 1
    assert Point(1, 1) in frontier
    assert Point(0, 1) not in frontier


def test_iteration_follows_insertion_order() -> None:
    frontier = make_frontier([(2, 0), (0, 0), (1, 0)])
    assert list(frontier) == [Point(2, 0), Point(0, 0), Point(1, 0)]
    assert frontier.points == (Point(2, 0), Point(0, 0), Point(1, 0))


def test_pop_at_moves_last_into_vacated_slot() -> None:
    frontier = make_frontier([(0, 0), (1, 0), (2, 0), (3, 0)])
    assert frontier.pop_at(1) == Point(1, 0)
    assert list(frontier) == [Point(0, 0), Point(3, 0), Point(2, 0)]
    assert Point(1, 0) not in frontier
    # Moved point is still addressable by its new slot.
    assert frontier.discard(Point(3, 0))
    assert list(frontier) == [Point(0, 0), Point(2, 0)]


def test_pop_at_last_slot() -> None:
    frontier = make_frontier([(0, 0), (1, 0)])
    assert frontier.pop_at(1) == Point(1, 0)
    assert list(frontier) == [Point(0, 0)]
    assert frontier.pop_at(0) == Point(0, 0)
    assert not frontier
    assert len(frontier) == 0


def test_discard_missing_point() -> None:
    frontier = make_frontier([(0, 0)])
    assert not frontier.discard(Point(5, 5))
    assert len(frontier) == 1


def test_membership_and_storage_stay_consistent() -> None:
    frontier = make_frontier([(x, y) for x in range(4) for y in range(4)])
    for index in [5, 0, 7, 3, 0, 10, 1]:
        removed = frontier.pop_at(min(index, len(frontier) - 1))
        assert removed not in frontier
    assert len(set(frontier)) == len(frontier) == 16 - 7
    assert all(p in frontier for p in frontier)
