import random

import pytest

from warehousesim.layout import Point
from warehousesim.shelves import (
    CAPACITY,
    Shelf,
    can_simulate,
    create_shelves,
    find_shelf,
    pick_cargo,
    reset_shelves,
)


def test_create_shelves_default_points():
    shelves = create_shelves()
    assert [s.kind for s in shelves] == [1, 2, 3]
    assert [(s.x, s.y) for s in shelves] == [(177, 231), (512, 231), (848, 231)]
    assert all(s.num == 0 for s in shelves)


def test_create_shelves_custom_points():
    shelves = create_shelves([Point(10, 20)])
    assert len(shelves) == 1
    assert (shelves[0].kind, shelves[0].x, shelves[0].y) == (1, 10, 20)


def test_reset_shelves_sets_counts_and_clears_grid():
    shelves = create_shelves()
    shelves[0].items[1][4] = 1
    reset_shelves(shelves, [4, 0, 9])
    assert [s.num for s in shelves] == [4, 0, 9]
    assert all(cell == 0 for row in shelves[0].items for cell in row)


def test_slots_count_matches_num():
    shelf = Shelf(kind=1, x=0, y=0, num=7)
    slots = list(shelf.slots())
    assert len(slots) == 7
    assert slots[0] == (0, 0)
    assert len(set(slots)) == len(slots)


def test_slots_fill_first_floor_before_second():
    slots = list(Shelf(kind=2, x=0, y=0, num=CAPACITY).slots())
    floors = [floor for floor, _ in slots]
    assert floors == sorted(floors)
    assert set(slots) == {(f, c) for f in range(2) for c in range(5)}


@pytest.mark.parametrize("num", [0, -3])
def test_slots_empty(num):
    assert list(Shelf(kind=1, x=0, y=0, num=num).slots()) == []


def test_slots_capped_at_capacity():
    assert len(list(Shelf(kind=1, x=0, y=0, num=CAPACITY + 5).slots())) == CAPACITY


def test_find_shelf():
    shelves = create_shelves()
    assert find_shelf(shelves, 3) is shelves[2]
    assert find_shelf(shelves, 4) is None


@pytest.mark.parametrize(
    "robots, items, expected",
    [
        (0, [1, 1, 1], False),
        (1, [0, 0, 0], False),
        (2, [0, 3, 0], True),
        (3, [1, 0, 0], True),
    ],
)
def test_can_simulate(robots, items, expected):
    assert can_simulate(robots, items) is expected


def test_pick_cargo_nothing_left():
    assert pick_cargo([0, 0, 0], random.Random(1)) == 0


def test_pick_cargo_only_one_choice():
    rng = random.Random(5)
    assert all(pick_cargo([0, 0, 4], rng) == 3 for _ in range(20))


def test_pick_cargo_only_types_with_stock():
    rng = random.Random(7)
    picks = {pick_cargo([2, 0, 1], rng) for _ in range(100)}
    assert picks == {1, 3}


def test_pick_cargo_ignores_negative_counts():
    assert pick_cargo([-1, 0, 0], random.Random(2)) == 0