"""Shelves holding stored goods, and the checks that gate a simulation."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from .layout import Point, default_shelf_points

FLOORS = 2
COLUMNS = 5
CAPACITY = FLOORS * COLUMNS


@dataclass
class Shelf:
    """One shelf of a given cargo type, with a two-floor, five-column grid."""

    kind: int
    x: int
    y: int
    num: int = 0
    items: list[list[int]] = field(
        default_factory=lambda: [[0] * COLUMNS for _ in range(FLOORS)]
    )

    def slots(self) -> Iterator[tuple[int, int]]:
        """Yield (floor, column) of each occupied slot, filled floor by floor."""
        remaining = self.num
        for floor in range(FLOORS):
            for column in range(COLUMNS):
                if remaining <= 0:
                    return
                remaining -= 1
                yield floor, column

    def clear(self) -> None:
        """Empty every slot of the grid."""
        self.items = [[0] * COLUMNS for _ in range(FLOORS)]


def create_shelves(points: Sequence[Point] | None = None) -> list[Shelf]:
    """Create empty shelves of types 1, 2, 3, ... at the given anchor points."""
    if points is None:
        points = default_shelf_points()
    return [Shelf(kind=index + 1, x=p.x, y=p.y) for index, p in enumerate(points)]


def reset_shelves(shelves: Iterable[Shelf], items: Iterable[int]) -> None:
    """Set each shelf's stock from ``items`` and clear its grid."""
    for shelf, count in zip(shelves, items):
        shelf.num = count
        shelf.clear()


def find_shelf(shelves: Iterable[Shelf], kind: int) -> Shelf | None:
    """Return the first shelf of this cargo type, or None."""
    return next((shelf for shelf in shelves if shelf.kind == kind), None)


def can_simulate(robot_count: int, items: Sequence[int]) -> bool:
    """A simulation needs at least one robot and at least one item."""
    return robot_count != 0 and any(count != 0 for count in items[:3])


def pick_cargo(remaining: Sequence[int], rng: random.Random | None = None) -> int:
    """Pick a random cargo type (1-3) among those with items left; 0 if none."""
    rng = rng or random.Random()
    if not any(count > 0 for count in remaining[:3]):
        return 0
    while True:
        index = rng.randrange(3)
        if remaining[index] > 0:
            return index + 1