"""Hand-driven robot: keyboard moves, collision gating and map zones."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from .layout import Obstacle, default_obstacles

STEP = 8
HALF_SIZE = 25
MOVE_COST = 0.1
CHARGE_RATE = 0.5
FULL_ENERGY = 100.0

START_X = 308
START_Y = 710

# (x range, cargo type) of the lift zones; all share the same y band.
_LIFT_BAND_Y = (355, 439)
_LIFT_ZONES = (
    ((219, 249), 1),
    ((441, 471), 2),
    ((555, 585), 2),
    ((777, 807), 3),
)


class Direction(IntEnum):
    """Movement directions, in the order they are checked for obstacles."""

    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4

    @property
    def delta(self) -> tuple[int, int]:
        """Offset of one step in this direction."""
        return {
            Direction.UP: (0, -STEP),
            Direction.DOWN: (0, STEP),
            Direction.LEFT: (-STEP, 0),
            Direction.RIGHT: (STEP, 0),
        }[self]


def is_collision(x1: int, y1: int, x2: int, y2: int, obstacle: Obstacle) -> bool:
    """Return True if the rectangle strictly intersects the obstacle."""
    return obstacle.overlaps(x1, y1, x2, y2)


def _swept_box(x: int, y: int, direction: Direction) -> tuple[int, int, int, int]:
    if direction is Direction.UP:
        return x - HALF_SIZE, y - (HALF_SIZE + STEP), x + HALF_SIZE, y + (HALF_SIZE - STEP)
    if direction is Direction.DOWN:
        return x - HALF_SIZE, y - (HALF_SIZE - STEP), x + HALF_SIZE, y + (HALF_SIZE + STEP)
    if direction is Direction.LEFT:
        return x - (HALF_SIZE + STEP), y - HALF_SIZE, x + (HALF_SIZE - STEP), y + HALF_SIZE
    return x - (HALF_SIZE - STEP), y - HALF_SIZE, x + (HALF_SIZE + STEP), y + HALF_SIZE


def blocked_direction(
    x: int, y: int, obstacles: Sequence[Obstacle] | None = None
) -> Direction | None:
    """Return the first direction (up, down, left, right) a step would collide in.

    Only the first blocked direction is reported; None if every way is free.
    """
    if obstacles is None:
        obstacles = default_obstacles()
    for direction in Direction:
        box = _swept_box(x, y, direction)
        if any(is_collision(*box, obstacle) for obstacle in obstacles):
            return direction
    return None


def lift_cargo_type(x: int, y: int) -> int:
    """Cargo type served by the lift zone at (x, y), or 0 outside every lift."""
    low_y, high_y = _LIFT_BAND_Y
    if not low_y <= y <= high_y:
        return 0
    for (low_x, high_x), kind in _LIFT_ZONES:
        if low_x <= x <= high_x:
            return kind
    return 0


@dataclass
class ManualRobot:
    """A robot steered by hand; ``flag`` is the cargo type carried, 0 if empty."""

    x: int = START_X
    y: int = START_Y
    flag: int = 0
    energy: float = FULL_ENERGY

    def move(self, direction: Direction) -> None:
        """Move one step in the direction, unconditionally."""
        dx, dy = Direction(direction).delta
        self.x += dx
        self.y += dy

    def try_move(
        self, direction: Direction, obstacles: Sequence[Obstacle] | None = None
    ) -> bool:
        """Step in the direction unless it is the blocked one; return whether it moved.

        A successful step costs energy.
        """
        direction = Direction(direction)
        if blocked_direction(self.x, self.y, obstacles) is direction:
            return False
        self.move(direction)
        self.energy -= MOVE_COST
        return True

    def in_charging_zone(self) -> bool:
        """Return True while the robot stands in front of the charging station."""
        return 386 < self.x < 640 and 92 < self.y < 210

    def at_entrance(self) -> bool:
        """Return True while the robot stands at the entrance."""
        return 386 < self.x < 640 and 661 < self.y < 751

    def charge(self) -> None:
        """Add one charging tick; a full battery is clamped to full."""
        if self.energy >= FULL_ENERGY:
            self.energy = FULL_ENERGY
        else:
            self.energy += CHARGE_RATE

    @property
    def depleted(self) -> bool:
        """True once the energy has run out."""
        return self.energy <= 0