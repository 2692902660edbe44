"""Robot fleet: the carriers shown on the map and their motion-planning twins."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import IntEnum

HISTORY_SIZE = 5

SPAWN_X = 340
SPAWN_Y = 710
SPAWN_SPACING = 64
FULL_ENERGY = 100.0


class RobotState(IntEnum):
    """What a planner robot is doing."""

    WORKING = 0
    TO_CHARGER = 1
    CHARGING = 2


@dataclass
class CarrierRobot:
    """A robot as configured by the user.

    ``flag`` is 0 when the robot is empty, otherwise the cargo type it carries.
    """

    id: int
    x: int
    y: int
    flag: int = 0
    energy: float = FULL_ENERGY


@dataclass
class PlannerRobot:
    """A robot as driven by the motion planner."""

    id: int = 0
    x: int = 0
    y: int = 0
    tx: int = 0
    ty: int = 0
    orig_tx: int = 0
    orig_ty: int = 0
    prev_x: int = 0
    prev_y: int = 0
    hist_dx: list[int] = field(default_factory=lambda: [0] * HISTORY_SIZE)
    hist_dy: list[int] = field(default_factory=lambda: [0] * HISTORY_SIZE)
    hist_index: int = 0
    escape_count: int = 0
    same_pos_count: int = 0
    battery: float = 0.0
    cargo_type: int = 0
    reached: bool = False
    state: RobotState = RobotState.WORKING

    def set_target(self, tx: int, ty: int) -> None:
        """Send the robot to a new target and put it back to work."""
        self.tx = tx
        self.ty = ty
        self.orig_tx = tx
        self.orig_ty = ty
        self.state = RobotState.WORKING


def create_fleet(count: int) -> list[CarrierRobot]:
    """Create ``count`` empty, fully charged robots lined up at the spawn area."""
    if count < 0:
        raise ValueError(f"robot count cannot be negative, got {count}")
    return [
        CarrierRobot(id=index + 1, x=SPAWN_X - SPAWN_SPACING * index, y=SPAWN_Y)
        for index in range(count)
    ]


def to_planner_robots(fleet: Iterable[CarrierRobot]) -> list[PlannerRobot]:
    """Make a planner robot for each carrier, taking its id, position and energy."""
    return [
        PlannerRobot(id=robot.id, x=robot.x, y=robot.y, battery=robot.energy)
        for robot in fleet
    ]


def copy_back(fleet: Iterable[CarrierRobot], robots: Iterable[PlannerRobot]) -> None:
    """Write the planner robots' id, position and battery back onto the carriers."""
    for carrier, planned in zip(fleet, robots):
        carrier.id = planned.id
        carrier.x = planned.x
        carrier.y = planned.y
        carrier.energy = planned.battery


def find_robot(robots: Sequence[PlannerRobot], robot_id: int) -> PlannerRobot | None:
    """Return the first robot with this id, or None."""
    return next((robot for robot in robots if robot.id == robot_id), None)