"""Potential-field motion planning for the warehouse robots."""

from __future__ import annotations

import math
import random
from collections.abc import Callable, Sequence

from .fleet import HISTORY_SIZE, PlannerRobot, RobotState
from .layout import Obstacle, default_obstacles

ATTRACT_GAIN = 30.0
REPULSE_GAIN = 210.0
SOCIAL_GAIN = 140.0
REPULSE_RANGE = 100
SMOOTH_FACTOR = 0.3
RANDOM_ANGLE = 0.5
BORDER_REPULSE_GAIN = 500.0
BORDER_RANGE = 30

SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 768
ROBOT_SIZE = 50
STEP_BASE = 10
CHARGE_POWER = 30
CHARGE_SPEED = 0.5
MAX_ROBOTS = 3
MAX_STEPS = 500
IDLE_LIMIT = 100
ESCAPE_ATTEMPTS = 5

TARGET_RADIUS = 25
CHARGE_RADIUS = 50
DAMPING_FACTOR = 0.2

CHARGER_INDEX = 4
FULL_BATTERY = 100.0
_MIN_LENGTH = 0.001

PositionLog = Callable[[int, int, int], None]


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x2 - x1, y2 - y1)


def round_half_away(value: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    return float(math.floor(value + 0.5)) if value > 0.0 else float(math.ceil(value - 0.5))


def _normalise(dx: float, dy: float) -> tuple[float, float]:
    length = math.hypot(dx, dy)
    if length > _MIN_LENGTH:
        return dx / length, dy / length
    return dx, dy


class MotionPlanner:
    """Moves a group of robots towards their targets with attractive and repulsive forces."""

    def __init__(
        self,
        robots: Sequence[PlannerRobot],
        obstacles: Sequence[Obstacle] | None = None,
        rng: random.Random | None = None,
    ):
        self.robots = list(robots)
        self.obstacles = list(obstacles) if obstacles is not None else default_obstacles()
        self.rng = rng or random.Random()

    @property
    def charger_center(self) -> tuple[int, int]:
        """Centre of the charging station."""
        return self.obstacles[CHARGER_INDEX].center

    def check_collision(self, x: int, y: int, exclude_id: int) -> bool:
        """Return True if a robot centred at (x, y) would hit a border, obstacle or robot.

        The charging station does not count for the excluded robot while it charges.
        """
        half = ROBOT_SIZE // 2
        left, right, top, bottom = x - half, x + half, y - half, y + half
        if left < 0 or right > SCREEN_WIDTH or top < 0 or bottom > SCREEN_HEIGHT:
            return True

        is_charging = any(
            robot.id == exclude_id and robot.state == RobotState.CHARGING
            for robot in self.robots
        )
        for index, obstacle in enumerate(self.obstacles):
            if is_charging and index == CHARGER_INDEX:
                continue
            if obstacle.overlaps(left, top, right, bottom):
                return True

        return any(
            robot.id != exclude_id
            and abs(robot.x - x) < ROBOT_SIZE
            and abs(robot.y - y) < ROBOT_SIZE
            for robot in self.robots
        )

    def calculate_forces(self, robot: PlannerRobot) -> tuple[float, float]:
        """Return the unit direction of the net force acting on the robot."""
        fx, fy = float(robot.x), float(robot.y)
        dx = dy = 0.0

        target_dist = distance(robot.x, robot.y, robot.tx, robot.ty)
        if target_dist >= TARGET_RADIUS:
            att_factor = min(target_dist / 200.0, 1.0)
            dx += (robot.tx - fx) * ATTRACT_GAIN * att_factor
            dy += (robot.ty - fy) * ATTRACT_GAIN * att_factor

        for index, obstacle in enumerate(self.obstacles):
            if robot.state == RobotState.TO_CHARGER and index == CHARGER_INDEX:
                continue
            near_x = min(max(robot.x, obstacle.x1), obstacle.x2)
            near_y = min(max(robot.y, obstacle.y1), obstacle.y2)
            obs_dist = distance(robot.x, robot.y, near_x, near_y)
            if 0.0 < obs_dist < REPULSE_RANGE:
                rep_factor = 1.0 - obs_dist / REPULSE_RANGE
                dx += (fx - near_x) * REPULSE_GAIN * rep_factor / obs_dist
                dy += (fy - near_y) * REPULSE_GAIN * rep_factor / obs_dist

        if robot.x < BORDER_RANGE:
            dx += BORDER_REPULSE_GAIN * (1.0 - robot.x / BORDER_RANGE)
        if robot.x > SCREEN_WIDTH - BORDER_RANGE:
            dx -= BORDER_REPULSE_GAIN * (1.0 - (SCREEN_WIDTH - robot.x) / BORDER_RANGE)
        if robot.y < BORDER_RANGE:
            dy += BORDER_REPULSE_GAIN * (1.0 - robot.y / BORDER_RANGE)
        if robot.y > SCREEN_HEIGHT - BORDER_RANGE:
            dy -= BORDER_REPULSE_GAIN * (1.0 - (SCREEN_HEIGHT - robot.y) / BORDER_RANGE)

        for other in self.robots:
            if other.id == robot.id or other.state == RobotState.CHARGING:
                continue
            other_dist = distance(robot.x, robot.y, other.x, other.y)
            if 0.0 < other_dist < REPULSE_RANGE:
                social_factor = 1.0 - other_dist / REPULSE_RANGE
                dx += (fx - other.x) * SOCIAL_GAIN * social_factor / other_dist
                dy += (fy - other.y) * SOCIAL_GAIN * social_factor / other_dist

        return _normalise(dx, dy)

    def smooth_path(self, robot: PlannerRobot, dx: float, dy: float) -> tuple[float, float]:
        """Blend the direction with the robot's recent history; jitter it while escaping."""
        robot.hist_dx[robot.hist_index] = int(dx * 100.0)
        robot.hist_dy[robot.hist_index] = int(dy * 100.0)
        robot.hist_index = (robot.hist_index + 1) % HISTORY_SIZE

        avg_dx = sum(value / 100.0 for value in robot.hist_dx) / HISTORY_SIZE
        avg_dy = sum(value / 100.0 for value in robot.hist_dy) / HISTORY_SIZE

        dx = SMOOTH_FACTOR * avg_dx + (1 - SMOOTH_FACTOR) * dx
        dy = SMOOTH_FACTOR * avg_dy + (1 - SMOOTH_FACTOR) * dy
        dx, dy = _normalise(dx, dy)

        if robot.escape_count > 0:
            angle = (self.rng.randrange(100) - 50) * RANDOM_ANGLE
            cos_a, sin_a = math.cos(angle), math.sin(angle)
            dx, dy = dx * cos_a - dy * sin_a, dx * sin_a + dy * cos_a
        return dx, dy

    def should_teleport(self, robot: PlannerRobot) -> bool:
        """Return True if the robot is close enough to jump onto its goal."""
        if robot.state == RobotState.TO_CHARGER:
            cx, cy = self.charger_center
            return distance(robot.x, robot.y, cx, cy) <= CHARGE_RADIUS
        return distance(robot.x, robot.y, robot.tx, robot.ty) <= TARGET_RADIUS

    def move_towards(self, robot: PlannerRobot, dx: float, dy: float) -> None:
        """Advance the robot one step along (dx, dy), sidestepping when blocked."""
        step = float(STEP_BASE)
        target_dist = distance(robot.x, robot.y, robot.tx, robot.ty)

        if target_dist <= TARGET_RADIUS or (
            robot.state == RobotState.TO_CHARGER and target_dist <= CHARGE_RADIUS
        ):
            robot.x, robot.y = robot.tx, robot.ty
            robot.reached = True
            return

        if self.should_teleport(robot):
            if robot.state == RobotState.TO_CHARGER:
                goal = self.charger_center
            else:
                goal = (robot.tx, robot.ty)
            if not self.check_collision(goal[0], goal[1], robot.id):
                robot.x, robot.y = goal
                robot.reached = True
                return

        if robot.x == robot.prev_x and robot.y == robot.prev_y:
            robot.same_pos_count += 1
            if robot.same_pos_count > ESCAPE_ATTEMPTS:
                robot.escape_count = ESCAPE_ATTEMPTS * 2
                robot.tx = self.rng.randrange(SCREEN_WIDTH)
                robot.ty = self.rng.randrange(SCREEN_HEIGHT)
        else:
            robot.same_pos_count = 0

        if target_dist < 100.0:
            step *= 1.0 - DAMPING_FACTOR * (100.0 - target_dist) / 100.0
        if robot.state == RobotState.TO_CHARGER:
            step *= 1.2

        for i in range(1, 6):
            predict_x = robot.x + dx * step * i
            predict_y = robot.y + dy * step * i
            if self.check_collision(int(predict_x), int(predict_y), robot.id):
                step *= 0.6
                dx += (self.rng.randrange(100) - 50) * 0.01
                dy += (self.rng.randrange(100) - 50) * 0.01
                break

        final_x = int(round_half_away(robot.x + dx * step))
        final_y = int(round_half_away(robot.y + dy * step))

        if not self.check_collision(final_x, final_y, robot.id):
            robot.prev_x, robot.prev_y = robot.x, robot.y
            robot.x, robot.y = final_x, final_y
            robot.battery -= 0.1
            if robot.escape_count > 0:
                robot.escape_count -= 1
            return

        try_x = robot.x + int(dy * step)
        try_y = robot.y - int(dx * step)
        if not self.check_collision(try_x, try_y, robot.id):
            robot.x, robot.y = try_x, try_y
        else:
            try_x = robot.x - int(dy * step)
            try_y = robot.y + int(dx * step)
            if not self.check_collision(try_x, try_y, robot.id):
                robot.x, robot.y = try_x, try_y
        robot.escape_count += 1

    def handle_charging(self, robot: PlannerRobot) -> None:
        """Advance the robot's charging state machine."""
        if robot.reached:
            return
        cx, cy = self.charger_center
        charge_dist = distance(robot.x, robot.y, cx, cy)

        if robot.state == RobotState.TO_CHARGER:
            if charge_dist <= CHARGE_RADIUS:
                robot.state = RobotState.CHARGING
                robot.x, robot.y = cx, cy
        elif robot.state == RobotState.CHARGING:
            robot.battery += CHARGE_SPEED
            if robot.battery >= FULL_BATTERY:
                robot.battery = FULL_BATTERY
                robot.state = RobotState.WORKING
                robot.tx, robot.ty = robot.orig_tx, robot.orig_ty
        elif robot.battery < CHARGE_POWER:
            robot.state = RobotState.TO_CHARGER
            robot.orig_tx, robot.orig_ty = robot.tx, robot.ty
            robot.tx, robot.ty = cx, cy

        if robot.state == RobotState.CHARGING and robot.battery >= FULL_BATTERY:
            robot.reached = False

    def all_reached(self) -> bool:
        """Return True if every robot has reached its target."""
        return all(robot.reached for robot in self.robots)

    def reset_reached(self) -> None:
        """Clear every robot's arrival mark and put it back to work."""
        for robot in self.robots:
            robot.reached = False
            robot.state = RobotState.WORKING

    def run(self, robot_count: int, log: PositionLog | None = None) -> int:
        """Drive the robots until all arrive, they stall, or the step limit is hit.

        ``log`` receives (robot id, x, y) for every recorded position. Every
        robot ends on its target. Returns the number of steps simulated.
        """
        record = log or (lambda robot_id, x, y: None)
        steps = 0
        idle_steps = 0

        while steps < MAX_STEPS and not self.all_reached():
            steps += 1
            any_moved = False
            reached_count = 0

            for robot in self.robots:
                before = (robot.x, robot.y)
                if robot.state != RobotState.CHARGING:
                    dx, dy = self.calculate_forces(robot)
                    dx, dy = self.smooth_path(robot, dx, dy)
                    self.move_towards(robot, dx, dy)
                self.handle_charging(robot)
                record(robot.id, robot.x, robot.y)

                if (robot.x, robot.y) != before:
                    any_moved = True
                if (
                    robot.state == RobotState.WORKING
                    and distance(robot.x, robot.y, robot.tx, robot.ty) < STEP_BASE
                ):
                    robot.x, robot.y = robot.tx, robot.ty
                    robot.reached = True
                    reached_count += 1

            if not any_moved:
                idle_steps += 1
            if reached_count == robot_count or (not any_moved and idle_steps > IDLE_LIMIT):
                for robot in self.robots:
                    robot.x, robot.y = robot.tx, robot.ty
                    record(robot.id, robot.x, robot.y)
                self.reset_reached()
                break

        for robot in self.robots:
            robot.x, robot.y = robot.tx, robot.ty
            record(robot.id, robot.x, robot.y)
        return steps