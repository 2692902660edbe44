"""Command line entry point: run an automatic warehouse simulation."""

from __future__ import annotations

import argparse
import os
import random
from collections.abc import Sequence
from contextlib import ExitStack
from pathlib import Path

from .fleet import PlannerRobot, copy_back, create_fleet, find_robot, to_planner_robots
from .layout import default_path_points
from .motion import MAX_ROBOTS, MotionPlanner

DEFAULT_TARGETS = (5, 6, 8)


def _log_path(log_dir: Path, robot_id: int) -> Path:
    return log_dir / f"robot{robot_id}.log"


def run_simulation(
    robot_count: int,
    point_ids: Sequence[int],
    log_dir: str | os.PathLike[str] | None = None,
    seed: int | None = None,
) -> list[PlannerRobot]:
    """Send robot ``i + 1`` to path point ``point_ids[i]`` and run the planner.

    With ``log_dir``, each robot's positions are written to ``robot<id>.log``
    as "x,y" lines; earlier logs are removed first. Returns the robots.
    """
    if not 1 <= robot_count <= MAX_ROBOTS:
        raise ValueError(f"robot count must be between 1 and {MAX_ROBOTS}, got {robot_count}")
    if len(point_ids) != robot_count:
        raise ValueError(f"expected {robot_count} target points, got {len(point_ids)}")
    points = default_path_points()
    for point_id in point_ids:
        if not 0 <= point_id < len(points):
            raise ValueError(f"no path point {point_id}")

    fleet = create_fleet(robot_count)
    robots = to_planner_robots(fleet)
    for robot_id, point_id in enumerate(point_ids, start=1):
        robot = find_robot(robots, robot_id)
        if robot is None:
            raise ValueError(f"no robot {robot_id}")
        point = points[point_id]
        robot.set_target(point.x, point.y)

    planner = MotionPlanner(robots, rng=random.Random(seed))
    with ExitStack() as stack:
        log = None
        if log_dir is not None:
            directory = Path(log_dir)
            directory.mkdir(parents=True, exist_ok=True)
            for robot_id in range(1, MAX_ROBOTS + 1):
                _log_path(directory, robot_id).unlink(missing_ok=True)
            handles = {
                robot.id: stack.enter_context(
                    _log_path(directory, robot.id).open("a", encoding="ascii")
                )
                for robot in robots
            }

            def log(robot_id: int, x: int, y: int) -> None:
                handles[robot_id].write(f"{x},{y}\n")

        planner.run(robot_count, log)

    copy_back(fleet, robots)
    return robots


def main(argv: Sequence[str] | None = None) -> int:
    """Run a simulation from the command line and print where the robots ended."""
    parser = argparse.ArgumentParser(
        prog="warehousesim", description="Simulate warehouse robots driving to path points."
    )
    parser.add_argument("--robots", type=int, default=1, help="number of robots (1-3)")
    parser.add_argument(
        "--targets", type=int, nargs="+", help="path point index for each robot"
    )
    parser.add_argument("--log-dir", help="directory for per-robot position logs")
    parser.add_argument("--seed", type=int, help="random seed")
    args = parser.parse_args(argv)

    targets = args.targets if args.targets is not None else list(DEFAULT_TARGETS[: args.robots])
    try:
        robots = run_simulation(args.robots, targets, args.log_dir, args.seed)
    except ValueError as exc:
        parser.error(str(exc))
    for robot in robots:
        print(f"robot {robot.id}: {robot.x},{robot.y} battery {robot.battery:.1f}")
    return 0