# warehousesim

A small simulation of an automated warehouse. Robots carry goods of three
kinds between an entrance, three shelves with lifts and a charging station.

## What is in the package

- `warehousesim.layout` – the fixed map: `default_obstacles()` (entrance,
  three shelves, charging station, return button), `default_shelf_points()`,
  `default_lifts()` and `default_path_points()` (ten slots, nine in use).
  `Obstacle.overlaps(x1, y1, x2, y2)` tests strict rectangle intersection.
- `warehousesim.fleet` – `CarrierRobot` and `PlannerRobot`, `create_fleet`,
  `to_planner_robots`, `copy_back`, `find_robot` and
  `PlannerRobot.set_target`.
- `warehousesim.shelves` – `Shelf` with a two-floor, five-column grid,
  `create_shelves`, `reset_shelves`, `find_shelf`, `can_simulate` and
  `pick_cargo`.
- `warehousesim.motion` – `MotionPlanner`, a potential-field planner with
  attraction to the target, repulsion from obstacles, borders and other
  robots, path smoothing, escape from local minima, collision checks and a
  charging state machine. Also `distance` and `round_half_away`.
- `warehousesim.manual` – `ManualRobot` stepping 8 pixels at a time,
  `Direction`, `blocked_direction`, `is_collision` and `lift_cargo_type`.
- `warehousesim.font` – `FontLibrary` reading glyphs from a 16×16 or 24×24
  GB2312 hanzi library and an 8×16 ASCII library, and `hanzi_offset`,
  `glyph_pixels`, `scale_pixels` and `rmb_symbol`, which return lists of lit
  `(x, y)` pixels.
- `warehousesim.users` – `UserStore`, accounts kept as "account password"
  lines in a text file, and `register_user`, which raises `UserError`.
- `warehousesim.lineedit` – `LineEditor`, a bounded text field that takes
  digits and letters (lowercasing capitals), backspace and Enter.
- `warehousesim.numfmt` – `format_int(value, radix)` for radixes 2 to 36.

## Installation

```
pip install .
```

Python 3.10 or later is required. The package has no runtime dependencies.

## Command line

```
warehousesim --help
warehousesim --robots 2 --targets 5 8 --log-dir logs --seed 1
```

Options:

- `--robots` – number of robots, 1 to 3 (default 1);
- `--targets` – one path point index per robot (default: points 5, 6 and 8,
  as many as there are robots);
- `--log-dir` – directory for `robot<id>.log` files, one `x,y` line per
  recorded position; existing `robot1.log` to `robot3.log` there are removed
  first;
- `--seed` – random seed for the planner.

At the end the command prints each robot's final position and battery.

## Library use

Running the planner:

```python
import random

from warehousesim.fleet import create_fleet, to_planner_robots
from warehousesim.layout import default_obstacles, default_path_points
from warehousesim.motion import MotionPlanner

fleet = create_fleet(2)
robots = to_planner_robots(fleet)
points = default_path_points()
for robot, point in zip(robots, points[5:]):
    robot.set_target(point.x, point.y)

planner = MotionPlanner(robots, default_obstacles(), random.Random(1))
steps = planner.run(2, lambda robot_id, x, y: print(robot_id, x, y))
```

The same run, with log files, is
`warehousesim.cli.run_simulation(robot_count, point_ids, log_dir, seed)`,
which returns the planner robots.

Shelf stock:

```python
from warehousesim.layout import default_shelf_points
from warehousesim.shelves import can_simulate, create_shelves, reset_shelves

items = [3, 0, 5]
shelves = create_shelves(default_shelf_points())
reset_shelves(shelves, items)
can_simulate(2, items)   # True
can_simulate(0, items)   # False
```

User accounts:

```python
from warehousesim.users import UserStore, register_user

password = "password"
store = UserStore("users.dat")
register_user(store, "alice", password, password)
store.authenticate("alice", password)   # True
```

## What the package does not do

There is no graphical interface: no screens, menus, mouse handling or
drawing. The font functions decode glyphs into pixel lists but draw nothing,
and no font files come with the package. Manual control is available as
`ManualRobot` and the zone checks only; there is no interactive keyboard loop
for it, and the command line runs automatic simulations only.

## Tests

```
pip install ".[test]"
pytest
```