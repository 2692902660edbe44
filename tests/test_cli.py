import pytest

from warehousesim.cli import main, run_simulation
from warehousesim.layout import default_path_points


def test_single_robot_reaches_nearby_point():
    robots = run_simulation(1, [0], seed=1)
    point = default_path_points()[0]
    assert (robots[0].x, robots[0].y) == (point.x, point.y)
    assert 90.0 < robots[0].battery < 100.0


def test_same_seed_is_deterministic():
    first = run_simulation(2, [5, 8], seed=7)
    second = run_simulation(2, [5, 8], seed=7)
    assert [(r.x, r.y, r.battery) for r in first] == [(r.x, r.y, r.battery) for r in second]


def test_logs_end_on_final_position(tmp_path):
    stale = tmp_path / "robot3.log"
    stale.write_text("1,1\n")
    robots = run_simulation(2, [0, 5], log_dir=tmp_path, seed=3)
    assert not stale.exists()
    for robot in robots:
        lines = (tmp_path / f"robot{robot.id}.log").read_text().splitlines()
        assert lines[-1] == f"{robot.x},{robot.y}"
        assert all(len(line.split(",")) == 2 for line in lines)


@pytest.mark.parametrize(
    "count, targets",
    [(0, []), (4, [0, 1, 2, 3]), (2, [0]), (1, [10]), (1, [-1])],
)
def test_invalid_arguments(count, targets):
    with pytest.raises(ValueError):
        run_simulation(count, targets)


def test_main_prints_positions(capsys):
    assert main(["--robots", "1", "--targets", "0", "--seed", "1"]) == 0
    point = default_path_points()[0]
    assert f"robot 1: {point.x},{point.y}" in capsys.readouterr().out


def test_main_rejects_bad_count():
    with pytest.raises(SystemExit) as info:
        main(["--robots", "5"])
    assert info.value.code == 2