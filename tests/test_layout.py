import pytest

from warehousesim.layout import (
    Obstacle,
    Point,
    default_lifts,
    default_obstacles,
    default_path_points,
    default_shelf_points,
)


def test_obstacle_table_matches_map():
    obstacles = default_obstacles()
    assert len(obstacles) == 6
    assert obstacles[0] == Obstacle(386, 691, 640, 751)
    assert obstacles[4] == Obstacle(384, 44, 640, 104)
    assert obstacles[5] == Obstacle(0, 0, 100, 50)


def test_obstacles_are_well_formed():
    for obs in default_obstacles():
        assert obs.x1 < obs.x2
        assert obs.y1 < obs.y2


def test_overlap_inside():
    obs = Obstacle(10, 10, 20, 20)
    assert obs.overlaps(12, 12, 18, 18) is True
    assert obs.overlaps(0, 0, 11, 11) is True


def test_touching_edges_do_not_overlap():
    obs = Obstacle(10, 10, 20, 20)
    assert obs.overlaps(20, 10, 30, 20) is False
    assert obs.overlaps(0, 10, 10, 20) is False
    assert obs.overlaps(10, 0, 20, 10) is False
    assert obs.overlaps(10, 20, 20, 30) is False


def test_overlap_is_symmetric():
    a = Obstacle(0, 0, 50, 50)
    b = Obstacle(25, 25, 75, 75)
    assert a.overlaps(b.x1, b.y1, b.x2, b.y2) == b.overlaps(a.x1, a.y1, a.x2, a.y2)


def test_charging_station_center():
    station = default_obstacles()[4]
    cx, cy = station.center
    assert station.x1 < cx < station.x2
    assert station.y1 < cy < station.y2


def test_shelf_points():
    assert default_shelf_points() == [Point(177, 231), Point(512, 231), Point(848, 231)]


def test_shelf_points_lie_inside_shelves():
    shelves = default_obstacles()[1:4]
    for point, shelf in zip(default_shelf_points(), shelves):
        assert shelf.x1 <= point.x <= shelf.x2
        assert shelf.y1 <= point.y <= shelf.y2


def test_lifts():
    lifts = default_lifts()
    assert len(lifts) == 4
    assert lifts[0] == Point(219, 398)
    assert all(lift.y == 398 for lift in lifts)


def test_path_points():
    points = default_path_points()
    assert len(points) == 10
    assert points[0] == Point(331, 641)
    assert points[8] == Point(780, 398)
    assert points[9] == Point(0, 0)


def test_point_is_immutable():
    point = Point(1, 2)
    with pytest.raises(AttributeError):
        point.x = 5
    assert point == Point(1, 2)
    assert point.x == 1