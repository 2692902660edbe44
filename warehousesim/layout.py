"""Static warehouse map: obstacles, shelf anchors, lifts and path nodes."""

from __future__ import annotations

from dataclasses import dataclass

# Effective collision length used for lift collision checks.
ECLA = 30
# Effective collision width used for the entrance and the charging station.
ECLB = 32
# Distance between neighbouring cells of a shelf.
IL = 83

PATH_POINT_SLOTS = 10


@dataclass(frozen=True)
class Obstacle:
    """Axis-aligned rectangular obstacle given by two corners."""

    x1: int
    y1: int
    x2: int
    y2: int

    def overlaps(self, x1: int, y1: int, x2: int, y2: int) -> bool:
        """Return True if the rectangle strictly intersects this obstacle.

        Rectangles that only touch along an edge do not overlap.
        """
        return x1 < self.x2 and x2 > self.x1 and y1 < self.y2 and y2 > self.y1

    @property
    def center(self) -> tuple[int, int]:
        """Integer centre of the obstacle."""
        return (self.x1 + self.x2) // 2, (self.y1 + self.y2) // 2


@dataclass(frozen=True)
class Point:
    """A location on the map."""

    x: int
    y: int


def default_obstacles() -> list[Obstacle]:
    """Obstacles of the warehouse, in their fixed order.

    0: entrance/exit, 1-3: shelves of type one to three,
    4: charging station, 5: the on-screen return button.
    """
    return [
        Obstacle(386, 691, 640, 751),
        Obstacle(135, 188, 219, 607),
        Obstacle(471, 188, 555, 607),
        Obstacle(807, 188, 891, 607),
        Obstacle(384, 44, 640, 104),
        Obstacle(0, 0, 100, 50),
    ]


def default_shelf_points() -> list[Point]:
    """Anchor points of the three shelves, by shelf type."""
    return [Point(177, 231), Point(512, 231), Point(848, 231)]


def default_lifts() -> list[Point]:
    """Positions of the four lifts (shelf two has one on each side)."""
    return [Point(219, 398), Point(555, 398), Point(471, 398), Point(807, 398)]


def default_path_points() -> list[Point]:
    """Path nodes robots can be sent to.

    The table has ten slots; the last one is unused and stays at the origin.
    """
    points = [
        Point(331, 641),  # in front of the robot spawn area
        Point(427, 665),  # entrance, left
        Point(600, 665),  # entrance, right
        Point(427, 132),  # charging station, left
        Point(600, 132),  # charging station, right
        Point(245, 398),  # shelf one lift
        Point(443, 398),  # shelf two lift, left
        Point(581, 398),  # shelf two lift, right
        Point(780, 398),  # shelf three lift
    ]
    points.extend(Point(0, 0) for _ in range(PATH_POINT_SLOTS - len(points)))
    return points