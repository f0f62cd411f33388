import random

from termsnake.geometry import Direction, Point, opposite, random_point, relative


def test_relative_offsets():
    origin = Point(3, 3)
    assert relative(origin, Direction.UP) == Point(3, 2)
    assert relative(origin, Direction.DOWN) == Point(3, 4)
    assert relative(origin, Direction.LEFT) == Point(2, 3)
    assert relative(origin, Direction.RIGHT) == Point(4, 3)


def test_relative_then_opposite_returns_to_start():
    for point in (Point(0, 0), Point(-2, 5), Point(7, -1)):
        for direction in Direction:
            assert relative(relative(point, direction), opposite(direction)) == point


def test_point_relative_matches_function():
    assert Point(1, 1).relative(Direction.LEFT) == relative(Point(1, 1), Direction.LEFT)


def test_random_point_stays_in_bounds():
    rng = random.Random(7)
    points = [random_point(4, 3, rng) for _ in range(200)]
    assert all(0 <= p.x < 4 and 0 <= p.y < 3 for p in points)
    assert len(set(points)) == 12


def test_random_point_is_reproducible_with_seed():
    first = [random_point(10, 10, random.Random(1)) for _ in range(3)]
    second = [random_point(10, 10, random.Random(1)) for _ in range(3)]
    assert first == second
