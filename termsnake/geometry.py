from __future__ import annotations

import random
from enum import Enum
from typing import NamedTuple, Optional, Tuple

Vec2 = Tuple[int, int]


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def offset(self) -> Vec2:
        return self.value


class Point(NamedTuple):
    x: int
    y: int

    def relative(self, direction: Direction) -> "Point":
        return relative(self, direction)


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def relative(point: Point, direction: Direction) -> Point:
    dx, dy = direction.offset
    return Point(point.x + dx, point.y + dy)


def opposite(direction: Direction) -> Direction:
    return _OPPOSITES[direction]


def random_point(width: int, height: int, rng: Optional[random.Random] = None) -> Point:
    source = rng if rng is not None else random
    return Point(source.randrange(width), source.randrange(height))
