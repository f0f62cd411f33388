from __future__ import annotations

from typing import Iterable, List

from termsnake.errors import InvariantViolation
from termsnake.geometry import Direction, Point, relative

DEFAULT_DEATH_PENALTY = 3


class Snake:
    """A snake on the board.

    points: tail at index 0, head at the end
    direction: heading used by the next stretch()
    death_penalty: subtracted from the score of a dead snake
    """

    def __init__(
        self,
        points: Iterable[Point],
        direction: Direction,
        death_penalty: int = DEFAULT_DEATH_PENALTY,
    ) -> None:
        self._points: List[Point] = [Point(*p) for p in points]
        if not self._points:
            raise InvariantViolation("snake needs at least one point")
        for previous, current in zip(self._points, self._points[1:]):
            if abs(previous.x - current.x) + abs(previous.y - current.y) != 1:
                raise InvariantViolation(f"snake points {previous} and {current} are not adjacent")
        self.direction = direction
        self.death_penalty = death_penalty

    def __len__(self) -> int:
        return len(self._points)

    def __repr__(self) -> str:
        return f"Snake(points={self._points!r}, direction={self.direction.name})"

    @property
    def points(self) -> List[Point]:
        return list(self._points)

    def head(self) -> Point:
        if not self._points:
            raise InvariantViolation("snake has no head")
        return self._points[-1]

    def body(self) -> List[Point]:
        return self._points[:-1]

    def contains(self, point: Point) -> bool:
        return point in self._points

    def set_direction(self, requested: Direction) -> bool:
        # Turning back onto the neck is ignored.
        if len(self._points) > 1 and relative(self.head(), requested) == self._points[-2]:
            return False
        self.direction = requested
        return True

    def stretch(self) -> None:
        self._points.append(relative(self.head(), self.direction))

    def shrink(self) -> None:
        if len(self._points) <= 1:
            raise InvariantViolation("cannot shrink a snake of length 1")
        del self._points[0]

    def score(self, is_dead: bool = False) -> int:
        penalty = self.death_penalty if is_dead else 0
        return len(self._points) - 1 - penalty
