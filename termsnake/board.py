from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import numpy as np

from termsnake.errors import InvariantViolation
from termsnake.geometry import Direction, Point, random_point
from termsnake.snake import Snake

logger = logging.getLogger(__name__)

EMPTY_CELL = 0
FOOD_CELL = 1
SNAKE_CELL = 2  # snake i is stored as SNAKE_CELL + i


def player_name(index: int) -> str:
    return f"Player {index + 1}"


@dataclass
class GameOverReport:
    dead: List[bool]
    scores: List[int]
    winner: Optional[int]
    draw: bool

    @classmethod
    def from_snakes(cls, snakes: Sequence[Snake], dead: Sequence[bool]) -> "GameOverReport":
        dead = list(dead)
        scores = [snake.score(is_dead) for snake, is_dead in zip(snakes, dead)]
        if len(snakes) < 2:
            return cls(dead=dead, scores=scores, winner=None, draw=False)

        best = max(scores)
        leaders = [i for i, score in enumerate(scores) if score == best]
        survivors = [i for i in leaders if not dead[i]]
        if len(leaders) == 1:
            return cls(dead=dead, scores=scores, winner=leaders[0], draw=False)
        if len(survivors) == 1:
            return cls(dead=dead, scores=scores, winner=survivors[0], draw=False)
        # With three or more snakes, several surviving leaders also share a draw.
        return cls(dead=dead, scores=scores, winner=None, draw=True)

    def summary(self) -> str:
        fallen = [i for i, is_dead in enumerate(self.dead) if is_dead]
        if len(self.dead) == 2 and len(fallen) == 2:
            return "Both died"
        if len(fallen) == len(self.dead) and len(fallen) > 2:
            return "All died"
        if len(fallen) == 1:
            return f"{player_name(fallen[0])} died"
        return "Players " + ", ".join(str(i + 1) for i in fallen) + " died"

    def verdict(self) -> str:
        if self.draw:
            return "Draw"
        if self.winner is None:
            return ""
        return f"{player_name(self.winner)} wins"

    def lines(self) -> List[str]:
        if len(self.scores) == 1:
            return ["Game Over:", str(self.scores[0])]
        return [
            "Game Over:",
            self.summary(),
            self.verdict(),
            "____".join(str(score) for score in self.scores),
        ]


@dataclass
class StepResult:
    done: bool
    ate_food: List[bool] = field(default_factory=list)
    scores: List[int] = field(default_factory=list)
    report: Optional[GameOverReport] = None


class Board:
    def __init__(
        self,
        width: int,
        height: int,
        snakes: Sequence[Snake],
        food_count: int = 0,
        rng: Optional[random.Random] = None,
        check_heads_before_move: bool = True,
    ) -> None:
        if width <= 0 or height <= 0:
            raise InvariantViolation(f"board must have positive size, got {width}x{height}")
        if not snakes:
            raise InvariantViolation("board needs at least one snake")

        self.width = width
        self.height = height
        self.snakes: List[Snake] = list(snakes)
        self.food: List[Point] = []
        self.random = rng if rng is not None else random.Random()
        self.check_heads_before_move = check_heads_before_move
        self.report: Optional[GameOverReport] = None

        self.add_food(food_count)

    @property
    def done(self) -> bool:
        return self.report is not None

    def out_of_bounds(self, point: Point) -> bool:
        return not (0 <= point.x < self.width and 0 <= point.y < self.height)

    def contains_snake(self, point: Point) -> bool:
        return any(snake.contains(point) for snake in self.snakes)

    def contains_food(self, point: Point) -> bool:
        return point in self.food

    def contains_body(self, point: Point, index: int) -> bool:
        return point in self.snakes[index].body()

    def contains_other_snake(self, point: Point, index: int) -> bool:
        return any(
            snake.contains(point) for i, snake in enumerate(self.snakes) if i != index
        )

    def snake_at(self, point: Point) -> Optional[int]:
        for i, snake in enumerate(self.snakes):
            if snake.contains(point):
                return i
        return None

    def occupancy(self) -> np.ndarray:
        """Grid of shape (height, width): EMPTY_CELL, FOOD_CELL or SNAKE_CELL + index."""
        grid = np.zeros((self.height, self.width), dtype=np.int8)
        for x, y in self.food:
            grid[y, x] = FOOD_CELL
        for i, snake in enumerate(self.snakes):
            for point in snake.points:
                if not self.out_of_bounds(point):
                    grid[point.y, point.x] = SNAKE_CELL + i
        return grid

    def scores(self) -> List[int]:
        return [snake.score(False) for snake in self.snakes]

    def free_cells(self) -> int:
        return int(np.count_nonzero(self.occupancy() == EMPTY_CELL))

    def new_food_position(self) -> Point:
        if self.free_cells() == 0:
            raise InvariantViolation("no free cell left for food")
        while True:
            point = random_point(self.width, self.height, self.random)
            if not self.contains_food(point) and not self.contains_snake(point):
                return point

    def add_food(self, n: int) -> int:
        spawned = 0
        for _ in range(n):
            if self.free_cells() == 0:
                logger.warning("Board is full, spawned %d of %d food items", spawned, n)
                break
            self.food.append(self.new_food_position())
            spawned += 1
        return spawned

    def set_direction(self, index: int, direction: Direction) -> bool:
        if self.done:
            return False
        return self.snakes[index].set_direction(direction)

    def step(self) -> StepResult:
        if self.report is not None:
            return self._result([False] * len(self.snakes))

        if self.check_heads_before_move:
            crashed = self._coinciding_heads()
            if any(crashed):
                logger.debug("Heads already coincide before moving: %s", crashed)
                return self._game_over(crashed, [False] * len(self.snakes))

        for snake in self.snakes:
            snake.stretch()

        eaten: List[int] = []
        ate_food: List[bool] = []
        for i, snake in enumerate(self.snakes):
            head = snake.head()
            if head in self.food:
                eaten.append(self.food.index(head))
                ate_food.append(True)
                logger.debug("%s ate food at %s", player_name(i), head)
            else:
                snake.shrink()
                ate_food.append(False)

        dead = [self._died(i) for i in range(len(self.snakes))]

        if eaten:
            eaten_set = set(eaten)
            self.food = [p for i, p in enumerate(self.food) if i not in eaten_set]
            self.add_food(len(eaten_set))

        if any(dead):
            return self._game_over(dead, ate_food)
        return self._result(ate_food)

    def _died(self, index: int) -> bool:
        head = self.snakes[index].head()
        return (
            self.out_of_bounds(head)
            or self.contains_other_snake(head, index)
            or self.contains_body(head, index)
        )

    def _coinciding_heads(self) -> List[bool]:
        crashed = [False] * len(self.snakes)
        heads = [snake.head() for snake in self.snakes]
        for i in range(len(heads)):
            for j in range(i + 1, len(heads)):
                if heads[i] == heads[j]:
                    crashed[i] = crashed[j] = True
        return crashed

    def _game_over(self, dead: List[bool], ate_food: List[bool]) -> StepResult:
        self.report = GameOverReport.from_snakes(self.snakes, dead)
        logger.debug(
            "Game over: dead=%s scores=%s winner=%s draw=%s",
            self.report.dead,
            self.report.scores,
            self.report.winner,
            self.report.draw,
        )
        return self._result(ate_food)

    def _result(self, ate_food: List[bool]) -> StepResult:
        return StepResult(
            done=self.report is not None,
            ate_food=ate_food,
            scores=self.scores(),
            report=self.report,
        )
