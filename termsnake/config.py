from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from termsnake.board import Board
from termsnake.geometry import Direction, Point
from termsnake.snake import DEFAULT_DEATH_PENALTY, Snake

ARROW_KEYS: Dict[str, Direction] = {
    "UP": Direction.UP,
    "DOWN": Direction.DOWN,
    "LEFT": Direction.LEFT,
    "RIGHT": Direction.RIGHT,
}

WASD_KEYS: Dict[str, Direction] = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}

SINGLE_PLAYER_PENALTY = DEFAULT_DEATH_PENALTY
TWO_PLAYER_PENALTY = 4

SNAKE_GLYPH = "██"
EGG_GLYPH = "◖◗"
BORDER_GLYPH = "██"
EMPTY_GLYPH = "  "


@dataclass
class PlayerConfig:
    start: Point
    direction: Direction
    keys: Dict[str, Direction]
    glyph: str = SNAKE_GLYPH


@dataclass
class GameConfig:
    width: int = 20
    height: int = 15
    food_count: int = 2
    steps_per_second: int = 10
    reads_per_step: int = 20
    death_penalty: int = SINGLE_PLAYER_PENALTY
    quit_key: str = "q"
    egg_glyph: str = EGG_GLYPH
    border_glyph: str = BORDER_GLYPH
    empty_glyph: str = EMPTY_GLYPH
    check_heads_before_move: bool = True
    players: List[PlayerConfig] = field(default_factory=list)

    @property
    def cycle_seconds(self) -> float:
        return 1.0 / self.steps_per_second / self.reads_per_step

    def key_map(self) -> Dict[str, tuple]:
        """Key name -> (player index, direction) across all players."""
        mapping = {}
        for index, player in enumerate(self.players):
            for key, direction in player.keys.items():
                mapping[key] = (index, direction)
        return mapping

    def make_board(self, rng: Optional[random.Random] = None) -> Board:
        snakes = [
            Snake([player.start], player.direction, death_penalty=self.death_penalty)
            for player in self.players
        ]
        return Board(
            self.width,
            self.height,
            snakes,
            food_count=self.food_count,
            rng=rng,
            check_heads_before_move=self.check_heads_before_move,
        )


def single_player(width: int = 20, height: int = 15) -> GameConfig:
    return GameConfig(
        width=width,
        height=height,
        death_penalty=SINGLE_PLAYER_PENALTY,
        players=[PlayerConfig(start=Point(0, 0), direction=Direction.RIGHT, keys=dict(ARROW_KEYS))],
    )


def two_player(width: int = 20, height: int = 15) -> GameConfig:
    return GameConfig(
        width=width,
        height=height,
        death_penalty=TWO_PLAYER_PENALTY,
        players=[
            PlayerConfig(start=Point(0, 0), direction=Direction.RIGHT, keys=dict(WASD_KEYS)),
            PlayerConfig(
                start=Point(width - 1, height - 1),
                direction=Direction.LEFT,
                keys=dict(ARROW_KEYS),
            ),
        ],
    )


def for_mode(multiplayer: bool) -> GameConfig:
    return two_player() if multiplayer else single_player()
