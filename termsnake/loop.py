from __future__ import annotations

import logging
import random
import time
from typing import Callable, Optional

from termsnake.board import Board, GameOverReport, StepResult
from termsnake.config import GameConfig
from termsnake.render import Renderer
from termsnake.terminal import Terminal

logger = logging.getLogger(__name__)


class GameLoop:
    """Samples input and renders every cycle, advances the board every `reads_per_step` cycles."""

    def __init__(
        self,
        config: GameConfig,
        terminal: Terminal,
        board: Optional[Board] = None,
        rng: Optional[random.Random] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config
        self.terminal = terminal
        self.board = board if board is not None else config.make_board(rng)
        self.renderer = Renderer(config)
        self.sleep = sleep
        self.keys = config.key_map()
        self.iteration = 0

    def handle_key(self, key: Optional[str]) -> bool:
        """Apply one key. Returns False when the quit key was pressed."""
        if key is None:
            return True
        if key == self.config.quit_key:
            return False
        binding = self.keys.get(key)
        if binding is not None:
            index, direction = binding
            self.board.set_direction(index, direction)
        return True

    def tick(self) -> Optional[StepResult]:
        """One cycle after the sleep. Returns the step result on simulation cycles."""
        self.iteration += 1
        result = None
        if self.iteration % self.config.reads_per_step == 0:
            result = self.board.step()
        self.renderer.draw(self.terminal, self.board)
        return result

    def run(self) -> Optional[GameOverReport]:
        logger.info(
            "Starting %d-player game on a %dx%d board",
            len(self.board.snakes),
            self.board.width,
            self.board.height,
        )
        self.terminal.clear()
        self.terminal.hide_cursor()
        try:
            while True:
                self.sleep(self.config.cycle_seconds)
                if not self.handle_key(self.terminal.read_key()):
                    logger.info("Quit after %d cycles", self.iteration)
                    return None
                result = self.tick()
                if result is not None and result.done:
                    logger.info("Game over after %d cycles", self.iteration)
                    return result.report
        finally:
            self.terminal.show_cursor()
