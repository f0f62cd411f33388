from __future__ import annotations

from typing import List

from termsnake.board import FOOD_CELL, SNAKE_CELL, Board
from termsnake.config import SNAKE_GLYPH, GameConfig
from termsnake.terminal import Terminal


def render_lines(board: Board, config: GameConfig) -> List[str]:
    """Board rows plus the bottom border; every cell is two columns wide."""
    grid = board.occupancy()
    glyphs = [player.glyph for player in config.players]
    lines = []
    for row in grid:
        cells = []
        for cell in row:
            if cell >= SNAKE_CELL:
                index = int(cell) - SNAKE_CELL
                cells.append(glyphs[index] if index < len(glyphs) else SNAKE_GLYPH)
            elif cell == FOOD_CELL:
                cells.append(config.egg_glyph)
            else:
                cells.append(config.empty_glyph)
        cells.append(config.border_glyph)
        lines.append("".join(cells))
    lines.append(config.border_glyph * (board.width + 1))
    return lines


class Renderer:
    def __init__(self, config: GameConfig) -> None:
        self.config = config

    def score_positions(self, board: Board) -> List[int]:
        # Player one on the left, player two anchored near the right edge.
        positions = [0]
        if len(board.snakes) > 1:
            positions.append(board.width * 2 - 1)
        return positions

    def draw(self, terminal: Terminal, board: Board) -> None:
        lines = render_lines(board, self.config)
        for row, line in enumerate(lines):
            terminal.write_at(0, row, line)

        score_row = len(lines)
        for col, score in zip(self.score_positions(board), board.scores()):
            terminal.write_at(col, score_row, str(score))
        terminal.refresh()
