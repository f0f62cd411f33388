from typing import Dict, List, Optional, Tuple

import pytest


class FakeTerminal:
    def __init__(self, keys: Optional[List[Optional[str]]] = None) -> None:
        self.keys = list(keys or [])
        self.cells: Dict[Tuple[int, int], str] = {}
        self.cleared = 0
        self.cursor_visible = True
        self.refreshes = 0

    def read_key(self) -> Optional[str]:
        if self.keys:
            return self.keys.pop(0)
        return None

    def write_at(self, col: int, row: int, text: str) -> None:
        self.cells[(col, row)] = text

    def clear(self) -> None:
        self.cleared += 1
        self.cells.clear()

    def hide_cursor(self) -> None:
        self.cursor_visible = False

    def show_cursor(self) -> None:
        self.cursor_visible = True

    def refresh(self) -> None:
        self.refreshes += 1


@pytest.fixture
def terminal():
    return FakeTerminal()
