from __future__ import annotations

import curses
from typing import Optional, Protocol

CURSES_KEYS = {
    curses.KEY_UP: "UP",
    curses.KEY_DOWN: "DOWN",
    curses.KEY_LEFT: "LEFT",
    curses.KEY_RIGHT: "RIGHT",
}


class Terminal(Protocol):
    def read_key(self) -> Optional[str]: ...

    def write_at(self, col: int, row: int, text: str) -> None: ...

    def clear(self) -> None: ...

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...

    def refresh(self) -> None: ...


class CursesTerminal:
    """Terminal backed by a curses window, meant to run under curses.wrapper."""

    def __init__(self, stdscr) -> None:
        self.stdscr = stdscr
        curses.raw()
        curses.noecho()
        self.stdscr.keypad(True)
        self.stdscr.nodelay(True)

    def read_key(self) -> Optional[str]:
        code = self.stdscr.getch()
        if code == -1:
            return None
        if code in CURSES_KEYS:
            return CURSES_KEYS[code]
        if 0 <= code < 256:
            return chr(code)
        return None

    def write_at(self, col: int, row: int, text: str) -> None:
        try:
            self.stdscr.addstr(row, col, text)
        except curses.error:
            pass  # off-screen

    def clear(self) -> None:
        self.stdscr.clear()

    def hide_cursor(self) -> None:
        try:
            curses.curs_set(0)
        except curses.error:
            pass  # terminal cannot hide the cursor

    def show_cursor(self) -> None:
        try:
            curses.curs_set(1)
        except curses.error:
            pass

    def refresh(self) -> None:
        self.stdscr.refresh()
