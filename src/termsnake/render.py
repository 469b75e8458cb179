from __future__ import annotations

import curses
import threading
from enum import Enum
from typing import Protocol

from .state import Position


class Color(Enum):
    # value: curses color pair number
    GREEN = 1
    YELLOW = 2
    RED = 3


_CURSES_COLORS = {
    Color.GREEN: curses.COLOR_GREEN,
    Color.YELLOW: curses.COLOR_YELLOW,
    Color.RED: curses.COLOR_RED,
}


class Renderer(Protocol):
    def clear_screen(self) -> None: ...
    def draw_glyph(self, position: Position, glyph: str, color: Color) -> None: ...
    def reset_cursor(self) -> None: ...


class Renderable(Protocol):
    def render(self, renderer: Renderer) -> None: ...


class CursesRenderer:
    """Draws glyphs on a curses window.

    Only ``reset_cursor`` refreshes the window, so a frame reaches the
    terminal once it is complete as long as nothing else refreshes ``window``.
    Keys must therefore be read from a different window (see
    ``keys.CursesKeySource``). ``lock`` must be the same lock the key source
    uses, curses is not thread-safe.
    """

    def __init__(self, window: curses.window, lock: threading.Lock):
        self.window = window
        self.lock = lock
        curses.start_color()
        for color, curses_color in _CURSES_COLORS.items():
            curses.init_pair(color.value, curses_color, curses.COLOR_BLACK)

    def clear_screen(self) -> None:
        with self.lock:
            self.window.erase()

    def draw_glyph(self, position: Position, glyph: str, color: Color) -> None:
        with self.lock:
            height, width = self.window.getmaxyx()
            if position.row >= height or position.col >= width:
                return
            try:
                self.window.addstr(position.row, position.col, glyph, curses.color_pair(color.value))
            except curses.error:
                # The glyph is written, but the cursor cannot advance past the last cell.
                if (position.row, position.col) != (height - 1, width - 1):
                    raise

    def reset_cursor(self) -> None:
        with self.lock:
            self.window.move(0, 0)
            self.window.refresh()
