from __future__ import annotations

import curses
import threading
from typing import Protocol

from .state import Direction

KEY_DIRECTIONS = {
    curses.KEY_UP: Direction.UP,
    curses.KEY_DOWN: Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
    curses.KEY_RIGHT: Direction.RIGHT,
}


def direction_for_key(key: int) -> Direction | None:
    return KEY_DIRECTIONS.get(key)


class KeySource(Protocol):
    def key_available(self) -> bool: ...
    def read_key(self) -> int: ...


class CursesKeySource:
    """Non-blocking key reads from ``window``.

    ``getch`` refreshes an ordinary window, so pass a pad (``curses.newpad``)
    to keep polling from pushing half-drawn frames to the terminal.
    """

    def __init__(self, window: curses.window, lock: threading.Lock):
        self.window = window
        self.lock = lock
        with self.lock:
            self.window.nodelay(True)
            self.window.keypad(True)

    def key_available(self) -> bool:
        with self.lock:
            key = self.window.getch()
            if key == -1:
                return False
            curses.ungetch(key)
            return True

    def read_key(self) -> int:
        with self.lock:
            return self.window.getch()
