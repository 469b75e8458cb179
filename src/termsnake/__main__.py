from __future__ import annotations

import curses
import locale
import threading

from .game import SnakeGame
from .keys import CursesKeySource
from .loop import run
from .render import CursesRenderer


def _play(stdscr: curses.window) -> None:
    curses.curs_set(0)
    lock = threading.Lock()
    renderer = CursesRenderer(stdscr, lock)
    # Keys come from a pad so polling never refreshes stdscr mid-frame.
    keys = CursesKeySource(curses.newpad(1, 1), lock)
    run(SnakeGame(), renderer, keys)


def main() -> None:
    # Needed for the unicode glyphs.
    locale.setlocale(locale.LC_ALL, "")
    curses.wrapper(_play)


if __name__ == "__main__":
    main()
