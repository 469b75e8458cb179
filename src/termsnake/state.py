from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class InvalidOperationError(RuntimeError):
    """Raised when a finished snake or game is asked to keep playing."""


class Direction(Enum):
    # value: (d_row, d_col)
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def opposite(self) -> Direction:
        d_row, d_col = self.value
        return Direction((-d_row, -d_col))


class Position(NamedTuple):
    row: int
    col: int

    def offset_rows(self, n: int) -> Position:
        return Position(self.row + n, self.col)

    def offset_cols(self, n: int) -> Position:
        return Position(self.row, self.col + n)

    def step(self, direction: Direction) -> Position:
        if not isinstance(direction, Direction):
            raise TypeError(f"expected a Direction, got {direction!r}")
        d_row, d_col = direction.value
        return self.offset_rows(d_row).offset_cols(d_col)
