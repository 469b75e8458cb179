from __future__ import annotations

import random
from dataclasses import dataclass

from . import config
from .render import Color, Renderer
from .state import Position


def random_position(rng: random.Random, rows: int, cols: int) -> Position:
    # randint is inclusive on both ends, so this covers (rows + 1) x (cols + 1)
    # cells and may land on the snake.
    return Position(rng.randint(0, rows), rng.randint(0, cols))


@dataclass(frozen=True)
class Food:
    position: Position

    @classmethod
    def place(
        cls,
        rng: random.Random,
        rows: int = config.FOOD_ROWS,
        cols: int = config.FOOD_COLS,
    ) -> Food:
        return cls(random_position(rng, rows, cols))

    def render(self, renderer: Renderer) -> None:
        renderer.draw_glyph(self.position, config.FOOD_GLYPH, Color.RED)
