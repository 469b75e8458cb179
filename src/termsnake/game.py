from __future__ import annotations

import logging
import random
from enum import Enum

from . import config
from .food import Food
from .keys import direction_for_key
from .render import Renderer
from .snake import Snake
from .state import Direction, InvalidOperationError, Position

logger = logging.getLogger(__name__)

ORIGIN = Position(0, 0)


class GameStatus(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


class SnakeGame:
    """One snake chasing one piece of food.

    Key presses only buffer ``next_direction``; it is applied on the next
    tick, so presses between two ticks collapse to the last one.
    """

    def __init__(
        self,
        snake: Snake | None = None,
        direction: Direction = Direction.RIGHT,
        rng: random.Random | None = None,
    ):
        self.rng = rng if rng is not None else random.Random()
        self.snake = snake if snake is not None else Snake(ORIGIN, config.INITIAL_LENGTH)
        self.food = Food.place(self.rng)
        self.current_direction = direction
        self.next_direction = direction

    @property
    def is_game_over(self) -> bool:
        return self.snake.dead

    @property
    def status(self) -> GameStatus:
        return GameStatus.GAME_OVER if self.is_game_over else GameStatus.RUNNING

    def on_key_press(self, key: int) -> None:
        new_direction = direction_for_key(key)
        if new_direction is None:
            return
        # No 180 degree turns.
        if new_direction == self.current_direction.opposite:
            return
        self.next_direction = new_direction

    def on_tick(self) -> None:
        if self.is_game_over:
            raise InvalidOperationError("game is over")

        self.current_direction = self.next_direction
        self.snake.move(self.current_direction)

        if self.snake.dead:
            logger.info("snake died at length %d heading %s", len(self.snake), self.current_direction.name)
            return

        if self.snake.head == self.food.position:
            self.snake.grow()
            self.food = Food.place(self.rng)
            logger.debug("food eaten at %s, next food at %s", self.snake.head, self.food.position)

    def render(self, renderer: Renderer) -> None:
        renderer.clear_screen()
        self.snake.render(renderer)
        self.food.render(renderer)
        renderer.reset_cursor()
