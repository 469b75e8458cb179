from .food import Food
from .game import GameStatus, SnakeGame
from .snake import Snake
from .state import Direction, InvalidOperationError, Position

__all__ = [
    "Direction",
    "Food",
    "GameStatus",
    "InvalidOperationError",
    "Position",
    "Snake",
    "SnakeGame",
]
