from __future__ import annotations

from collections import deque

from . import config
from .render import Color, Renderer
from .state import Direction, InvalidOperationError, Position


class Snake:
    """Ordered body segments, head first.

    A snake starts as a single segment at ``spawn``; the remaining
    ``initial_length - 1`` segments appear one per move as pending growth.
    """

    def __init__(self, spawn: Position, initial_length: int = 1):
        self._body: deque[Position] = deque([spawn])
        self.pending_growth = max(0, initial_length - 1)
        self.dead = False

    @property
    def head(self) -> Position:
        return self._body[0]

    @property
    def body(self) -> tuple[Position, ...]:
        return tuple(self._body)

    def __len__(self) -> int:
        return len(self._body)

    def move(self, direction: Direction) -> None:
        if self.dead:
            raise InvalidOperationError("cannot move a dead snake")

        new_head = self.head.step(direction)

        # Checked against the full pre-move body, so the tail cell still counts.
        if new_head in self._body or not _on_board(new_head):
            self.dead = True
            return

        self._body.appendleft(new_head)
        if self.pending_growth > 0:
            self.pending_growth -= 1
        else:
            self._body.pop()

    def grow(self) -> None:
        if self.dead:
            raise InvalidOperationError("cannot grow a dead snake")
        self.pending_growth += 1

    def render(self, renderer: Renderer) -> None:
        head, *rest = self._body
        renderer.draw_glyph(head, config.HEAD_GLYPH, Color.GREEN)
        for segment in rest:
            renderer.draw_glyph(segment, config.BODY_GLYPH, Color.YELLOW)


def _on_board(position: Position) -> bool:
    return position.row >= 0 and position.col >= 0
