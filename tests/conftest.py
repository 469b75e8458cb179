from __future__ import annotations

import threading

import pytest

from termsnake.state import Position


class FakeRng:
    """Hands out the coordinates of ``positions`` in order via ``randint``."""

    def __init__(self, positions):
        self.values = [v for p in positions for v in p]
        self.calls = []

    def randint(self, low, high):
        self.calls.append((low, high))
        return self.values.pop(0)


class RecordingRenderer:
    def __init__(self):
        self.calls = []

    def clear_screen(self):
        self.calls.append(("clear",))

    def draw_glyph(self, position, glyph, color):
        self.calls.append(("draw", position, glyph, color))

    def reset_cursor(self):
        self.calls.append(("reset",))

    def names(self):
        return [c[0] for c in self.calls]


class FakeKeys:
    """Replays ``keys`` then sets ``stop`` once they run out."""

    def __init__(self, keys, stop: threading.Event | None = None):
        self.keys = list(keys)
        self.stop = stop

    def key_available(self):
        if self.keys:
            return True
        if self.stop is not None:
            self.stop.set()
        return False

    def read_key(self):
        return self.keys.pop(0)


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def far_food():
    # Food well away from anything the tests walk over.
    return FakeRng([Position(15, 15)] * 10)
