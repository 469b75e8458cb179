from __future__ import annotations

import logging
import threading
import time

from . import config
from .game import SnakeGame
from .keys import KeySource
from .render import Renderer

logger = logging.getLogger(__name__)


def poll_keys(
    game: SnakeGame,
    keys: KeySource,
    stop: threading.Event,
    interval: float = config.POLL_INTERVAL,
) -> None:
    """Forward key presses to ``game`` until ``stop`` is set."""
    while not stop.is_set():
        if keys.key_available():
            game.on_key_press(keys.read_key())
        time.sleep(interval)


def play_epilogue(
    game: SnakeGame,
    renderer: Renderer,
    blinks: int = config.EPILOGUE_BLINKS,
    delay: float = config.EPILOGUE_DELAY,
) -> None:
    # Blink the final frame.
    for _ in range(blinks):
        renderer.clear_screen()
        renderer.reset_cursor()
        time.sleep(delay)
        game.render(renderer)
        time.sleep(delay)


def run(
    game: SnakeGame,
    renderer: Renderer,
    keys: KeySource,
    tick_rate: float = config.TICK_RATE,
    poll_interval: float = config.POLL_INTERVAL,
    epilogue_blinks: int = config.EPILOGUE_BLINKS,
    epilogue_delay: float = config.EPILOGUE_DELAY,
) -> None:
    """Tick ``game`` until it is over, then blink the last frame.

    Keys are polled on a background thread which is stopped and joined
    before returning, whether or not the game loop raised.
    """
    stop = threading.Event()
    poller = threading.Thread(
        target=poll_keys,
        args=(game, keys, stop, poll_interval),
        name="termsnake-keys",
        daemon=True,
    )
    poller.start()
    logger.debug("key poller started")

    try:
        while True:
            game.on_tick()
            game.render(renderer)
            time.sleep(tick_rate)
            if game.is_game_over:
                break

        logger.info("game over, snake length %d", len(game.snake))
        play_epilogue(game, renderer, epilogue_blinks, epilogue_delay)
    finally:
        stop.set()
        poller.join()
        logger.debug("key poller stopped")
