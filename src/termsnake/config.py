TICK_RATE = 0.1  # seconds per game tick
POLL_INTERVAL = 0.01  # seconds between key polls

# Blink the final frame before exiting.
EPILOGUE_BLINKS = 3
EPILOGUE_DELAY = 0.5

INITIAL_LENGTH = 5

# Food lands anywhere in [0, FOOD_ROWS] x [0, FOOD_COLS], both ends inclusive.
FOOD_ROWS = 20
FOOD_COLS = 20

HEAD_GLYPH = "◉"
BODY_GLYPH = "■"
FOOD_GLYPH = "◉"
