"""Fixed dimensions of a ten-pin game."""

FRAME_COUNT = 10
PIN_COUNT = 10
FIRST_FRAME = 0
LAST_FRAME = FRAME_COUNT - 1
