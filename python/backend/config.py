"""Game constants shared by the engine and the frontends."""

# -- board --------------------------------------------------------------------

DEFAULT_SIZE = 4
MIN_SIZE = 2
MAX_SIZE = 8

# -- rules --------------------------------------------------------------------

MAX_PIECE = 2048  # reaching this tile ends the game

# -- spawning -----------------------------------------------------------------

START_TILES = 2
SPAWN_FOUR_PROBABILITY = 0.1
