"""Simulation constants. Row increases downward (gravity); col increases rightward."""

WORLD_WIDTH, WORLD_HEIGHT = 640, 480
SCALE = 10  # pixels per cell
FPS = 60
BACKGROUND = (0, 0, 0)

# Inclusive channel ranges for freshly placed sand.
SAND_RED = (200, 219)
SAND_GREEN = (170, 189)
SAND_BLUE = (60, 69)

# Settling offsets (drow, dcol) in priority order: down, down-left, down-right.
FALL_OFFSETS = [(1, 0), (1, -1), (1, 1)]
