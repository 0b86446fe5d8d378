# constants.py

# Side indices used everywhere a tile edge or a neighbor direction is addressed.
# One rotation step moves the edge on side s to side (s + 1) % 4.
UP, RIGHT, DOWN, LEFT = 0, 1, 2, 3
SIDES = (UP, RIGHT, DOWN, LEFT)
SIDE_NAMES = ("up", "right", "down", "left")

# Side of the neighboring tile that touches each side of a tile
OPPOSITE_SIDE = {UP: DOWN, RIGHT: LEFT, DOWN: UP, LEFT: RIGHT}

# (row, col) step to reach the neighbor on each side
SIDE_OFFSETS = {
    UP: (-1, 0),
    RIGHT: (0, 1),
    DOWN: (1, 0),
    LEFT: (0, -1),
}

NUM_ORIENTATIONS = 4

# --- Grid geometry ---
# The puzzle is 3x3, the board keeps an empty ring around it (5x5)
GRID_SIZE = 3
BOARD_SIZE = GRID_SIZE + 2
INTERIOR = range(1, GRID_SIZE + 1)
CENTER = (2, 2)

# --- Tile catalog ---
# (id, up, right, down, left), every edge is a (color, half) pair
TILE_CATALOG = (
    (1, ("yellow", "tail"), ("green", "tail"), ("green", "head"), ("blue", "head")),
    (2, ("red", "head"), ("red", "head"), ("yellow", "tail"), ("green", "head")),
    (3, ("red", "tail"), ("green", "tail"), ("blue", "head"), ("blue", "head")),
    (4, ("red", "head"), ("green", "tail"), ("red", "head"), ("yellow", "tail")),
    (5, ("yellow", "head"), ("blue", "tail"), ("blue", "head"), ("red", "head")),
    (6, ("yellow", "head"), ("red", "head"), ("blue", "head"), ("red", "tail")),
    (7, ("green", "tail"), ("green", "tail"), ("yellow", "head"), ("red", "head")),
    (8, ("red", "tail"), ("yellow", "tail"), ("red", "tail"), ("blue", "tail")),
    (9, ("green", "head"), ("blue", "head"), ("yellow", "head"), ("red", "tail")),
)

# --- Solution export ---
CHUNK_SIZE = 100_000
OUTPUT_DIR = "generated_solutions"
BASE_NAME = "tiling_solutions"
