# board.py

import numpy as np

from constants import BOARD_SIZE, INTERIOR, SIDE_OFFSETS, SIDES

EMPTY = -1


class Board:
    """
    5x5 grid of placements around the 3x3 puzzle. Each cell stores
    [tile_index, orientation], -1 marks an empty cell. The outer ring is never
    assigned, so every interior cell can look at its four neighbors without
    bounds checks.
    """
    def __init__(self):
        self.cells = np.full((BOARD_SIZE, BOARD_SIZE, 2), EMPTY, dtype=np.int8)

    def initialize(self):
        self.cells.fill(EMPTY)

    @staticmethod
    def is_interior(position):
        row, col = position
        return row in INTERIOR and col in INTERIOR

    @staticmethod
    def interior_positions():
        return [(r, c) for r in INTERIOR for c in INTERIOR]

    def is_empty(self, position):
        # The border ring and anything past it never hold a tile
        if not self.is_interior(position):
            return True
        row, col = position
        return self.cells[row, col, 0] == EMPTY

    def get(self, position):
        """Returns (tile_index, orientation) or None for an empty cell."""
        if self.is_empty(position):
            return None
        row, col = position
        tile_index, orientation = self.cells[row, col]
        return int(tile_index), int(orientation)

    def place(self, position, tile_index, orientation):
        if not self.is_interior(position):
            raise IndexError(f"Position {position} is outside the puzzle area")
        row, col = position
        self.cells[row, col] = (tile_index, orientation)

    def remove(self, position):
        if not self.is_interior(position):
            raise IndexError(f"Position {position} is outside the puzzle area")
        row, col = position
        self.cells[row, col] = EMPTY

    def neighbor(self, position, side):
        """Placement touching ``side`` of ``position``, None for empty, border or off-grid cells."""
        d_row, d_col = SIDE_OFFSETS[side]
        return self.get((position[0] + d_row, position[1] + d_col))

    def has_filled_neighbor(self, position):
        return any(self.neighbor(position, side) is not None for side in SIDES)

    def next_fillable_position(self):
        # Row-major scan; the first empty cell touching a placed tile wins
        for position in self.interior_positions():
            if self.is_empty(position) and self.has_filled_neighbor(position):
                return position
        return None

    def is_full(self):
        return all(not self.is_empty(position) for position in self.interior_positions())

    def to_grid(self):
        """Snapshot of the interior as a 3x3 list of (tile_index, orientation)."""
        return [[self.get((r, c)) for c in INTERIOR] for r in INTERIOR]
