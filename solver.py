# solver.py

from dataclasses import dataclass

import numpy as np

from board import Board
from constants import CENTER, DOWN, LEFT, NUM_ORIENTATIONS, OPPOSITE_SIDE, RIGHT, UP
from pieces import BodyHalf, Color


class SearchInvariantError(RuntimeError):
    """Raised when tiles remain but no empty cell touches a placed tile."""


@dataclass(frozen=True)
class Restriction:
    color: Color
    half: BodyHalf
    position: int  # side of the tile being placed


def derive_restrictions(board, position, tile_edges):
    """
    Builds the edges a tile placed at ``position`` must show, one per
    occupied neighbor. The required half is the opposite of the neighbor's.
    """
    restrictions = []
    for side in (UP, DOWN, RIGHT, LEFT):
        placed = board.neighbor(position, side)
        if placed is None:
            continue
        tile_index, orientation = placed
        color, half = tile_edges[tile_index, orientation, OPPOSITE_SIDE[side]]
        restrictions.append(Restriction(Color(int(color)), BodyHalf(int(half)).opposite(), side))
    return restrictions


def find_candidates(restrictions, available_tiles, tile_edges):
    """Returns every (tile_index, orientation) pair satisfying all restrictions."""
    candidates = []
    for tile_index in available_tiles:
        matches = np.ones(NUM_ORIENTATIONS, dtype=bool)
        for restriction in restrictions:
            edges_on_side = tile_edges[tile_index, :, restriction.position]
            matches &= (edges_on_side[:, 0] == restriction.color) & (edges_on_side[:, 1] == restriction.half)

        for orientation in np.flatnonzero(matches):
            candidates.append((tile_index, int(orientation)))
    return candidates


def find_valid_tilings_generator(board, available_tiles, tile_edges):
    # Base case: every tile is on the board
    if not available_tiles:
        yield board.to_grid()
        return

    position = board.next_fillable_position()
    if position is None:
        raise SearchInvariantError(
            f"No fillable cell left while {len(available_tiles)} tiles remain"
        )

    restrictions = derive_restrictions(board, position, tile_edges)

    for tile_index, orientation in find_candidates(restrictions, available_tiles, tile_edges):
        board.place(position, tile_index, orientation)
        remaining = [t for t in available_tiles if t != tile_index]

        yield from find_valid_tilings_generator(board, remaining, tile_edges)

        # Backtrack
        board.remove(position)


def solve_for_center(center_index, tile_edges):
    """All solutions with tile ``center_index`` unrotated in the middle cell."""
    board = Board()
    board.place(CENTER, center_index, 0)
    available_tiles = [t for t in range(len(tile_edges)) if t != center_index]
    return list(find_valid_tilings_generator(board, available_tiles, tile_edges))
