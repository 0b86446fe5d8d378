# analysis.py

from collections import Counter

from constants import DOWN, GRID_SIZE, LEFT, RIGHT, SIDE_OFFSETS, SIDES, UP
from pieces import BodyHalf, Color

STAT_KEYS = [f"{color.name.lower()}_creatures" for color in Color] + ["border_heads", "border_tails"]


def _edge(solution, r, c, side, tile_edges):
    tile_index, orientation = solution[r][c]
    color, half = tile_edges[tile_index, orientation, side]
    return int(color), int(half)


def _internal_seams():
    """Pairs of ((r, c, side), (r, c, side)) for the 12 seams of the grid."""
    seams = []
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            if c + 1 < GRID_SIZE:
                seams.append(((r, c, RIGHT), (r, c + 1, LEFT)))
            if r + 1 < GRID_SIZE:
                seams.append(((r, c, DOWN), (r + 1, c, UP)))
    return seams


def find_mismatched_seams(solution, tile_edges):
    """
    Lists the seams of a filled grid whose edges do not form a creature
    (different colors, or two heads / two tails).
    """
    mismatched = []
    for (r1, c1, s1), (r2, c2, s2) in _internal_seams():
        color1, half1 = _edge(solution, r1, c1, s1, tile_edges)
        color2, half2 = _edge(solution, r2, c2, s2, tile_edges)
        if color1 != color2 or half1 == half2:
            mismatched.append(((r1, c1), (r2, c2)))
    return mismatched


def is_board_valid(solution, tile_edges):
    cells = [cell for row in solution for cell in row]
    if any(cell is None for cell in cells):
        return False
    # Each tile may appear only once
    if len({tile_index for tile_index, _ in cells}) != len(cells):
        return False
    return not find_mismatched_seams(solution, tile_edges)


def calculate_solution_stats(solution, tile_edges):
    creatures = Counter()
    for (r, c, side), _ in _internal_seams():
        color, _half = _edge(solution, r, c, side, tile_edges)
        creatures[color] += 1

    border = Counter()
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            for side in SIDES:
                d_row, d_col = SIDE_OFFSETS[side]
                if 0 <= r + d_row < GRID_SIZE and 0 <= c + d_col < GRID_SIZE:
                    continue
                _color, half = _edge(solution, r, c, side, tile_edges)
                border[half] += 1

    stats = {f"{color.name.lower()}_creatures": creatures[int(color)] for color in Color}
    stats["border_heads"] = border[int(BodyHalf.HEAD)]
    stats["border_tails"] = border[int(BodyHalf.TAIL)]
    return stats
