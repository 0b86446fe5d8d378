# pieces.py

from dataclasses import dataclass
from enum import IntEnum

import numpy as np

from constants import GRID_SIZE, NUM_ORIENTATIONS, SIDES, TILE_CATALOG


class Color(IntEnum):
    RED = 0
    GREEN = 1
    YELLOW = 2
    BLUE = 3


class BodyHalf(IntEnum):
    """Which half of a creature is printed on an edge."""
    HEAD = 0
    TAIL = 1

    def opposite(self):
        return BodyHalf.TAIL if self is BodyHalf.HEAD else BodyHalf.HEAD


@dataclass(frozen=True)
class EdgeLabel:
    color: Color
    half: BodyHalf

    def matches(self, other):
        """Two edges form a creature when the colors agree and the halves differ."""
        return self.color == other.color and self.half != other.half

    def as_code(self):
        return int(self.color), int(self.half)


@dataclass(frozen=True, eq=False)
class Tile:
    """A catalog tile in its canonical orientation.

    ``edges`` holds the labels for (up, right, down, left). Tiles compare and
    hash by ``id`` only, so a rotated copy is still the same tile.
    """
    id: int
    edges: tuple

    def __post_init__(self):
        if len(self.edges) != len(SIDES):
            raise ValueError(f"Tile {self.id} needs {len(SIDES)} edges, got {len(self.edges)}")

    def __eq__(self, other):
        if not isinstance(other, Tile):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    @property
    def up(self):
        return self.edges[0]

    @property
    def right(self):
        return self.edges[1]

    @property
    def down(self):
        return self.edges[2]

    @property
    def left(self):
        return self.edges[3]

    def edge(self, side, offset=0):
        """Edge shown on ``side`` after ``offset`` quarter turns."""
        return self.edges[(side - offset) % NUM_ORIENTATIONS]

    def rotate(self, steps=1):
        # new up = old left, new right = old up, ...
        return Tile(self.id, tuple(self.edge(side, steps) for side in SIDES))


def _parse_edge(pair):
    color, half = pair
    try:
        return EdgeLabel(Color[color.upper()], BodyHalf[half.upper()])
    except KeyError as e:
        raise ValueError(f"Unknown edge label {pair!r}") from e


def build_catalog(spec=TILE_CATALOG):
    """
    Converts the literal catalog structure ((id, up, right, down, left), ...)
    into Tile objects, keeping the catalog order. The catalog must fill the
    grid exactly once.
    """
    tiles = []
    seen_ids = set()
    for entry in spec:
        tile_id, *edges = entry
        if tile_id in seen_ids:
            raise ValueError(f"Duplicate tile id {tile_id} in catalog")
        seen_ids.add(tile_id)
        tiles.append(Tile(int(tile_id), tuple(_parse_edge(edge) for edge in edges)))

    if len(tiles) != GRID_SIZE ** 2:
        raise ValueError(f"Catalog needs {GRID_SIZE ** 2} tiles, got {len(tiles)}")
    return tuple(tiles)


def generate_tile_edges(catalog):
    # Array of shape (tile, orientation, side, [color, half])
    tile_edges = np.zeros((len(catalog), NUM_ORIENTATIONS, len(SIDES), 2), dtype=np.int8)

    for index, tile in enumerate(catalog):
        base_edges = np.array([edge.as_code() for edge in tile.edges], dtype=np.int8)

        # A quarter turn is a roll by one along the side axis
        for orientation in range(NUM_ORIENTATIONS):
            tile_edges[index, orientation] = np.roll(base_edges, shift=orientation, axis=0)
    return tile_edges
