import numpy as np
import pytest

from constants import DOWN, LEFT, RIGHT, SIDES, TILE_CATALOG, UP
from pieces import BodyHalf, Color, EdgeLabel, Tile, build_catalog, generate_tile_edges


def test_catalog_keeps_order_and_ids():
    catalog = build_catalog()
    assert [tile.id for tile in catalog] == list(range(1, 10))
    assert catalog[0].up == EdgeLabel(Color.YELLOW, BodyHalf.TAIL)
    assert catalog[0].left == EdgeLabel(Color.BLUE, BodyHalf.HEAD)


def test_rotate_remaps_sides_clockwise():
    tile = build_catalog()[0]
    rotated = tile.rotate()
    assert rotated.up == tile.left
    assert rotated.left == tile.down
    assert rotated.down == tile.right
    assert rotated.right == tile.up


def test_four_rotations_restore_every_edge():
    for tile in build_catalog():
        turned = tile
        for _ in range(4):
            turned = turned.rotate()
        assert turned.edges == tile.edges


def test_rotate_does_not_touch_the_original():
    tile = build_catalog()[1]
    edges_before = tile.edges
    tile.rotate(3)
    assert tile.edges == edges_before


def test_edge_lookup_agrees_with_rotate():
    for tile in build_catalog():
        for offset in range(4):
            rotated = tile.rotate(offset)
            for side in SIDES:
                assert tile.edge(side, offset) == rotated.edges[side]


def test_tiles_compare_by_id_only():
    tile = build_catalog()[4]
    assert tile.rotate() == tile
    assert hash(tile.rotate(2)) == hash(tile)
    assert tile != build_catalog()[5]


def test_matching_needs_same_color_and_opposite_half():
    red_head = EdgeLabel(Color.RED, BodyHalf.HEAD)
    red_tail = EdgeLabel(Color.RED, BodyHalf.TAIL)
    blue_tail = EdgeLabel(Color.BLUE, BodyHalf.TAIL)

    assert red_head.matches(red_tail)
    assert red_tail.matches(red_head)
    assert not red_head.matches(red_head)
    assert not red_head.matches(blue_tail)
    assert not blue_tail.matches(red_head)


def test_opposite_half():
    assert BodyHalf.HEAD.opposite() is BodyHalf.TAIL
    assert BodyHalf.TAIL.opposite() is BodyHalf.HEAD


def test_duplicate_ids_are_rejected():
    with pytest.raises(ValueError):
        build_catalog(TILE_CATALOG + (TILE_CATALOG[0],))


def test_unknown_color_is_rejected():
    bad = ((1, ("purple", "head"), ("red", "head"), ("red", "head"), ("red", "head")),)
    with pytest.raises(ValueError):
        build_catalog(bad)


def test_wrong_edge_count_is_rejected():
    with pytest.raises(ValueError):
        build_catalog(((1, ("red", "head"), ("red", "tail")),))


def test_tile_edges_table_matches_tile_model():
    catalog = build_catalog()
    tile_edges = generate_tile_edges(catalog)

    assert tile_edges.shape == (9, 4, 4, 2)
    assert tile_edges.dtype == np.int8
    for index, tile in enumerate(catalog):
        for offset in range(4):
            for side in (UP, RIGHT, DOWN, LEFT):
                assert tuple(tile_edges[index, offset, side]) == tile.edge(side, offset).as_code()


def test_short_catalog_is_rejected():
    with pytest.raises(ValueError, match="needs 9 tiles"):
        build_catalog(TILE_CATALOG[:8])


def test_long_catalog_is_rejected():
    extra = (10, ("red", "head"), ("green", "tail"), ("blue", "head"), ("yellow", "tail"))
    with pytest.raises(ValueError, match="needs 9 tiles"):
        build_catalog(TILE_CATALOG + (extra,))
