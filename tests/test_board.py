import pytest

from board import Board
from constants import CENTER, DOWN, LEFT, RIGHT, UP


def test_new_board_is_empty():
    board = Board()
    assert all(board.is_empty(pos) for pos in board.interior_positions())
    assert board.next_fillable_position() is None
    assert not board.is_full()


def test_neighbor_lookup_returns_none_on_border():
    board = Board()
    board.place((1, 1), 0, 0)
    assert board.neighbor((1, 1), UP) is None
    assert board.neighbor((1, 1), LEFT) is None
    assert board.neighbor((1, 2), LEFT) == (0, 0)
    assert board.neighbor((2, 1), UP) == (0, 0)


def test_border_cells_cannot_be_assigned():
    board = Board()
    with pytest.raises(IndexError):
        board.place((0, 2), 1, 0)
    with pytest.raises(IndexError):
        board.place((2, 4), 1, 0)


def test_first_fillable_cell_after_seeding_center():
    board = Board()
    board.place(CENTER, 3, 0)
    # Row-major scan: (1, 2) is the first cell touching the center
    assert board.next_fillable_position() == (1, 2)


def test_fillable_cell_always_touches_a_placed_tile():
    board = Board()
    board.place(CENTER, 0, 0)
    tile_index = 1
    while True:
        position = board.next_fillable_position()
        if position is None:
            break
        assert board.is_empty(position)
        assert board.has_filled_neighbor(position)
        board.place(position, tile_index, 0)
        tile_index += 1

    assert board.is_full()
    assert tile_index == 9


def test_remove_and_initialize_clear_cells():
    board = Board()
    board.place(CENTER, 2, 3)
    assert board.get(CENTER) == (2, 3)
    board.remove(CENTER)
    assert board.get(CENTER) is None

    board.place((3, 3), 4, 1)
    board.initialize()
    assert board.get((3, 3)) is None


def test_to_grid_snapshot_is_independent():
    board = Board()
    board.place(CENTER, 5, 2)
    grid = board.to_grid()
    board.remove(CENTER)
    assert grid[1][1] == (5, 2)
    assert grid[0][0] is None


def test_neighbor_on_every_side_of_center():
    board = Board()
    board.place((1, 2), 0, 0)
    board.place((2, 3), 1, 1)
    board.place((3, 2), 2, 2)
    board.place((2, 1), 3, 3)
    assert board.neighbor(CENTER, UP) == (0, 0)
    assert board.neighbor(CENTER, RIGHT) == (1, 1)
    assert board.neighbor(CENTER, DOWN) == (2, 2)
    assert board.neighbor(CENTER, LEFT) == (3, 3)


def test_neighbor_past_the_border_is_none():
    board = Board()
    board.place((3, 2), 0, 0)
    assert board.neighbor((4, 2), DOWN) is None
    assert board.neighbor((4, 2), UP) == (0, 0)
    # No wrap-around through negative indices
    assert board.neighbor((0, 2), UP) is None
    assert board.get((-1, 2)) is None
    assert board.get((5, 5)) is None


def test_border_cells_cannot_be_cleared():
    board = Board()
    with pytest.raises(IndexError):
        board.remove((0, 0))
    with pytest.raises(IndexError):
        board.remove((4, 3))
