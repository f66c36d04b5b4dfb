import numpy as np
import pytest

from kwazam.core import COLUMNS, ROWS, Board, GameState, Player, Ram, is_valid_coordinate


def test_valid_coordinate_bounds() -> None:
    assert is_valid_coordinate(0, 0)
    assert is_valid_coordinate(COLUMNS - 1, ROWS - 1)
    assert not is_valid_coordinate(COLUMNS, 0)
    assert not is_valid_coordinate(0, ROWS)
    assert not is_valid_coordinate(-1, 3)
    assert not is_valid_coordinate(2, -1)


@pytest.mark.parametrize("col,row", [(5, 0), (0, 8), (-1, 0), (0, -1)])
def test_out_of_range_access_fails_fast(col, row) -> None:
    board = Board()
    with pytest.raises(IndexError):
        board.get_piece(col, row)
    with pytest.raises(IndexError):
        board.set_piece(col, row, None)


def test_set_and_get_piece() -> None:
    board = Board()
    ram = Ram(3, 4, Player("P1", 0))
    board.set_piece(3, 4, ram)

    assert board.get_piece(3, 4) is ram
    assert board.is_occupied(3, 4)
    assert board.tile(3, 4).position == (3, 4)

    board.set_piece(3, 4, None)
    assert not board.is_occupied(3, 4)


def test_occupancy_and_kinds_for_start_position() -> None:
    state = GameState()
    owners = state.board.occupancy()
    kinds = state.board.kinds()

    assert owners.shape == (ROWS, COLUMNS)
    assert np.count_nonzero(owners == 1) == 10
    assert np.count_nonzero(owners == 2) == 10
    np.testing.assert_array_equal(owners[2:6], np.zeros((4, COLUMNS), dtype=np.int8))
    assert list(kinds[7]) == ["Xor", "Biz", "Sau", "Biz", "Tor"]
    assert list(kinds[0]) == ["Tor", "Biz", "Sau", "Biz", "Xor"]


def test_clear_empties_every_tile() -> None:
    state = GameState()
    state.board.clear()
    assert not state.board.occupancy().any()
