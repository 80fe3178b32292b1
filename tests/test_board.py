import pytest

from othello.core.board import Board, Cell
from othello.core.scoring import count_pieces
from othello.types import Player


def test_player_opposite_is_an_involution():
    for p in Player:
        assert p.opposite is not p
        assert p.opposite.opposite is p


def test_initial_layout(initial_board):
    assert initial_board.owner((3, 3)) is Player.WHITE
    assert initial_board.owner((3, 4)) is Player.BLACK
    assert initial_board.owner((4, 3)) is Player.BLACK
    assert initial_board.owner((4, 4)) is Player.WHITE
    assert initial_board.occupied() == 4
    assert count_pieces(initial_board) == (2, 2)
    assert initial_board.last_move is None


def test_everything_else_starts_empty(initial_board):
    centre = {(3, 3), (3, 4), (4, 3), (4, 4)}
    for coord in initial_board.coords():
        if coord not in centre:
            assert initial_board.cell(coord).empty


def test_coords_are_column_major():
    coords = list(Board().coords())
    assert len(coords) == 64
    assert coords[:3] == [(0, 0), (0, 1), (0, 2)]
    assert coords[8] == (1, 0)


def test_from_rows_round_trips_through_rows(greedy_tie_board):
    assert greedy_tie_board.rows()[0] == "XOO....."
    assert greedy_tie_board.owner((1, 4)) is Player.WHITE
    assert Board.from_rows(greedy_tie_board.rows()) == greedy_tie_board


def test_from_rows_rejects_bad_shapes():
    with pytest.raises(ValueError):
        Board.from_rows(["XO"])


def test_with_cells_returns_new_board(initial_board):
    changed = initial_board.with_cells({(0, 0): Cell(Player.BLACK, last_move=True)})
    assert initial_board.cell((0, 0)).empty
    assert changed.owner((0, 0)) is Player.BLACK
    assert changed.last_move == (0, 0)

    cleared = changed.with_cells({(7, 7): Cell(Player.WHITE)}, clear_last_move=True)
    assert cleared.last_move is None
    assert cleared.owner((0, 0)) is Player.BLACK


def test_board_is_frozen(initial_board):
    with pytest.raises(AttributeError):
        initial_board.grid = ()


def test_counts_on_a_synthetic_board(greedy_tie_board):
    assert count_pieces(greedy_tie_board) == (3, 5)
    assert greedy_tie_board.occupied() == 8
