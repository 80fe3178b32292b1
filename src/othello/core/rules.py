from __future__ import annotations
from typing import Dict, List, Tuple

from othello.core.board import Board, Cell
from othello.game.errors import IllegalMoveError
from othello.types import Coord, Player

Direction = Tuple[int, int]

DIRECTIONS: Tuple[Direction, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def capture_run(board: Board, coord: Coord, direction: Direction, player: Player) -> List[Coord]:
    """
    Walk from ``coord`` (exclusive) along ``direction`` and return the run of
    opponent cells if a ``player`` cell closes it. Anything else (empty cell,
    board edge, own piece right next to ``coord``) gives an empty run.
    """
    opp = player.opposite
    dc, dr = direction
    run: List[Coord] = []
    c, r = coord[0] + dc, coord[1] + dr

    while Board.on_board((c, r)):
        owner = board.owner((c, r))
        if owner is opp:
            run.append((c, r))
        elif owner is player:
            return run
        else:
            break
        c, r = c + dc, r + dr

    return []


def is_legal_move(board: Board, coord: Coord, player: Player) -> bool:
    if not Board.on_board(coord) or not board.cell(coord).empty:
        return False
    return any(capture_run(board, coord, d, player) for d in DIRECTIONS)


def legal_moves(board: Board, player: Player) -> List[Coord]:
    return [coord for coord in board.coords() if is_legal_move(board, coord, player)]


def flips(board: Board, coord: Coord, player: Player) -> List[Coord]:
    # All directions read the same pre-move board, so runs never interact
    out: List[Coord] = []
    for d in DIRECTIONS:
        out.extend(capture_run(board, coord, d, player))
    return out


def apply_move(board: Board, coord: Coord, player: Player) -> Board:
    if not Board.on_board(coord) or not board.cell(coord).empty:
        raise IllegalMoveError(coord, player, "cell is not empty")

    captured = flips(board, coord, player)
    if not captured:
        raise IllegalMoveError(coord, player, "move captures nothing")

    changes: Dict[Coord, Cell] = {pos: Cell(player) for pos in captured}
    changes[coord] = Cell(player, last_move=True)
    return board.with_cells(changes, clear_last_move=True)
