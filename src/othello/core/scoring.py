from __future__ import annotations
from typing import Tuple

from othello.core.board import Board
from othello.types import Player


def count_pieces(board: Board) -> Tuple[int, int]:
    """(black, white) piece totals."""
    black = white = 0
    for col in board.grid:
        for cell in col:
            if cell.owner is Player.BLACK:
                black += 1
            elif cell.owner is Player.WHITE:
                white += 1
    return black, white
