from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from othello.core.board import Board
from othello.core.scoring import count_pieces
from othello.types import Player


class Outcome(str, Enum):
    BLACK_WINS = "X"
    WHITE_WINS = "O"
    TIE = "D"


@dataclass(frozen=True, slots=True)
class GameResult:
    outcome: Outcome
    black: int
    white: int

    @property
    def winner(self) -> Optional[Player]:
        if self.outcome is Outcome.BLACK_WINS:
            return Player.BLACK
        if self.outcome is Outcome.WHITE_WINS:
            return Player.WHITE
        return None

    @property
    def margin(self) -> int:
        return abs(self.black - self.white)

    def describe(self) -> str:
        if self.winner is None:
            return f"It's a tie! ({self.black}-{self.white})"
        return f"{self.winner.label} ({self.winner.value}) wins {max(self.black, self.white)}-{min(self.black, self.white)}!"


def result_for(board: Board) -> GameResult:
    black, white = count_pieces(board)
    if black > white:
        outcome = Outcome.BLACK_WINS
    elif white > black:
        outcome = Outcome.WHITE_WINS
    else:
        outcome = Outcome.TIE
    return GameResult(outcome, black, white)
