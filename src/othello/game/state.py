from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from othello.core.board import Board
from othello.types import Coord, Player


class Phase(str, Enum):
    AWAITING_MOVE = "awaiting_move"
    SKIPPED = "skipped"      # previous player had to pass; otherwise like AWAITING_MOVE
    TERMINAL = "terminal"


@dataclass(frozen=True, slots=True)
class GameState:
    board: Board
    current: Player
    legal_moves: Tuple[Coord, ...] = ()
    phase: Phase = Phase.AWAITING_MOVE
    passed: Optional[Player] = None
    last_move: Optional[Coord] = None
    last_status: str = "Player X starts."

    @property
    def terminal(self) -> bool:
        return self.phase is Phase.TERMINAL

    @property
    def skipped(self) -> bool:
        return self.phase is Phase.SKIPPED
