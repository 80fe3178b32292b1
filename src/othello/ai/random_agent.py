from __future__ import annotations
import random
from dataclasses import dataclass, field

from othello.ai.pacing import Pacing, no_pacing
from othello.game.errors import NoLegalMovesError
from othello.game.state import GameState
from othello.types import Coord


@dataclass(slots=True)
class RandomAgent:
    name: str = "Random AI"
    rng: random.Random = field(default_factory=random.Random)
    pacing: Pacing = no_pacing

    def choose_move(self, state: GameState) -> Coord:
        moves = state.legal_moves
        if not moves:
            raise NoLegalMovesError("No valid moves.")
        self.pacing(self.name)
        return self.rng.choice(moves)
