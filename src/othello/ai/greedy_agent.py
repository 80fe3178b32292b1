
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import random
import time

from othello.ai.pacing import Pacing, no_pacing
from othello.core.rules import apply_move
from othello.game.errors import NoLegalMovesError
from othello.game.state import GameState
from othello.types import Coord, Player

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GreedyAgent:
    """
    1-ply greedy: play the move that leaves the mover with the most pieces.
    Knobs:
      - temperature: also accept near-best moves (count >= best - temperature);
        0 keeps only the maximal ones. Ties are broken uniformly with ``rng``.
      - pacing: called once per decision (spinner/sleep in the terminal UI)
    """
    name: str = "Greedy (1-ply)"
    temperature: int = 0
    rng: random.Random = field(default_factory=random.Random)
    pacing: Pacing = no_pacing

    last_info: dict = field(default_factory=dict)

    def choose_move(self, state: GameState) -> Coord:
        board = state.board
        me: Player = state.current

        moves = state.legal_moves
        if not moves:
            raise NoLegalMovesError("No valid moves.")

        self.pacing(self.name)
        start = time.perf_counter()

        scored: list[tuple[Coord, int]] = []
        for m in moves:
            after = apply_move(board, m, me)
            scored.append((m, after.count(me)))

        best = max(s for _, s in scored)
        threshold = best - max(0, int(self.temperature))
        candidates = [m for (m, s) in scored if s >= threshold]

        choice = self.rng.choice(candidates)

        elapsed = time.perf_counter() - start
        self.last_info = {
            "depth": 1,
            "nodes": len(scored),
            "eval": best,
            "candidates": len(candidates),
            "time_ms": max(1, int(elapsed * 1000)),
            "temperature": self.temperature,
        }
        logger.debug("%s: %d candidates at best count %d", self.name, len(candidates), best)
        return choice
