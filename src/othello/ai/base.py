from __future__ import annotations
from typing import Protocol

from othello.game.state import GameState
from othello.types import Coord


class Agent(Protocol):
    name: str

    def choose_move(self, state: GameState) -> Coord:
        ...
