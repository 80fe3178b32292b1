from __future__ import annotations
from dataclasses import dataclass
from typing import Callable

from othello.game.errors import GameQuit, NoLegalMovesError
from othello.game.state import GameState
from othello.types import Coord
from othello.ui.prompts import parse_move


@dataclass(slots=True)
class HumanAgent:
    """
    Reads moves from the terminal until one of the offered legal moves is given.
    ``input_fn``/``output_fn`` are swappable so tests can script a player.
    """
    name: str = "Human"
    input_fn: Callable[[str], str] = input
    output_fn: Callable[[str], None] = print

    def choose_move(self, state: GameState) -> Coord:
        if not state.legal_moves:
            raise NoLegalMovesError("No valid moves.")

        while True:
            try:
                raw = self.input_fn("Choose where to place piece: ")
            except EOFError:
                raise GameQuit("Game quit.") from None

            try:
                move = parse_move(raw)
            except ValueError as e:
                self.output_fn(str(e))
                continue

            if move is None:
                raise GameQuit("Game quit.")
            if move not in state.legal_moves:
                self.output_fn("You cannot move there")
                continue
            return move
