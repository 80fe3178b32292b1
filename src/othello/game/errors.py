from __future__ import annotations

from othello.types import Coord, Player


class OthelloError(Exception):
    pass


class IllegalMoveError(OthelloError, ValueError):
    def __init__(self, coord: Coord, player: Player, reason: str = "") -> None:
        self.coord = coord
        self.player = player
        self.reason = reason
        msg = f"Illegal move {coord} for {player.label}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class InvariantViolation(OthelloError, RuntimeError):
    """Programming error; never retried or shown as a status line."""


class NoLegalMovesError(InvariantViolation):
    pass


class GameOverError(InvariantViolation):
    pass


class GameQuit(OthelloError):
    pass
