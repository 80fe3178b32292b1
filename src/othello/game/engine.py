from __future__ import annotations
import logging
from typing import Optional, Tuple

from othello.ai.base import Agent
from othello.core.board import Board
from othello.game.actions import coord_name, new_game, play
from othello.game.errors import GameOverError, InvariantViolation
from othello.game.results import GameResult, result_for
from othello.game.state import GameState
from othello.types import Coord, Player

logger = logging.getLogger(__name__)


class Game:
    """
    Turn controller over a sequence of GameStates.

    Holds exactly one current state; every accepted move replaces it with the
    successor computed by ``play``. Renderers and input adapters talk to this
    object only.
    """

    def __init__(self, board: Optional[Board] = None, first: Player = Player.BLACK) -> None:
        self._state = new_game(board, first)
        self._moves = 0

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def current(self) -> Player:
        return self._state.current

    @property
    def legal_moves(self) -> Tuple[Coord, ...]:
        return self._state.legal_moves

    @property
    def skipped(self) -> bool:
        return self._state.skipped

    @property
    def passed(self) -> Optional[Player]:
        return self._state.passed

    @property
    def is_over(self) -> bool:
        return self._state.terminal

    @property
    def move_count(self) -> int:
        return self._moves

    def submit(self, coord: Coord) -> GameState:
        self._state = play(self._state, coord)
        self._moves += 1
        return self._state

    def request_ai_move(self, agent: Agent) -> Coord:
        if self.is_over:
            raise GameOverError("The game is over; no move to choose.")
        move = agent.choose_move(self._state)
        if move not in self._state.legal_moves:
            raise InvariantViolation(f"{agent.name} chose {move}, which is not a legal move")
        logger.debug("%s chose %s", agent.name, coord_name(move))
        return move

    def step(self, agent: Agent) -> GameState:
        return self.submit(self.request_ai_move(agent))

    def result(self) -> GameResult:
        if not self.is_over:
            raise GameOverError("The game is still in progress.")
        return result_for(self.board)
