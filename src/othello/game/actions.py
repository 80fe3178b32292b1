from __future__ import annotations
import logging
from typing import Optional

from othello.config import COLUMN_LETTERS
from othello.core.board import Board
from othello.core.rules import apply_move, legal_moves
from othello.game.errors import GameOverError, IllegalMoveError
from othello.game.state import GameState, Phase
from othello.types import Coord, Player

logger = logging.getLogger(__name__)


def coord_name(coord: Coord) -> str:
    return f"{COLUMN_LETTERS[coord[0]]}{coord[1] + 1}"


def resolve_turn(board: Board, player: Player, last_move: Optional[Coord] = None) -> GameState:
    """
    Decide who moves next on ``board`` when it is nominally ``player``'s turn.

    Both sides stuck -> TERMINAL. Only ``player`` stuck -> forced pass, the
    opponent gets the turn (SKIPPED). Otherwise ``player`` moves.
    """
    mine = legal_moves(board, player)
    theirs = legal_moves(board, player.opposite)

    if not mine and not theirs:
        logger.info("No legal moves for either side; game over")
        logger.debug("Final board:\n%s", "\n".join(board.rows()))
        return GameState(
            board=board,
            current=player,
            phase=Phase.TERMINAL,
            last_move=last_move,
            last_status="Game over!",
        )

    if not mine:
        logger.info("%s has no legal moves and passes", player.label)
        return GameState(
            board=board,
            current=player.opposite,
            legal_moves=tuple(theirs),
            phase=Phase.SKIPPED,
            passed=player,
            last_move=last_move,
            last_status=f"{player.label}'s turn was skipped because they had no valid moves.",
        )

    return GameState(
        board=board,
        current=player,
        legal_moves=tuple(mine),
        last_move=last_move,
        last_status=f"Player {player.value}'s turn.",
    )


def new_game(board: Optional[Board] = None, first: Player = Player.BLACK) -> GameState:
    return resolve_turn(board if board is not None else Board.initial(), first)


def play(state: GameState, coord: Coord) -> GameState:
    if state.terminal:
        raise GameOverError("The game is over; no more moves can be played.")
    if coord not in state.legal_moves:
        raise IllegalMoveError(coord, state.current, "not in the legal move set")

    logger.debug("%s plays %s", state.current.label, coord_name(coord))
    board = apply_move(state.board, coord, state.current)
    return resolve_turn(board, state.current.opposite, last_move=coord)
