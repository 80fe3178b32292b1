from __future__ import annotations

import logging
from typing import Optional

from othello.ai.base import Agent
from othello.game.actions import coord_name
from othello.game.engine import Game
from othello.game.errors import GameQuit
from othello.game.results import GameResult
from othello.types import Player
from othello.ui.colors import Palette
from othello.ui.render import render, render_result

logger = logging.getLogger(__name__)


def _agent_name(agent: Agent, fallback: str) -> str:
    name = getattr(agent, "name", None)
    if not name:
        return fallback
    return str(name)


def _status_with_agents(status: str, agent_black: Agent, agent_white: Agent) -> str:
    """
    Prepend a persistent header showing who plays X and O.
    """
    x_name = _agent_name(agent_black, "Player X")
    o_name = _agent_name(agent_white, "Player O")

    header = f"X: {x_name} | O: {o_name}"
    if status:
        return f"{header}\n{status}"
    return header


def run_game(
    agent_black: Agent,
    agent_white: Agent,
    *,
    palette: Optional[Palette] = None,
    game: Optional[Game] = None,
) -> Optional[GameResult]:
    """
    Interactive loop: render, ask the side to move for a move, apply it.
    Returns the final result, or None if a human quit.
    """
    game = game or Game()
    status = game.state.last_status

    while True:
        if game.is_over:
            result = game.result()
            logger.info("Game over after %d moves: %s", game.move_count, result.describe())
            render_result(
                game.state,
                result,
                palette,
                _status_with_agents("Game over!", agent_black, agent_white),
            )
            return result

        render(game.state, palette, _status_with_agents(status, agent_black, agent_white))

        agent = agent_black if game.current is Player.BLACK else agent_white
        mover = game.current

        try:
            move = game.request_ai_move(agent)
            game.submit(move)
        except GameQuit:
            logger.info("%s quit the game", _agent_name(agent, mover.label))
            render(game.state, palette, _status_with_agents("Game quit.", agent_black, agent_white))
            return None

        status = f"{_agent_name(agent, mover.label)} ({mover.value}) chose {coord_name(move)}"
        info = getattr(agent, "last_info", None)
        if info:
            status += f" | nodes={info.get('nodes')} | best={info.get('eval')} | {info.get('time_ms')}ms"
        if game.state.skipped:
            status += f" | {game.state.last_status}"
