import random

import pytest

from othello.ai.random_agent import RandomAgent
from othello.core.board import Board
from othello.game.actions import coord_name, new_game, play, resolve_turn
from othello.game.engine import Game
from othello.game.errors import GameOverError, IllegalMoveError, InvariantViolation
from othello.game.results import GameResult, Outcome, result_for
from othello.game.state import Phase
from othello.types import Player


def test_new_game_offers_black_the_opening_moves():
    state = new_game()
    assert state.current is Player.BLACK
    assert state.phase is Phase.AWAITING_MOVE
    assert state.legal_moves == ((2, 3), (3, 2), (4, 5), (5, 4))
    assert state.passed is None


def test_play_switches_player_and_records_last_move():
    state = play(new_game(), (2, 3))
    assert state.current is Player.WHITE
    assert state.last_move == (2, 3)
    assert state.board.owner((3, 3)) is Player.BLACK
    assert not state.skipped


def test_play_rejects_moves_outside_the_legal_set():
    with pytest.raises(IllegalMoveError):
        play(new_game(), (0, 0))


def test_forced_pass_is_not_termination(black_must_pass_board):
    state = resolve_turn(black_must_pass_board, Player.BLACK)
    assert state.phase is Phase.SKIPPED
    assert state.skipped and not state.terminal
    assert state.current is Player.WHITE
    assert state.passed is Player.BLACK
    assert state.legal_moves == ((2, 0),)
    # no move was applied
    assert state.board == black_must_pass_board


def test_no_moves_for_either_side_terminates(dead_tie_board):
    state = resolve_turn(dead_tie_board, Player.BLACK)
    assert state.terminal
    assert state.legal_moves == ()
    assert result_for(state.board) == GameResult(Outcome.TIE, 1, 1)


def test_terminal_state_is_absorbing(dead_tie_board):
    state = resolve_turn(dead_tie_board, Player.WHITE)
    with pytest.raises(GameOverError):
        play(state, (1, 1))


def test_result_for_counts_pieces():
    board = Board.from_rows(["XXO....."] + ["........"] * 7)
    res = result_for(board)
    assert res.outcome is Outcome.BLACK_WINS
    assert res.winner is Player.BLACK
    assert res.margin == 1
    assert "Black" in res.describe()

    assert result_for(Board.from_rows(["XOO....."] + ["........"] * 7)).winner is Player.WHITE


def test_coord_name():
    assert coord_name((0, 0)) == "a1"
    assert coord_name((3, 2)) == "d3"
    assert coord_name((7, 7)) == "h8"


class TestGame:
    def test_queries_on_a_fresh_game(self):
        game = Game()
        assert game.board == Board.initial()
        assert game.current is Player.BLACK
        assert len(game.legal_moves) == 4
        assert not game.skipped
        assert game.passed is None
        assert not game.is_over
        assert game.move_count == 0

    def test_submit_advances(self):
        game = Game()
        game.submit((3, 2))
        assert game.current is Player.WHITE
        assert game.move_count == 1
        assert game.board.occupied() == 5

    def test_submit_illegal_keeps_state(self):
        game = Game()
        before = game.state
        with pytest.raises(IllegalMoveError):
            game.submit((7, 7))
        assert game.state is before
        assert game.move_count == 0

    def test_result_before_the_end_is_an_invariant_violation(self):
        with pytest.raises(InvariantViolation):
            Game().result()

    def test_forced_pass_then_end(self, black_must_pass_board):
        game = Game(board=black_must_pass_board)
        assert game.skipped
        assert game.passed is Player.BLACK
        assert game.current is Player.WHITE

        game.submit((2, 0))
        assert game.is_over
        res = game.result()
        assert res.outcome is Outcome.WHITE_WINS
        assert (res.black, res.white) == (0, 3)

        with pytest.raises(GameOverError):
            game.submit((3, 0))
        with pytest.raises(GameOverError):
            game.request_ai_move(RandomAgent())

    def test_full_game_between_random_agents(self):
        game = Game()
        black = RandomAgent(rng=random.Random(1))
        white = RandomAgent(rng=random.Random(2))

        while not game.is_over:
            agent = black if game.current is Player.BLACK else white
            before = game.board.occupied()
            game.step(agent)
            assert game.board.occupied() == before + 1

        res = game.result()
        assert res.black + res.white == game.board.occupied()
        assert game.move_count == game.board.occupied() - 4

    def test_agent_move_outside_the_legal_set_is_an_invariant_violation(self):
        class Stubborn:
            name = "Stubborn"

            def choose_move(self, state):
                return (0, 0)

        game = Game()
        with pytest.raises(InvariantViolation, match="Stubborn"):
            game.request_ai_move(Stubborn())
        assert game.move_count == 0
