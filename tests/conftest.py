"""Shared fixtures for the othello tests."""

import random

import matplotlib

matplotlib.use("Agg")

import pytest

from othello import config
from othello.core.board import Board
from othello.ui.colors import Palette


EMPTY_ROW = "........"


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()


@pytest.fixture
def black_must_pass_board() -> Board:
    """Black's only piece sits next to a cornered white piece: black is stuck, white is not."""
    return Board.from_rows(["OX......"] + [EMPTY_ROW] * 7)


@pytest.fixture
def dead_tie_board() -> Board:
    """One piece each in opposite corners; nobody can move."""
    return Board.from_rows(["X......."] + [EMPTY_ROW] * 6 + [".......O"])


@pytest.fixture
def greedy_tie_board() -> Board:
    """
    Black to move has three options: (3,0) and (3,7) flip two each, (2,4) flips one.
    """
    return Board.from_rows([
        "XOO.....",
        EMPTY_ROW,
        EMPTY_ROW,
        EMPTY_ROW,
        "XO......",
        EMPTY_ROW,
        EMPTY_ROW,
        "XOO.....",
    ])


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def plain_palette() -> Palette:
    return Palette(enabled=False)


@pytest.fixture
def no_clear(monkeypatch):
    monkeypatch.setattr(config, "CLEAR_SCREEN", False)
