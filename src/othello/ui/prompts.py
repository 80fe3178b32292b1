from __future__ import annotations
from typing import Optional

from othello.config import COLUMN_LETTERS, SIZE
from othello.types import Coord


ROW_DIGITS = "".join(str(n) for n in range(1, SIZE + 1))


class MalformedMoveInput(ValueError):
    pass


def parse_move(raw: str) -> Optional[Coord]:
    """
    'd3' -> (3, 2). Returns None when the player wants to quit.
    """
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return None
    if len(s) != 2:
        raise MalformedMoveInput("Incorrectly formatted input (format input like: 'd3')")
    letter, digit = s[0], s[1]
    if letter not in COLUMN_LETTERS:
        raise MalformedMoveInput("Incorrectly formatted input (enter only letters A-H)")
    if digit not in ROW_DIGITS:
        raise MalformedMoveInput(f"Incorrectly formatted input (enter numbers 1-{SIZE})")
    return (COLUMN_LETTERS.index(letter), int(digit) - 1)
