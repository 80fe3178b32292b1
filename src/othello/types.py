# src/othello/types.py

from __future__ import annotations
from enum import Enum
from typing import Tuple


class Player(str, Enum):
    BLACK = "X"
    WHITE = "O"

    @property
    def opposite(self) -> "Player":
        return Player.WHITE if self is Player.BLACK else Player.BLACK

    @property
    def label(self) -> str:
        return self.name.capitalize()


Coord = Tuple[int, int]   # (column, row), each 0..7
Move = Coord
