
# src/othello/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Sequence, Tuple

from othello.config import SIZE
from othello.types import Coord, Player


@dataclass(frozen=True, slots=True)
class Cell:
    owner: Optional[Player] = None
    last_move: bool = False  # display emphasis only; rules never read it

    @property
    def empty(self) -> bool:
        return self.owner is None


EMPTY = Cell()

Grid = Tuple[Tuple[Cell, ...], ...]


def _empty_grid() -> Grid:
    return tuple(tuple(EMPTY for _ in range(SIZE)) for _ in range(SIZE))


@dataclass(frozen=True, slots=True)
class Board:
    """
    Immutable 8x8 snapshot, indexed grid[col][row].
    Every change goes through ``with_cells`` and yields a new Board.
    """
    grid: Grid = field(default_factory=_empty_grid)

    @classmethod
    def initial(cls) -> "Board":
        return cls().with_cells({
            (3, 3): Cell(Player.WHITE),
            (3, 4): Cell(Player.BLACK),
            (4, 3): Cell(Player.BLACK),
            (4, 4): Cell(Player.WHITE),
        })

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from 8 strings, one per row (top first).
        'X' is black, 'O' is white, anything else ('.', ' ') is empty.
        """
        if len(rows) != SIZE or any(len(r) != SIZE for r in rows):
            raise ValueError(f"Expected {SIZE} rows of {SIZE} characters.")
        cells: Dict[Coord, Cell] = {}
        for r, line in enumerate(rows):
            for c, ch in enumerate(line.upper()):
                if ch == Player.BLACK.value:
                    cells[(c, r)] = Cell(Player.BLACK)
                elif ch == Player.WHITE.value:
                    cells[(c, r)] = Cell(Player.WHITE)
        return cls().with_cells(cells)

    @staticmethod
    def on_board(coord: Coord) -> bool:
        c, r = coord
        return 0 <= c < SIZE and 0 <= r < SIZE

    def cell(self, coord: Coord) -> Cell:
        c, r = coord
        return self.grid[c][r]

    def owner(self, coord: Coord) -> Optional[Player]:
        c, r = coord
        return self.grid[c][r].owner

    def coords(self) -> Iterator[Coord]:
        # Column-major, the scan order used everywhere (legal moves included)
        for c in range(SIZE):
            for r in range(SIZE):
                yield (c, r)

    def with_cells(self, changes: Dict[Coord, Cell], *, clear_last_move: bool = False) -> "Board":
        cols = []
        for c in range(SIZE):
            col = []
            for r in range(SIZE):
                cell = changes.get((c, r))
                if cell is None:
                    cell = self.grid[c][r]
                    if clear_last_move and cell.last_move:
                        cell = Cell(cell.owner)
                col.append(cell)
            cols.append(tuple(col))
        return Board(tuple(cols))

    @property
    def last_move(self) -> Optional[Coord]:
        for coord in self.coords():
            if self.cell(coord).last_move:
                return coord
        return None

    def occupied(self) -> int:
        return sum(1 for col in self.grid for cell in col if cell.owner is not None)

    def count(self, player: Player) -> int:
        return sum(1 for col in self.grid for cell in col if cell.owner is player)

    def rows(self) -> list[str]:
        """Inverse of ``from_rows``; handy for logging and tests."""
        out = []
        for r in range(SIZE):
            out.append("".join(
                self.grid[c][r].owner.value if self.grid[c][r].owner else "."
                for c in range(SIZE)
            ))
        return out
