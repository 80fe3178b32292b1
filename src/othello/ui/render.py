from __future__ import annotations
from typing import Optional

from othello import config
from othello.config import COLUMN_LETTERS, SIZE
from othello.core.board import Cell
from othello.core.scoring import count_pieces
from othello.game.actions import coord_name
from othello.game.results import GameResult
from othello.game.state import GameState
from othello.types import Player
from othello.ui.colors import BOLD, FG_CYAN, ITALIC, Palette, c


def _symbol(player: Player, palette: Palette, emphasize: bool = False) -> str:
    code = palette.black_code if player is Player.BLACK else palette.white_code
    if emphasize:
        code = ITALIC + BOLD + code
    return c(player.value, code, palette.enabled)


def _piece(cell: Cell, palette: Palette) -> str:
    if cell.owner is None:
        return " "
    return _symbol(cell.owner, palette, emphasize=cell.last_move)


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def format_board(state: GameState, palette: Optional[Palette] = None, status: str = "") -> str:
    """
    Board, piece counts and whose turn it is. Offered moves show as a cyan dot.
    """
    pal = palette or Palette()
    offered = set(state.legal_moves)
    lines = []

    lines.append(c("OTHELLO", BOLD, pal.enabled))
    if status:
        lines.append(c(status, FG_CYAN, pal.enabled))

    lines.append("   | " + " ".join(ch.upper() for ch in COLUMN_LETTERS[:SIZE]) + " |")
    lines.append(" --+-" + "-" * (2 * SIZE - 1) + "-+")
    for r in range(SIZE):
        parts = []
        for col in range(SIZE):
            if (col, r) in offered:
                parts.append(c(".", FG_CYAN, pal.enabled))
            else:
                parts.append(_piece(state.board.cell((col, r)), pal))
        lines.append(f" {r + 1} | " + " ".join(parts) + " |")
    lines.append("   +-" + "-" * (2 * SIZE - 1) + "-+")

    black, white = count_pieces(state.board)
    lines.append(f"{Player.BLACK.value}'s: {black}")
    lines.append(f"{Player.WHITE.value}'s: {white}")

    if state.terminal:
        lines.append("Game over!")
        return "\n".join(lines)

    lines.append(f"Current turn: {_symbol(state.current, pal)}")
    if state.passed is not None:
        lines.append(
            f"({_symbol(state.passed, pal)}'s turn was skipped because they had no valid moves)"
        )
    lines.append("Valid moves: " + ", ".join(coord_name(m) for m in state.legal_moves))
    return "\n".join(lines)


def format_result(result: GameResult, palette: Optional[Palette] = None) -> str:
    pal = palette or Palette()
    if result.winner is None:
        return f"It's a {c('tie', FG_CYAN, pal.enabled)}! ({result.black}-{result.white})"
    return (
        f"{_symbol(result.winner, pal)}'s win! "
        f"({result.black}-{result.white})"
    )


def render(state: GameState, palette: Optional[Palette] = None, status: str = "") -> None:
    clear_screen()
    print(format_board(state, palette, status))


def render_result(state: GameState, result: GameResult, palette: Optional[Palette] = None, status: str = "") -> None:
    render(state, palette, status)
    pal = palette or Palette()
    print("\n")
    print(format_result(result, pal))
    print()
