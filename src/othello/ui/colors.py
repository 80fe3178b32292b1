from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from othello.config import BLACK_COLOR, USE_COLOR, WHITE_COLOR

RGB = Tuple[int, int, int]

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
ITALIC = "\033[3m"

FG_RED = "\033[31m"
FG_GREEN = "\033[32m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"


def rgb(color: RGB) -> str:
    r, g, b = color
    return f"\033[38;2;{r};{g};{b}m"


def c(s: str, code: str, enabled: bool = USE_COLOR) -> str:
    if not enabled:
        return s
    return f"{code}{s}{RESET}"


@dataclass(frozen=True, slots=True)
class Palette:
    black: Optional[RGB] = BLACK_COLOR
    white: Optional[RGB] = WHITE_COLOR
    enabled: bool = USE_COLOR

    @property
    def black_code(self) -> str:
        return rgb(self.black) if self.black else FG_GREEN

    @property
    def white_code(self) -> str:
        return rgb(self.white) if self.white else FG_RED
