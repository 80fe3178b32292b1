# src/othello/config.py

from __future__ import annotations

SIZE = 8
COLUMN_LETTERS = "abcdefgh"

# Optional RGB overrides for the pieces; None keeps green X and red O
BLACK_COLOR = None
WHITE_COLOR = None

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 0.75  # overridable with --time (milliseconds)

# Which AI plays a color that is not human-controlled
DEFAULT_AI = "random"
AI_KINDS = ("random", "greedy")
