from __future__ import annotations

import argparse
import logging
from typing import Optional, Tuple

from othello import config
from othello.ai.base import Agent
from othello.ai.pacing import Pacing
from othello.ai.pick import make_agent
from othello.game.controller import run_game
from othello.types import Player
from othello.ui.colors import Palette, RGB
from othello.ui.effects import SpinnerPacing
from othello.ui.human import HumanAgent


def _channel(raw: str) -> int:
    try:
        v = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid color component {raw!r} (expected 0-255)")
    if not 0 <= v <= 255:
        raise argparse.ArgumentTypeError(f"Invalid color component {v} (expected 0-255)")
    return v


def _millis(raw: str) -> int:
    try:
        v = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid time {raw!r} (expected milliseconds)")
    if v < 0:
        raise argparse.ArgumentTypeError("Invalid time (must not be negative)")
    return v


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="othello",
        description="Play Othello in the terminal. Both colors are AI unless made human.",
    )
    ap.add_argument("-b", "--black", action="store_true", help="Black (X's) is controlled by the user")
    ap.add_argument("-w", "--white", action="store_true", help="White (O's) is controlled by the user")

    ap.add_argument("--ai", choices=config.AI_KINDS, default=config.DEFAULT_AI, help="AI used for non-human colors")
    ap.add_argument("--black-ai", choices=config.AI_KINDS, default=None, help="Override --ai for black")
    ap.add_argument("--white-ai", choices=config.AI_KINDS, default=None, help="Override --ai for white")
    ap.add_argument(
        "-t", "--time",
        type=_millis,
        default=int(config.AI_THINK_DELAY_SEC * 1000),
        help="Milliseconds the AI waits before making a move (default: %(default)s)",
    )

    ap.add_argument("--black-color", "--bc", type=_channel, nargs=3, metavar=("R", "G", "B"), default=None,
                    help="Custom color for black (X's); default green")
    ap.add_argument("--white-color", "--wc", type=_channel, nargs=3, metavar=("R", "G", "B"), default=None,
                    help="Custom color for white (O's); default red")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between turns")

    ap.add_argument("--seed", type=int, default=None, help="Seed for the AI random choices")
    ap.add_argument("--menu", action="store_true", help="Start the interactive mode menu instead")
    ap.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: %(default)s)",
    )
    return ap


def build_palette(args: argparse.Namespace) -> Palette:
    black: Optional[RGB] = tuple(args.black_color) if args.black_color else config.BLACK_COLOR
    white: Optional[RGB] = tuple(args.white_color) if args.white_color else config.WHITE_COLOR
    return Palette(black=black, white=white, enabled=config.USE_COLOR and not args.no_color)


def build_pacing(args: argparse.Namespace) -> Pacing:
    return SpinnerPacing(seconds=args.time / 1000.0)


def build_agents(args: argparse.Namespace, pacing: Pacing) -> Tuple[Agent, Agent]:
    agents = []
    for player, human, kind in (
        (Player.BLACK, args.black, args.black_ai or args.ai),
        (Player.WHITE, args.white, args.white_ai or args.ai),
    ):
        if human:
            agents.append(HumanAgent(name=f"Human ({player.value})"))
            continue
        seed = None if args.seed is None else args.seed + (0 if player is Player.BLACK else 1)
        agents.append(make_agent(kind, seed=seed, pacing=pacing))
    return agents[0], agents[1]


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.no_clear:
        config.CLEAR_SCREEN = False

    palette = build_palette(args)
    pacing = build_pacing(args)

    if args.menu:
        from othello.ui.menu import run_menu
        run_menu(palette=palette, pacing=pacing)
        return 0

    black, white = build_agents(args, pacing)
    run_game(black, white, palette=palette)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
