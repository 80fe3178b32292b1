from __future__ import annotations

import argparse
import logging
from pathlib import Path

import pandas as pd

from othello_analysis.figures import plot_all
from othello_analysis.games import (
    colour_advantage,
    colour_split,
    latest_games_csv,
    load_games,
    margin_by_matchup,
    pass_frequency,
)

logger = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="python -m othello_analysis",
        description="Disc margins, colour advantage and forced passes from an othello-league games CSV.",
    )
    ap.add_argument("--csv", type=str, default=None, help="Games CSV; defaults to the newest one in --results-dir")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory containing games_*.csv")
    ap.add_argument("--pattern", type=str, default="games_*.csv", help="Glob used to pick the newest CSV")
    ap.add_argument("--outdir", type=str, default="data/figures", help="Where figures are written")
    ap.add_argument("--no-plots", action="store_true", help="Print the tables only")
    ap.add_argument("--show", action="store_true", help="Show figures instead of saving them")
    return ap


def _section(title: str, table) -> None:
    print(f"\n=== {title} ===")
    print(table.to_string())


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    csv_path = Path(args.csv) if args.csv else latest_games_csv(Path(args.results_dir), args.pattern)
    df = load_games(csv_path)
    logger.info("Loaded %d games from %s", len(df), csv_path)

    print(f"Loaded: {csv_path} ({len(df)} games)")
    if df.empty:
        print("No finished games to analyze.")
        return 0

    adv = colour_advantage(df)
    passes = pass_frequency(df)

    with pd.option_context("display.float_format", "{:.3f}".format, "display.width", 120):
        _section("Disc margin by matchup", margin_by_matchup(df))
        _section("Colour split (all games)", colour_split(df))
        _section("Colour advantage", adv)
        _section("Forced passes", passes)

    if not args.no_plots:
        for path in plot_all(df, adv, passes, Path(args.outdir), show=args.show):
            print(f"Wrote {path}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
