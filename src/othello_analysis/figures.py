from __future__ import annotations

from pathlib import Path
from typing import List

import matplotlib.pyplot as plt
import pandas as pd


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    outdir.mkdir(parents=True, exist_ok=True)
    out = outdir / filename
    fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return out


def plot_margin_distribution(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """Histogram of black-minus-white disc difference, one layer per matchup."""
    if df.empty:
        return None

    fig, ax = plt.subplots(figsize=(9, 5))
    bins = list(range(-64, 66, 4))
    for matchup, group in df.groupby("matchup"):
        ax.hist(group["disc_diff"], bins=bins, alpha=0.5, label=str(matchup))
    ax.axvline(0, color="black", linewidth=0.8)
    ax.set_title("Final disc difference (black - white)")
    ax.set_xlabel("discs")
    ax.set_ylabel("games")
    ax.legend(fontsize=8)

    return _finish(fig, outdir, "margin_distribution.png", show=show)


def plot_colour_advantage(adv: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if adv.empty:
        return None

    names = [str(n) for n in adv.index]
    xs = range(len(names))
    width = 0.4

    fig, ax = plt.subplots(figsize=(9, 5))
    ax.bar([x - width / 2 for x in xs], adv["win_rate_black"].fillna(0), width, label="as black (X)", color="0.2")
    ax.bar([x + width / 2 for x in xs], adv["win_rate_white"].fillna(0), width, label="as white (O)", color="0.8",
           edgecolor="0.2")
    ax.set_xticks(list(xs))
    ax.set_xticklabels(names, rotation=30, ha="right")
    ax.set_ylim(0, 1)
    ax.set_ylabel("win rate")
    ax.set_title("Win rate by colour")
    ax.legend()

    return _finish(fig, outdir, "colour_advantage.png", show=show)


def plot_pass_frequency(passes: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if passes.empty:
        return None

    fig, ax = plt.subplots(figsize=(9, 4))
    ax.bar([str(n) for n in passes.index], passes["passes_per_game"], color="tab:orange")
    ax.set_title("Forced passes per game")
    ax.set_ylabel("passes / game")
    ax.tick_params(axis="x", labelrotation=30)

    return _finish(fig, outdir, "pass_frequency.png", show=show)


def plot_all(df: pd.DataFrame, adv: pd.DataFrame, passes: pd.DataFrame, outdir: Path, *, show: bool) -> List[Path]:
    written = [
        plot_margin_distribution(df, outdir, show=show),
        plot_colour_advantage(adv, outdir, show=show),
        plot_pass_frequency(passes, outdir, show=show),
    ]
    return [p for p in written if p is not None]
