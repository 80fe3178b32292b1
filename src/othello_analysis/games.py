from __future__ import annotations

from pathlib import Path

import pandas as pd


REQUIRED_COLS = ("black", "white", "outcome", "black_discs", "white_discs")
INT_COLS = ("black_discs", "white_discs", "moves", "passes_black", "passes_white")


def latest_games_csv(results_dir: Path, pattern: str = "games_*.csv") -> Path:
    if not results_dir.exists():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")

    files = sorted(results_dir.glob(pattern))
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {results_dir}")

    # games_YYYYmmdd_HHMMSS.csv sorts by time
    return files[-1]


def load_games(csv_path: Path) -> pd.DataFrame:
    """
    Read a league games CSV and add the per-game columns the reports use:
    disc_diff (black minus white), margin, matchup and winner.
    """
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {csv_path}")

    df = pd.read_csv(csv_path)
    df.columns = [c.strip() for c in df.columns]

    missing = [c for c in REQUIRED_COLS if c not in df.columns]
    if missing:
        raise ValueError(f"CSV missing columns {missing}. Columns: {list(df.columns)}")

    for c in INT_COLS:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    df["outcome"] = df["outcome"].astype(str).str.strip().str.upper()
    df = df[df["outcome"].isin(["X", "O", "D"])].dropna(subset=["black_discs", "white_discs"]).copy()

    df["disc_diff"] = df["black_discs"] - df["white_discs"]
    df["margin"] = df["disc_diff"].abs()
    df["matchup"] = [" vs ".join(sorted(pair)) for pair in zip(df["black"], df["white"])]
    df["winner"] = df["black"].where(df["outcome"] == "X", df["white"].where(df["outcome"] == "O", ""))

    return df.reset_index(drop=True)


def _sides(df: pd.DataFrame) -> pd.DataFrame:
    """One row per (game, side): who played it and how it went for them."""
    black = pd.DataFrame({
        "agent": df["black"],
        "colour": "black",
        "won": df["outcome"] == "X",
        "drew": df["outcome"] == "D",
        "passes": df.get("passes_black", 0),
    })
    white = pd.DataFrame({
        "agent": df["white"],
        "colour": "white",
        "won": df["outcome"] == "O",
        "drew": df["outcome"] == "D",
        "passes": df.get("passes_white", 0),
    })
    return pd.concat([black, white], ignore_index=True)


def margin_by_matchup(df: pd.DataFrame) -> pd.DataFrame:
    """Final disc margin per pairing, regardless of who won."""
    grouped = df.groupby("matchup")["margin"]
    out = grouped.agg(["count", "mean", "median", "min", "max"])
    out["shutouts"] = df.assign(shutout=(df["black_discs"] == 0) | (df["white_discs"] == 0)).groupby("matchup")["shutout"].sum()
    return out.sort_values("mean", ascending=False)


def colour_split(df: pd.DataFrame) -> pd.Series:
    """Share of all games won by black, won by white and drawn."""
    shares = df["outcome"].value_counts(normalize=True)
    return shares.reindex(["X", "O", "D"], fill_value=0.0).rename({"X": "black", "O": "white", "D": "draw"})


def colour_advantage(df: pd.DataFrame) -> pd.DataFrame:
    """
    Per agent win rate with black and with white. ``edge`` is the black
    rate minus the white rate; positive means the agent does better moving first.
    """
    sides = _sides(df)
    rates = sides.groupby(["agent", "colour"])["won"].agg(["size", "mean"]).unstack("colour")
    out = pd.DataFrame({
        "games_black": rates[("size", "black")],
        "win_rate_black": rates[("mean", "black")],
        "games_white": rates[("size", "white")],
        "win_rate_white": rates[("mean", "white")],
    }).fillna({"games_black": 0, "games_white": 0})
    out["edge"] = out["win_rate_black"] - out["win_rate_white"]
    return out.sort_values("edge", ascending=False)


def pass_frequency(df: pd.DataFrame) -> pd.DataFrame:
    """How often each agent was forced to pass."""
    sides = _sides(df)
    out = sides.groupby("agent").agg(
        games=("passes", "size"),
        passes=("passes", "sum"),
        games_with_pass=("passes", lambda s: int((s > 0).sum())),
    )
    out["passes_per_game"] = out["passes"] / out["games"]
    return out.sort_values("passes_per_game", ascending=False)
