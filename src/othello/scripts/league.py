from __future__ import annotations

import argparse
import csv
import logging
import random
import time
from dataclasses import asdict, dataclass, fields
from functools import partial
from itertools import combinations
from pathlib import Path
from typing import Callable, Dict, List, Optional

from othello.ai.base import Agent
from othello.ai.pick import make_agent
from othello.core.board import Board
from othello.game.engine import Game
from othello.game.results import Outcome
from othello.types import Player

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Team:
    name: str
    make: Callable[[], Agent]


@dataclass(frozen=True)
class GameRecord:
    """One finished league game, as written to games_<timestamp>.csv."""
    game_id: int
    black: str
    white: str
    outcome: str  # "X", "O" or "D"
    black_discs: int
    white_discs: int
    moves: int
    passes_black: int
    passes_white: int
    opening_plies: int
    seed: int

    @property
    def disc_diff(self) -> int:
        """Black's final pieces minus white's."""
        return self.black_discs - self.white_discs


GAME_COLUMNS = [f.name for f in fields(GameRecord)]


@dataclass
class Standing:
    games: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    disc_diff: int = 0  # own minus opponent, summed over games
    passes: int = 0

    @property
    def points(self) -> float:
        return self.wins + 0.5 * self.draws

    @property
    def ppg(self) -> float:
        return (self.points / self.games) if self.games else 0.0


def seed_agent(agent: Agent, seed: int) -> None:
    rng = getattr(agent, "rng", None)
    if isinstance(rng, random.Random):
        rng.seed(seed)


def play_headless(
    black: Team,
    white: Team,
    *,
    game_id: int = 0,
    seed: int = 0,
    opening_plies: int = 0,
    board: Optional[Board] = None,
) -> GameRecord:
    """
    Play one game with no rendering. The first ``opening_plies`` moves are
    drawn at random from ``seed`` so repeated pairings do not replay the
    same game. ``board`` replaces the standard start position. Forced
    passes are counted for each side.
    """
    agent_black, agent_white = black.make(), white.make()
    seed_agent(agent_black, seed + 101)
    seed_agent(agent_white, seed + 202)

    game = Game(board=board)
    passes = {Player.BLACK: 0, Player.WHITE: 0}
    rng = random.Random(seed)
    opened = 0

    while True:
        if game.skipped:
            passes[game.passed] += 1
        if game.is_over:
            break
        if opened < opening_plies:
            game.submit(rng.choice(game.legal_moves))
            opened += 1
        else:
            game.step(agent_black if game.current is Player.BLACK else agent_white)

    result = game.result()
    logger.debug("game %d %s vs %s: %s", game_id, black.name, white.name, result.describe())
    return GameRecord(
        game_id=game_id,
        black=black.name,
        white=white.name,
        outcome=result.outcome.value,
        black_discs=result.black,
        white_discs=result.white,
        moves=game.move_count,
        passes_black=passes[Player.BLACK],
        passes_white=passes[Player.WHITE],
        opening_plies=opened,
        seed=seed,
    )


def round_robin(
    teams: List[Team],
    games_per_pair: int = 2,
    seed: int = 1234,
    opening_plies: int = 2,
    progress: Optional[Callable[[int, int, str, str], None]] = None,
) -> List[GameRecord]:
    """
    Every pair of teams plays ``games_per_pair`` games, alternating colors.
    """
    records: List[GameRecord] = []
    pairings = list(combinations(teams, 2))

    for i, (a, b) in enumerate(pairings):
        for g in range(games_per_pair):
            black, white = (a, b) if g % 2 == 0 else (b, a)
            records.append(play_headless(
                black,
                white,
                game_id=len(records) + 1,
                seed=seed + 1000 * i + g,
                opening_plies=opening_plies,
            ))
        if progress is not None:
            progress(i + 1, len(pairings), a.name, b.name)

    return records


def standings(records: List[GameRecord]) -> Dict[str, Standing]:
    table: Dict[str, Standing] = {}
    for r in records:
        for name, colour, diff, passes in (
            (r.black, Outcome.BLACK_WINS, r.disc_diff, r.passes_black),
            (r.white, Outcome.WHITE_WINS, -r.disc_diff, r.passes_white),
        ):
            s = table.setdefault(name, Standing())
            s.games += 1
            s.disc_diff += diff
            s.passes += passes
            if r.outcome == Outcome.TIE.value:
                s.draws += 1
            elif r.outcome == colour.value:
                s.wins += 1
            else:
                s.losses += 1
    return table


def ranking(table: Dict[str, Standing]) -> List[tuple[str, Standing]]:
    return sorted(table.items(), key=lambda kv: (-kv[1].points, -kv[1].disc_diff, kv[0]))


def print_standings(table: Dict[str, Standing]) -> None:
    print("Standings")
    print(f"{'rk':>3}  {'name':<16} {'W-D-L':>10} {'ppg':>6} {'discs':>7} {'passes':>6}")
    for rk, (name, s) in enumerate(ranking(table), start=1):
        avg_diff = s.disc_diff / s.games if s.games else 0.0
        print(f"{rk:>3}  {name:<16} {f'{s.wins}-{s.draws}-{s.losses}':>10} {s.ppg:>6.3f} {avg_diff:>+7.1f} {s.passes:>6}")


def export_csv(records: List[GameRecord], results_dir: Path) -> Path:
    results_dir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = results_dir / f"games_{ts}.csv"

    with open(out_path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=GAME_COLUMNS)
        w.writeheader()
        w.writerows(asdict(r) for r in records)

    logger.info("Wrote %d games to %s", len(records), out_path)
    return out_path


def build_roster() -> List[Team]:
    teams = [Team("Random", partial(make_agent, "random", name="Random"))]
    for temp in (0, 2):
        name = f"Greedy t{temp}"
        teams.append(Team(name, partial(make_agent, "greedy", name=name, temperature=temp)))
    return teams


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="othello-league",
        description="Round-robin between the Othello AIs; prints standings and writes one CSV row per game.",
    )
    ap.add_argument("--games-per-pair", type=int, default=10, help="Games per pairing (colors alternate)")
    ap.add_argument("--opening-plies", type=int, default=2, help="Random opening moves before the agents take over")
    ap.add_argument("--seed", type=int, default=1234, help="Base seed for openings and agents")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Where games_*.csv is written")
    ap.add_argument("--no-csv", action="store_true", help="Skip the CSV export")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    roster = build_roster()
    print(f"Roster: {', '.join(t.name for t in roster)}")

    def progress(done: int, total: int, a: str, b: str) -> None:
        print(f"[{done}/{total}] {a} vs {b}")

    start = time.perf_counter()
    records = round_robin(
        roster,
        games_per_pair=args.games_per_pair,
        seed=args.seed,
        opening_plies=args.opening_plies,
        progress=progress,
    )
    elapsed = time.perf_counter() - start

    print()
    print_standings(standings(records))

    if not args.no_csv:
        out_path = export_csv(records, Path(args.results_dir))
        print(f"\nWrote CSV: {out_path}")

    print(f"Played {len(records)} games in {elapsed:.3f}s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
