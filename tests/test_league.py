import csv
from functools import partial

from othello.ai.greedy_agent import GreedyAgent
from othello.ai.random_agent import RandomAgent
from othello.scripts.league import (
    GAME_COLUMNS,
    GameRecord,
    Team,
    build_roster,
    export_csv,
    main,
    play_headless,
    ranking,
    round_robin,
    standings,
)


def small_roster():
    return [
        Team("Random", partial(RandomAgent, name="Random")),
        Team("Greedy", partial(GreedyAgent, name="Greedy")),
    ]


def record(game_id, black, white, outcome, black_discs, white_discs, passes_black=0, passes_white=0):
    return GameRecord(
        game_id=game_id,
        black=black,
        white=white,
        outcome=outcome,
        black_discs=black_discs,
        white_discs=white_discs,
        moves=60,
        passes_black=passes_black,
        passes_white=passes_white,
        opening_plies=0,
        seed=0,
    )


def test_play_headless_is_reproducible():
    greedy, rand = small_roster()[1], small_roster()[0]
    r1 = play_headless(greedy, rand, game_id=1, seed=42, opening_plies=2)
    r2 = play_headless(greedy, rand, game_id=1, seed=42, opening_plies=2)

    assert r1 == r2
    assert (r1.black, r1.white) == ("Greedy", "Random")
    assert r1.opening_plies == 2
    assert r1.black_discs + r1.white_discs <= 64
    assert r1.outcome in {"X", "O", "D"}


def test_play_headless_counts_forced_passes(black_must_pass_board):
    rand = small_roster()[0]
    r = play_headless(rand, rand, board=black_must_pass_board)

    assert (r.passes_black, r.passes_white) == (1, 0)
    assert r.outcome == "O"
    assert (r.black_discs, r.white_discs) == (0, 3)
    assert r.disc_diff == -3
    assert r.moves == 1


def test_round_robin_alternates_colours():
    seen = []
    records = round_robin(small_roster(), games_per_pair=4, seed=7, progress=lambda *a: seen.append(a))

    assert seen == [(1, 1, "Random", "Greedy")]
    assert [r.game_id for r in records] == [1, 2, 3, 4]
    assert [r.black for r in records] == ["Random", "Greedy", "Random", "Greedy"]
    assert len({r.seed for r in records}) == 4


def test_standings_from_records():
    records = [
        record(1, "A", "B", "X", 40, 24),
        record(2, "B", "A", "X", 33, 31, passes_white=2),
        record(3, "A", "B", "D", 32, 32),
    ]
    table = standings(records)

    a, b = table["A"], table["B"]
    assert (a.wins, a.draws, a.losses) == (1, 1, 1)
    assert (b.wins, b.draws, b.losses) == (1, 1, 1)
    assert a.disc_diff == 16 - 2
    assert b.disc_diff == -a.disc_diff
    assert (a.passes, b.passes) == (2, 0)
    assert a.points == b.points == 1.5
    assert [name for name, _ in ranking(table)] == ["A", "B"]


def test_export_csv_writes_one_row_per_game(tmp_path):
    records = round_robin(small_roster(), games_per_pair=2, seed=3)
    path = export_csv(records, tmp_path / "results")

    assert path.name.startswith("games_")
    with open(path, newline="") as f:
        rows = list(csv.DictReader(f))
    assert list(rows[0]) == GAME_COLUMNS
    assert len(rows) == 2
    assert {rows[0]["black"], rows[0]["white"]} == {"Random", "Greedy"}


def test_roster_makes_fresh_agents():
    roster = build_roster()
    assert [t.name for t in roster] == ["Random", "Greedy t0", "Greedy t2"]

    a, b = roster[2].make(), roster[2].make()
    assert a is not b
    assert a.rng is not b.rng
    assert a.temperature == 2


def test_league_main_writes_csv(tmp_path, capsys):
    rc = main(["--games-per-pair", "1", "--results-dir", str(tmp_path)])
    assert rc == 0
    assert list(tmp_path.glob("games_*.csv"))
    out = capsys.readouterr().out
    assert "Standings" in out
    assert "Played 3 games" in out


def test_league_main_without_csv(tmp_path):
    assert main(["--games-per-pair", "1", "--no-csv", "--results-dir", str(tmp_path / "x")]) == 0
    assert not (tmp_path / "x").exists()
