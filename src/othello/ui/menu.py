from __future__ import annotations

import time

from othello.ai.pacing import Pacing, no_pacing
from othello.ai.pick import make_agent, random_ai_agent
from othello.game.controller import run_game
from othello.ui.colors import Palette
from othello.ui.human import HumanAgent


def run_menu(palette: Palette | None = None, pacing: Pacing = no_pacing) -> None:
    print("Select mode:")
    print("1) Human vs Human")
    print("2) Human vs AI (random model)")
    print("3) AI vs AI (random vs greedy)")
    print("4) Run AI League")

    choice = input("Choice: ").strip()

    if choice == "1":
        p1 = HumanAgent()
        p2 = HumanAgent()
        print(f"\nStarting game: {p1.name} vs {p2.name}")
        print("Game will start in 3 seconds...\n")
        time.sleep(3)
        run_game(p1, p2, palette=palette)
        return

    if choice == "2":
        human = HumanAgent()
        ai = random_ai_agent(pacing=pacing)
        print(f"\nStarting game: {human.name} vs {ai.name}")
        print("Game will start in 3 seconds...\n")
        time.sleep(3)
        run_game(human, ai, palette=palette)
        return

    if choice == "3":
        black = make_agent("random", pacing=pacing)
        white = make_agent("greedy", pacing=pacing)
        print(f"\nStarting game: {black.name} vs {white.name}")
        print("Game will start in 3 seconds...\n")
        time.sleep(3)
        run_game(black, white, palette=palette)
        return

    if choice == "4":
        print("\nStarting AI League in 3 seconds...\n")
        time.sleep(3)
        from othello.scripts.league import main as league_main
        league_main([])
        return

    print("\nInvalid choice. Defaulting to Human vs Human.\n")
    time.sleep(3)
    run_game(HumanAgent(), HumanAgent(), palette=palette)
