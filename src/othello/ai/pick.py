from __future__ import annotations

import random
from typing import Optional

from othello.ai.base import Agent
from othello.ai.pacing import Pacing, no_pacing
from othello.config import AI_KINDS


def make_agent(
    kind: str,
    *,
    name: Optional[str] = None,
    seed: Optional[int] = None,
    pacing: Pacing = no_pacing,
    temperature: int = 0,
) -> Agent:
    """
    Build one of the AI agents by kind ("random" or "greedy").
    ``seed`` makes the agent's choices reproducible.
    """
    from othello.ai.random_agent import RandomAgent
    from othello.ai.greedy_agent import GreedyAgent

    rng = random.Random(seed)
    kind = kind.strip().lower()

    if kind == "random":
        return RandomAgent(name=name or "Random AI", rng=rng, pacing=pacing)

    if kind == "greedy":
        return GreedyAgent(
            name=name or "Greedy (1-ply)",
            temperature=temperature,
            rng=rng,
            pacing=pacing,
        )

    raise ValueError(f"Unknown AI kind {kind!r}; expected one of {', '.join(AI_KINDS)}.")


def random_ai_agent(pacing: Pacing = no_pacing) -> Agent:
    """Pick one of the AI families at random (used by the menu)."""
    return make_agent(random.choice(AI_KINDS), pacing=pacing)
