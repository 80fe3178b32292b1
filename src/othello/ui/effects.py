from __future__ import annotations
import sys
import time
from dataclasses import dataclass, field
from typing import TextIO

from othello.config import AI_THINKING_SPINNER, AI_THINK_DELAY_SEC


@dataclass(slots=True)
class SpinnerPacing:
    """
    Small user-visible delay + optional spinner so AI moves are not instant.
    Plugs into an agent's ``pacing`` slot.
    """
    seconds: float = AI_THINK_DELAY_SEC
    spinner: bool = AI_THINKING_SPINNER
    stream: TextIO = field(default_factory=lambda: sys.stdout)

    def __call__(self, label: str = "AI is thinking") -> None:
        if self.seconds <= 0:
            return

        if not self.spinner:
            time.sleep(self.seconds)
            return

        frames = ["|", "/", "-", "\\"]
        start = time.time()
        i = 0
        while (time.time() - start) < self.seconds:
            self.stream.write(f"\r{label}... {frames[i % len(frames)]}")
            self.stream.flush()
            time.sleep(0.08)
            i += 1
        self.stream.write("\r" + (" " * (len(label) + 10)) + "\r")
        self.stream.flush()
