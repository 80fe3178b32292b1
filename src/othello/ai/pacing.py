from __future__ import annotations
import time
from dataclasses import dataclass
from typing import Callable, Protocol


class Pacing(Protocol):
    """Called once per AI decision; only affects how fast moves appear."""

    def __call__(self, label: str) -> None:
        ...


def no_pacing(label: str = "") -> None:
    return None


@dataclass(frozen=True, slots=True)
class SleepPacing:
    seconds: float
    sleep: Callable[[float], None] = time.sleep

    def __call__(self, label: str = "") -> None:
        if self.seconds > 0:
            self.sleep(self.seconds)
