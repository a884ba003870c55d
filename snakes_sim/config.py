"""Fixed simulation constants."""

from __future__ import annotations

from dataclasses import dataclass

DICE_SIZE = 10
REROLL_STREAK_CAP = 10
OVERSHOOT_STREAK_CAP = 20
RUNS = 1_000_000
PROGRESS_EVERY = 1000


@dataclass(frozen=True)
class SimulationConfig:
    dice_size: int = DICE_SIZE
    reroll_streak_cap: int = REROLL_STREAK_CAP
    overshoot_streak_cap: int = OVERSHOOT_STREAK_CAP
    runs: int = RUNS
    progress_every: int = PROGRESS_EVERY

    def __post_init__(self) -> None:
        for name in ("dice_size", "reroll_streak_cap", "overshoot_streak_cap", "runs", "progress_every"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
