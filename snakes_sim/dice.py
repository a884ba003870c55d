"""Re-rollable die: rolling the top face grants another throw."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import Protocol


class RandomSource(Protocol):
    """Anything with ``random.Random.randint`` semantics."""

    def randint(self, a: int, b: int) -> int: ...


def time_seeded_rng() -> random.Random:
    return random.Random(int(time.time()))


@dataclass
class RerollResult:
    """One turn's dice phase."""

    displacement: int
    reroll_count: int  # max-face throws before the terminating throw
    final_face: int

    @property
    def throws(self) -> int:
        return self.reroll_count + 1


@dataclass
class Dice:
    size: int = 10
    rng: RandomSource = field(default_factory=time_seeded_rng)

    def __post_init__(self) -> None:
        if self.size < 2:
            raise ValueError(f"Die needs at least two faces, got {self.size}")

    def roll_once(self) -> int:
        return self.rng.randint(1, self.size)

    def roll_with_reroll(self) -> RerollResult:
        """Throw until a non-maximum face comes up, summing every throw."""
        total = 0
        rerolls = 0
        face = self.roll_once()
        while face == self.size:
            total += face
            rerolls += 1
            face = self.roll_once()
        total += face
        return RerollResult(displacement=total, reroll_count=rerolls, final_face=face)
