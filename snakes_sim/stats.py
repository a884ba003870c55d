"""Process-wide histograms accumulated across simulated games."""

from __future__ import annotations

from dataclasses import dataclass, field


def _bump(hist: dict[int, int], key: int, by: int = 1) -> None:
    hist[key] = hist.get(key, 0) + by


@dataclass
class Histograms:
    """Counts keyed by square, face or streak length.

    Every field is additive, so shards can be combined with :meth:`merge`.
    """

    ladder_hits: dict[int, int] = field(default_factory=dict)
    snake_hits: dict[int, int] = field(default_factory=dict)
    faces: dict[int, int] = field(default_factory=dict)
    reroll_streaks: dict[int, int] = field(default_factory=dict)
    overshoot_streaks: dict[int, int] = field(default_factory=dict)
    turns: int = 0
    dice_rolls: int = 0

    def record_ladder(self, square: int) -> None:
        _bump(self.ladder_hits, square)

    def record_snake(self, square: int) -> None:
        _bump(self.snake_hits, square)

    def record_face(self, face: int) -> None:
        _bump(self.faces, face)

    def record_reroll_streak(self, length: int, cap: int) -> None:
        _bump(self.reroll_streaks, min(length, cap))

    def record_overshoot_streak(self, length: int, cap: int) -> None:
        _bump(self.overshoot_streaks, min(length, cap))

    def merge(self, other: Histograms) -> Histograms:
        """Return a new set of histograms summing *self* and *other*."""
        merged = Histograms(turns=self.turns + other.turns, dice_rolls=self.dice_rolls + other.dice_rolls)
        for name in ("ladder_hits", "snake_hits", "faces", "reroll_streaks", "overshoot_streaks"):
            target = getattr(merged, name)
            for src in (getattr(self, name), getattr(other, name)):
                for key, count in src.items():
                    _bump(target, key, count)
        return merged
