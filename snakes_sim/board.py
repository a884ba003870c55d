"""Board layout and transfer rules for Snakes & Ladders."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

GOAL = 100

# fmt: off
LADDERS: dict[int, int] = {
     2: 18,   8: 50,  10: 30,  26: 74,  40: 60,
    44: 64,  52: 60,  68: 94,  78: 100, 84: 96,
}

SNAKES: dict[int, int] = {
    16:  6,  22: 20,  32:  7,  48: 28,  58: 24,
    76: 56,  80: 42,  86: 36,  92: 72,  98: 62,
}
# fmt: on


@dataclass(frozen=True)
class Board:
    """Immutable ladder and snake tables.

    Squares 0 (start) and 100 (goal) are never sources. Construction
    rejects overlapping sources and entries pointing the wrong way.
    """

    ladders: Mapping[int, int] = field(default_factory=lambda: dict(LADDERS))
    snakes: Mapping[int, int] = field(default_factory=lambda: dict(SNAKES))

    def __post_init__(self) -> None:
        overlap = set(self.ladders) & set(self.snakes)
        if overlap:
            raise ValueError(f"Squares are both ladder and snake: {sorted(overlap)}")
        for sq, dest in self.ladders.items():
            if not (0 < sq < GOAL) or not (sq < dest <= GOAL):
                raise ValueError(f"Invalid ladder {sq} -> {dest}")
        for sq, dest in self.snakes.items():
            if not (0 < sq < GOAL) or not (0 <= dest < sq):
                raise ValueError(f"Invalid snake {sq} -> {dest}")
        object.__setattr__(self, "ladders", MappingProxyType(dict(self.ladders)))
        object.__setattr__(self, "snakes", MappingProxyType(dict(self.snakes)))

    def is_ladder(self, square: int) -> bool:
        return square in self.ladders

    def is_snake(self, square: int) -> bool:
        return square in self.snakes

    def lookup_transfer(self, square: int) -> int | None:
        """Destination for *square*, or ``None`` if it is an ordinary square."""
        dest = self.ladders.get(square)
        if dest is not None:
            return dest
        return self.snakes.get(square)

    def special_squares(self) -> list[int]:
        return sorted(set(self.ladders) | set(self.snakes))
