"""Turn engine and game runner for a single Snakes & Ladders playthrough."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from snakes_sim.board import GOAL, Board
from snakes_sim.config import SimulationConfig
from snakes_sim.dice import Dice
from snakes_sim.stats import Histograms

logger = logging.getLogger(__name__)


# ── Structured types ────────────────────────────────────────────────

@dataclass
class TurnRecord:
    """What happened during one turn."""

    start: int
    displacement: int
    reroll_count: int
    final_face: int
    tentative: int
    end: int
    overshoot: bool = False
    transfer: str | None = None  # "ladder" | "snake"


@dataclass
class GameState:
    """Mutable state that lives for one game."""

    position: int = 0
    overshoot_streak: int = 0
    turns: int = 0
    dice_rolls: int = 0


@dataclass
class GameResult:
    turns: int
    dice_rolls: int


# ── Observers ───────────────────────────────────────────────────────

class TurnObserver(Protocol):
    """Receives a record for every turn played."""

    def on_turn(self, record: TurnRecord) -> None: ...


class NullObserver:
    def on_turn(self, record: TurnRecord) -> None:
        pass


@dataclass
class ListObserver:
    """Collects turn records into a list."""

    records: list[TurnRecord] = field(default_factory=list)

    def on_turn(self, record: TurnRecord) -> None:
        self.records.append(record)


class LoggingObserver:
    """Per-turn trace written through :mod:`logging` at DEBUG level."""

    def __init__(self, log: logging.Logger | None = None):
        self.log = log or logger

    def on_turn(self, record: TurnRecord) -> None:
        self.log.debug(
            "turn from %d: rolled %d (%d rerolls, last face %d)",
            record.start, record.displacement, record.reroll_count, record.final_face,
        )
        if record.overshoot:
            self.log.debug("went over %d, staying at %d", GOAL, record.end)
        elif record.transfer == "ladder":
            self.log.debug("ladder(%d), going up to %d", record.tentative, record.end)
        elif record.transfer == "snake":
            self.log.debug("snake(%d), going down to %d", record.tentative, record.end)
        else:
            self.log.debug("now at %d", record.end)


# ── Context ─────────────────────────────────────────────────────────

@dataclass
class SimulationContext:
    """Everything a game needs: board, dice, shared histograms, observer."""

    config: SimulationConfig = field(default_factory=SimulationConfig)
    board: Board = field(default_factory=Board)
    dice: Dice | None = None
    histograms: Histograms = field(default_factory=Histograms)
    observer: TurnObserver = field(default_factory=NullObserver)

    def __post_init__(self) -> None:
        if self.dice is None:
            self.dice = Dice(size=self.config.dice_size)
        elif self.dice.size != self.config.dice_size:
            raise ValueError(
                f"Dice has {self.dice.size} faces but config expects {self.config.dice_size}"
            )


# ── Engine ──────────────────────────────────────────────────────────

class TurnEngine:
    """Advance a game by exactly one turn."""

    def __init__(self, context: SimulationContext):
        self.context = context

    def play_turn(self, game: GameState) -> TurnRecord:
        ctx = self.context
        hist = ctx.histograms
        start = game.position

        roll = ctx.dice.roll_with_reroll()
        game.dice_rolls += roll.throws
        hist.record_face(roll.final_face)
        if roll.reroll_count > 0:
            hist.record_reroll_streak(roll.reroll_count, ctx.config.reroll_streak_cap)

        tentative = start + roll.displacement
        record = TurnRecord(
            start=start,
            displacement=roll.displacement,
            reroll_count=roll.reroll_count,
            final_face=roll.final_face,
            tentative=tentative,
            end=start,
        )

        # Overshoot → stay put, no transfer
        if tentative > GOAL:
            game.overshoot_streak += 1
            record.overshoot = True
            ctx.observer.on_turn(record)
            return record

        game.position = tentative
        if game.overshoot_streak:
            hist.record_overshoot_streak(game.overshoot_streak, ctx.config.overshoot_streak_cap)
            game.overshoot_streak = 0

        dest = ctx.board.lookup_transfer(tentative)
        if dest is not None:
            if ctx.board.is_ladder(tentative):
                hist.record_ladder(tentative)
                record.transfer = "ladder"
            else:
                hist.record_snake(tentative)
                record.transfer = "snake"
            game.position = dest

        record.end = game.position
        ctx.observer.on_turn(record)
        return record


# ── Runner ───────────────────────────────────────────────────────────

class GameRunner:
    """Play one full game from square 0 to the goal."""

    def __init__(self, context: SimulationContext):
        self.context = context
        self.engine = TurnEngine(context)

    def play(self) -> GameResult:
        game = GameState()
        while game.position != GOAL:
            self.engine.play_turn(game)
            game.turns += 1

        hist = self.context.histograms
        hist.turns += game.turns
        hist.dice_rolls += game.dice_rolls
        return GameResult(turns=game.turns, dice_rolls=game.dice_rolls)
