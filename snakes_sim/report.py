"""Render accumulated histograms as counts and per-run frequencies."""

from __future__ import annotations

from snakes_sim.board import Board
from snakes_sim.config import SimulationConfig
from snakes_sim.stats import Histograms


def _line(label: str, count: int, runs: int) -> str:
    return f"{label} {count} {count / runs:g}"


def report_lines(
    hist: Histograms,
    runs: int,
    board: Board,
    config: SimulationConfig,
) -> list[str]:
    """Build the report one line at a time.

    Ladder squares come first, then snake squares, each in increasing
    order; then die faces, reroll streaks, overshoot streaks and the
    turn and throw totals. Every ratio is ``count / runs``.
    """
    if runs < 1:
        raise ValueError(f"runs must be positive, got {runs}")
    size = config.dice_size
    lines = [f"runs {runs}"]

    for sq in sorted(board.ladders):
        lines.append(_line(f"lad{sq}", hist.ladder_hits.get(sq, 0), runs))
    for sq in sorted(board.snakes):
        lines.append(_line(f"sna{sq}", hist.snake_hits.get(sq, 0), runs))

    for face in range(1, size + 1):
        lines.append(_line(f"d{size}|{face}", hist.faces.get(face, 0), runs))
    for n in range(1, config.reroll_streak_cap + 1):
        lines.append(_line(f"d{size}|{size}x{n}", hist.reroll_streaks.get(n, 0), runs))

    for n in range(1, config.overshoot_streak_cap + 1):
        lines.append(_line(f"endMissStreak{n}", hist.overshoot_streaks.get(n, 0), runs))

    lines.append(_line("turns", hist.turns, runs))
    lines.append(_line("diceRolls", hist.dice_rolls, runs))
    return lines


def format_report(
    hist: Histograms,
    runs: int,
    board: Board,
    config: SimulationConfig,
) -> str:
    return "\n".join(report_lines(hist, runs, board, config)) + "\n"
