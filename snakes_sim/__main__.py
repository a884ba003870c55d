"""CLI entry point: python -m snakes_sim [--runs N] [--seed N] [--verbose] [--quiet]."""

from __future__ import annotations

import argparse
import random
import sys

from snakes_sim.board import Board
from snakes_sim.config import RUNS, SimulationConfig
from snakes_sim.dice import Dice, time_seeded_rng
from snakes_sim.game import LoggingObserver, NullObserver, SimulationContext
from snakes_sim.logging_utils import setup_logging
from snakes_sim.report import format_report
from snakes_sim.simulation import SimulationDriver


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return n


def build_context(args: argparse.Namespace) -> SimulationContext:
    config = SimulationConfig(runs=args.runs)
    rng = random.Random(args.seed) if args.seed is not None else time_seeded_rng()
    observer = LoggingObserver() if args.verbose else NullObserver()
    return SimulationContext(
        config=config,
        board=Board(),
        dice=Dice(size=config.dice_size, rng=rng),
        observer=observer,
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="snakes_sim",
        description="Monte Carlo statistics for Snakes & Ladders with a re-rolling die",
    )
    parser.add_argument("--runs", type=_positive_int, default=RUNS, help=f"Games to simulate (default {RUNS})")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible run (default: current time)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Trace every turn to stderr")
    parser.add_argument("--quiet", "-q", action="store_true", help="Suppress progress lines")

    args = parser.parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "WARNING")

    ctx = build_context(args)
    driver = SimulationDriver(ctx, progress=None if args.quiet else sys.stdout)
    hist = driver.run()
    print(format_report(hist, ctx.config.runs, ctx.board, ctx.config), end="")


if __name__ == "__main__":
    main()
