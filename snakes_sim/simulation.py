"""Drive many independent games against one shared context."""

from __future__ import annotations

import logging
from typing import TextIO

from snakes_sim.game import GameRunner, SimulationContext
from snakes_sim.stats import Histograms

logger = logging.getLogger(__name__)


class SimulationDriver:
    """Run ``context.config.runs`` games, folding results into the context's histograms.

    Progress is the zero-based index of each completed run that is a
    multiple of ``config.progress_every``, one per line on *progress*.
    No progress is written when *progress* is ``None``.
    """

    def __init__(
        self,
        context: SimulationContext,
        progress: TextIO | None = None,
    ):
        self.context = context
        self.progress = progress
        self.runner = GameRunner(context)

    def run(self, runs: int | None = None) -> Histograms:
        runs = self.context.config.runs if runs is None else runs
        every = self.context.config.progress_every
        logger.info("Starting %d runs", runs)

        for run_idx in range(runs):
            self.runner.play()
            if self.progress is not None and run_idx % every == 0:
                print(run_idx, file=self.progress, flush=True)

        hist = self.context.histograms
        logger.info("Finished %d runs: %d turns, %d dice rolls", runs, hist.turns, hist.dice_rolls)
        return hist
