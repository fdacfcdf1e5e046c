"""Cycle-length sweep across a range of ball counts."""

from __future__ import annotations

import logging

from ball_clock.config.types import CycleResult, SweepConfig
from ball_clock.simulation.engine import run_cycle_length
from ball_clock.simulation.persistence import write_cycle_sweep

logger = logging.getLogger(__name__)


def run_cycle_sweep(config: SweepConfig, persist: bool = True) -> list[CycleResult]:
    """Compute the cycle length of every ball count in ``config`` and persist the rows."""
    results: list[CycleResult] = []
    for ball_count in config.ball_counts:
        results.append(run_cycle_length(ball_count, method=config.method))
    logger.info(
        "Swept %d ball counts (%d..%d)", len(results), config.min_balls, config.max_balls
    )
    if persist:
        write_cycle_sweep(results, config.out_dir)
    return results
