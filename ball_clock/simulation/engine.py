"""Run drivers: the cycle-length and point-in-time loops around ``BallClock``.

The engine never decides when to stop; the loops here evaluate the
termination predicate between minutes and time the whole run.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from ball_clock.config.constants import FLUSH_THRESHOLD
from ball_clock.config.types import (
    ClockConfig,
    CycleMethod,
    CycleResult,
    PointInTimeResult,
    RunMode,
)
from ball_clock.domain.clock import BallClock
from ball_clock.domain.permutation import cycle_minutes_by_permutation
from ball_clock.simulation.persistence import (
    append_snapshot_rows,
    flush_trace_columns,
    new_trace_columns,
)

logger = logging.getLogger(__name__)


def cycle_minutes_by_stepping(ball_count: int) -> int:
    """Step minute by minute until main returns to 1..N ascending."""
    clock = BallClock(ball_count)
    clock.advance_one_minute()
    while not clock.is_initial_order():
        clock.advance_one_minute()
    return clock.minutes_elapsed


def run_cycle_length(
    ball_count: int, method: CycleMethod = CycleMethod.STEP
) -> CycleResult:
    """Compute how long ``ball_count`` balls take to return to their initial order."""
    logger.info("Computing cycle length for %d balls (method=%s)", ball_count, method.value)
    t0 = time.perf_counter()
    if method == CycleMethod.PERMUTATION:
        minutes = cycle_minutes_by_permutation(ball_count)
    else:
        minutes = cycle_minutes_by_stepping(ball_count)
    elapsed = time.perf_counter() - t0
    result = CycleResult(
        ball_count=ball_count, minutes=minutes, method=method, elapsed_seconds=elapsed
    )
    logger.info("%d balls cycle after %d minutes (%d days)", ball_count, minutes, result.days)
    return result


def run_point_in_time(
    ball_count: int, minutes: int, trace_path: Path | None = None
) -> PointInTimeResult:
    """Advance exactly ``minutes`` minutes and snapshot the clock.

    When ``trace_path`` is given, the state after every minute (and the
    initial state as minute 0) is written there as Parquet.
    """
    if minutes < 0:
        raise ValueError("minutes must be >= 0")
    logger.info("Simulating %d balls for %d minutes", ball_count, minutes)
    t0 = time.perf_counter()
    clock = BallClock(ball_count)
    if trace_path is None:
        clock.advance(minutes)
    else:
        _advance_with_trace(clock, minutes, trace_path)
    snapshot = clock.snapshot()
    elapsed = time.perf_counter() - t0
    return PointInTimeResult(
        ball_count=ball_count, minutes=minutes, snapshot=snapshot, elapsed_seconds=elapsed
    )


def _advance_with_trace(clock: BallClock, minutes: int, trace_path: Path) -> None:
    trace_columns = new_trace_columns()
    trace_writer = None
    try:
        append_snapshot_rows(trace_columns, clock.snapshot())
        for _ in range(minutes):
            clock.advance_one_minute()
            append_snapshot_rows(trace_columns, clock.snapshot())
            if len(trace_columns["minute"]) >= FLUSH_THRESHOLD:
                trace_writer = flush_trace_columns(trace_columns, trace_path, trace_writer)
        trace_writer = flush_trace_columns(trace_columns, trace_path, trace_writer)
    finally:
        if trace_writer is not None:
            trace_writer.close()
    logger.info("Wrote minute trace to %s", trace_path)


def run(config: ClockConfig, trace_path: Path | None = None) -> CycleResult | PointInTimeResult:
    """Dispatch on ``config.mode``."""
    if config.mode == RunMode.POINT_IN_TIME:
        assert config.minutes is not None
        return run_point_in_time(config.ball_count, config.minutes, trace_path=trace_path)
    return run_cycle_length(config.ball_count, method=config.method)
