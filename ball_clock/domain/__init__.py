"""Domain layer: tracks, the clock engine, and cycle analysis."""

from ball_clock.domain.clock import BallClock, ClockSnapshot, dump
from ball_clock.domain.errors import (
    BallClockInputError,
    InvalidArgumentCount,
    InvariantViolation,
    NonIntegerInput,
    OutOfRangeInput,
    TrackUnderflowError,
)
from ball_clock.domain.permutation import (
    cycle_lengths,
    cycle_minutes_by_permutation,
    half_day_permutation,
    permutation_order,
)
from ball_clock.domain.track import Ball, Track

__all__ = [
    "Ball",
    "BallClock",
    "BallClockInputError",
    "ClockSnapshot",
    "InvalidArgumentCount",
    "InvariantViolation",
    "NonIntegerInput",
    "OutOfRangeInput",
    "Track",
    "TrackUnderflowError",
    "cycle_lengths",
    "cycle_minutes_by_permutation",
    "dump",
    "half_day_permutation",
    "permutation_order",
]
