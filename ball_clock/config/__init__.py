"""Configuration layer: constants and typed config dataclasses."""

from ball_clock.config.constants import (
    FIVE_MINUTE_CAPACITY,
    FLUSH_THRESHOLD,
    HALF_DAY_MINUTES,
    HOUR_CAPACITY,
    MAX_BALL_COUNT,
    MIN_BALL_COUNT,
    MINUTE_CAPACITY,
    MINUTES_PER_DAY,
    TRACK_NAMES,
)
from ball_clock.config.types import (
    ClockConfig,
    CycleMethod,
    CycleResult,
    PointInTimeResult,
    RunMode,
    SweepConfig,
)

__all__ = [
    "ClockConfig",
    "CycleMethod",
    "CycleResult",
    "FIVE_MINUTE_CAPACITY",
    "FLUSH_THRESHOLD",
    "HALF_DAY_MINUTES",
    "HOUR_CAPACITY",
    "MAX_BALL_COUNT",
    "MIN_BALL_COUNT",
    "MINUTE_CAPACITY",
    "MINUTES_PER_DAY",
    "PointInTimeResult",
    "RunMode",
    "SweepConfig",
    "TRACK_NAMES",
]
