"""Configuration dataclasses and result containers for clock runs.

All frozen dataclasses that parameterise a single run or a cycle sweep live
here. Bounds are checked in ``__post_init__`` so an invalid config can never
reach the engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from ball_clock.config.constants import MAX_BALL_COUNT, MIN_BALL_COUNT, MINUTES_PER_DAY
from ball_clock.domain.errors import OutOfRangeInput

if TYPE_CHECKING:
    from ball_clock.domain.clock import ClockSnapshot

__all__ = [
    "ClockConfig",
    "CycleMethod",
    "CycleResult",
    "PointInTimeResult",
    "RunMode",
    "SweepConfig",
]


class RunMode(Enum):
    """What a single run reports."""

    CYCLE = "cycle"
    POINT_IN_TIME = "point_in_time"


class CycleMethod(Enum):
    """How cycle length is computed."""

    STEP = "step"
    PERMUTATION = "permutation"


def _check_ball_count(ball_count: int) -> None:
    if not MIN_BALL_COUNT <= ball_count <= MAX_BALL_COUNT:
        raise OutOfRangeInput("number of balls", ball_count, MIN_BALL_COUNT, MAX_BALL_COUNT)


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ClockConfig:
    """Inputs for one run. ``minutes`` selects point-in-time mode when set."""

    ball_count: int
    minutes: int | None = None
    method: CycleMethod = CycleMethod.STEP

    def __post_init__(self) -> None:
        _check_ball_count(self.ball_count)
        if self.minutes is not None and self.minutes < 0:
            raise OutOfRangeInput("minutes to simulate", self.minutes, 0, None)

    @property
    def mode(self) -> RunMode:
        return RunMode.CYCLE if self.minutes is None else RunMode.POINT_IN_TIME


@dataclass(frozen=True)
class SweepConfig:
    """Cycle-length sweep over an inclusive ball-count range."""

    min_balls: int = MIN_BALL_COUNT
    max_balls: int = MAX_BALL_COUNT
    method: CycleMethod = CycleMethod.PERMUTATION
    out_dir: Path = Path("data")

    def __post_init__(self) -> None:
        _check_ball_count(self.min_balls)
        _check_ball_count(self.max_balls)
        if self.min_balls > self.max_balls:
            raise ValueError("min_balls must be <= max_balls")

    @property
    def ball_counts(self) -> range:
        return range(self.min_balls, self.max_balls + 1)


# ---------------------------------------------------------------------------
# Result containers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CycleResult:
    """Cycle length for one ball count."""

    ball_count: int
    minutes: int
    method: CycleMethod
    elapsed_seconds: float

    @property
    def days(self) -> int:
        """Whole days; partial days are discarded."""
        return self.minutes // MINUTES_PER_DAY


@dataclass(frozen=True)
class PointInTimeResult:
    """Clock state after a fixed number of minutes."""

    ball_count: int
    minutes: int
    snapshot: ClockSnapshot
    elapsed_seconds: float
