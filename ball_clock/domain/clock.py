"""Ball clock engine: four tracks and the per-minute transition.

Each minute the front ball of the main reservoir rolls onto the minute track.
A track that reaches capacity dumps: its tail ball (the carry) advances to the
next tier and the remaining balls return to the main reservoir in reverse
order. Dumps cascade within the same minute.

Conservation invariant: after every minute the four tracks together hold each
ball 1..N exactly once.
"""

from __future__ import annotations

import json
from dataclasses import dataclass

from ball_clock.config.constants import (
    FIVE_MINUTE_CAPACITY,
    HOUR_CAPACITY,
    MAX_BALL_COUNT,
    MIN_BALL_COUNT,
    MINUTE_CAPACITY,
    TRACK_NAMES,
)
from ball_clock.domain.errors import OutOfRangeInput
from ball_clock.domain.track import Ball, Track


@dataclass(frozen=True)
class ClockSnapshot:
    """Immutable view of the four tracks, each ordered front to back."""

    minutes_elapsed: int
    main: tuple[Ball, ...]
    minute: tuple[Ball, ...]
    five_minute: tuple[Ball, ...]
    hour: tuple[Ball, ...]

    def to_dict(self) -> dict[str, list[Ball]]:
        """Return the track contents keyed by their external labels."""
        tracks = (self.main, self.minute, self.five_minute, self.hour)
        return {name: list(balls) for name, balls in zip(TRACK_NAMES, tracks, strict=True)}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    def all_balls(self) -> list[Ball]:
        return [*self.main, *self.minute, *self.five_minute, *self.hour]


def dump(source: Track, destination: Track, main: Track) -> Ball:
    """Empty a full ``source`` track and return the carry ball.

    Non-carry balls always go to ``main``; only the carry reaches
    ``destination``, which may be ``main`` itself.
    """
    moved, carry = source.drain_reverse_except_last()
    main.extend(moved)
    destination.push_back(carry)
    return carry


class BallClock:
    """Sequential ball clock state machine."""

    def __init__(self, ball_count: int) -> None:
        if not MIN_BALL_COUNT <= ball_count <= MAX_BALL_COUNT:
            raise OutOfRangeInput("number of balls", ball_count, MIN_BALL_COUNT, MAX_BALL_COUNT)
        self.ball_count = ball_count
        self.minutes_elapsed = 0
        self.main = Track("Main", range(1, ball_count + 1))
        self.minute = Track("Min")
        self.five_minute = Track("FiveMin")
        self.hour = Track("Hour")
        # (source, destination, capacity) in cascade order
        self._tiers: tuple[tuple[Track, Track, int], ...] = (
            (self.minute, self.five_minute, MINUTE_CAPACITY),
            (self.five_minute, self.hour, FIVE_MINUTE_CAPACITY),
            (self.hour, self.main, HOUR_CAPACITY),
        )

    def __repr__(self) -> str:
        return f"BallClock(ball_count={self.ball_count}, minutes_elapsed={self.minutes_elapsed})"

    def advance_one_minute(self) -> None:
        """Move one ball onto the minute track and run any cascading dumps."""
        self.minute.push_back(self.main.pop_front())
        for source, destination, capacity in self._tiers:
            if not source.is_full(capacity):
                break
            dump(source, destination, self.main)
        self.minutes_elapsed += 1

    def advance(self, minutes: int) -> None:
        if minutes < 0:
            raise ValueError("minutes must be >= 0")
        for _ in range(minutes):
            self.advance_one_minute()

    def is_initial_order(self) -> bool:
        """True when the main reservoir is back to 1..N in ascending order."""
        return self.main.is_ordered_ascending_full(self.ball_count)

    def snapshot(self) -> ClockSnapshot:
        return ClockSnapshot(
            minutes_elapsed=self.minutes_elapsed,
            main=tuple(self.main),
            minute=tuple(self.minute),
            five_minute=tuple(self.five_minute),
            hour=tuple(self.hour),
        )
