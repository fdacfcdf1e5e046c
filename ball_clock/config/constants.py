"""Centralized domain constants for the ball clock.

Track capacities and ball-count bounds are fixed properties of the classic
clock design. Consuming modules should import from this module rather than
defining their own inline literals.
"""

from __future__ import annotations

MINUTE_CAPACITY = 5
"""Balls on the minute track that trigger a dump (the fifth ball is the carry)."""

FIVE_MINUTE_CAPACITY = 12
"""Balls on the five-minute track that trigger a dump."""

HOUR_CAPACITY = 12
"""Balls on the hour track that trigger a dump back into the main reservoir."""

MIN_BALL_COUNT = 27
"""Smallest ball count that keeps the main reservoir non-empty."""

MAX_BALL_COUNT = 127
"""Largest supported ball count."""

MINUTES_PER_DAY = 1_440
"""Minutes in one day; cycle lengths are reported in whole days."""

HALF_DAY_MINUTES = 720
"""Minutes after which every non-main track is empty again."""

TRACK_NAMES: tuple[str, ...] = ("Main", "Min", "FiveMin", "Hour")
"""Externally visible track labels, in snapshot field order."""

FLUSH_THRESHOLD = 8_192
"""Flush minute-trace rows to Parquet once this in-memory row count is reached."""
