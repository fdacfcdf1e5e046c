"""FIFO track holding ball identifiers.

A track never enforces its own capacity: the clock checks ``is_full`` after
each insertion and dumps the track through ``drain_reverse_except_last``.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

from ball_clock.domain.errors import TrackUnderflowError

Ball = int


class Track:
    """Ordered holding area; front is the next ball to act."""

    __slots__ = ("name", "_balls")

    def __init__(self, name: str, balls: Iterable[Ball] = ()) -> None:
        self.name = name
        self._balls: deque[Ball] = deque(balls)

    def __len__(self) -> int:
        return len(self._balls)

    def __iter__(self) -> Iterator[Ball]:
        return iter(self._balls)

    def __repr__(self) -> str:
        return f"Track({self.name!r}, {list(self._balls)!r})"

    def push_back(self, ball: Ball) -> None:
        self._balls.append(ball)

    def extend(self, balls: Iterable[Ball]) -> None:
        self._balls.extend(balls)

    def pop_front(self) -> Ball:
        """Remove and return the head ball."""
        if not self._balls:
            raise TrackUnderflowError(f"cannot pop from empty track {self.name!r}")
        return self._balls.popleft()

    def is_full(self, capacity: int) -> bool:
        return len(self._balls) == capacity

    def is_ordered_ascending_full(self, expected_length: int) -> bool:
        """True when the track holds ``expected_length`` strictly increasing balls."""
        if len(self._balls) != expected_length:
            return False
        previous = 0
        for ball in self._balls:
            if ball <= previous:
                return False
            previous = ball
        return True

    def drain_reverse_except_last(self) -> tuple[list[Ball], Ball]:
        """Empty the track.

        Returns every ball but the tail in reverse positional order (the ball
        just before the tail first, the head last), plus the tail ball.
        """
        if not self._balls:
            raise TrackUnderflowError(f"cannot drain empty track {self.name!r}")
        last = self._balls.pop()
        moved = list(reversed(self._balls))
        self._balls.clear()
        return moved, last

    def to_list(self) -> list[Ball]:
        return list(self._balls)
