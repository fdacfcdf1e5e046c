"""Error taxonomy for the ball clock.

Boundary errors derive from :exc:`ValueError` and describe bad user input.
Invariant violations derive from :exc:`AssertionError`: they signal a defect
in the transition or dump rule and are never caught by the CLI.
"""

from __future__ import annotations


class BallClockInputError(ValueError):
    """Base class for rejected user input."""


class InvalidArgumentCount(BallClockInputError):
    """Wrong number of positional inputs."""

    def __init__(self, received: int) -> None:
        self.received = received
        super().__init__(
            f"improper number of arguments provided: expected 1 to 2 arguments, got {received}"
        )


class NonIntegerInput(BallClockInputError):
    """An input could not be parsed as an integer."""

    def __init__(self, label: str, value: object) -> None:
        self.label = label
        self.value = value
        super().__init__(f"non integer provided for {label}: {value!r}")


class OutOfRangeInput(BallClockInputError):
    """A parsed integer lies outside its inclusive bounds."""

    def __init__(self, label: str, value: int, minimum: int, maximum: int | None) -> None:
        self.label = label
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        if maximum is None:
            bound = f"must be >= {minimum}"
        else:
            bound = f"must be between {minimum} and {maximum} inclusive"
        super().__init__(f"the value for {label} {bound}: you provided {value}")


class InvariantViolation(AssertionError):
    """Internal state broke a clock invariant."""


class TrackUnderflowError(InvariantViolation):
    """Attempted to take a ball from an empty track."""
