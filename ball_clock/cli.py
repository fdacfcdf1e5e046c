"""CLI entrypoint for single clock runs.

Mode 1 (cycle length): ``ball-clock BALLS``
Mode 2 (point in time): ``ball-clock BALLS MINUTES``
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from ball_clock.config.constants import MAX_BALL_COUNT, MIN_BALL_COUNT
from ball_clock.config.types import ClockConfig, CycleMethod, CycleResult
from ball_clock.domain.errors import (
    BallClockInputError,
    InvalidArgumentCount,
    NonIntegerInput,
    OutOfRangeInput,
)
from ball_clock.simulation.engine import run

logger = logging.getLogger(__name__)

USAGE_GUIDANCE = (
    "Please choose one of the following:\n"
    f"  Mode 1: enter the number of balls (int) to simulate, {MIN_BALL_COUNT} to {MAX_BALL_COUNT}\n"
    "  or\n"
    f"  Mode 2: enter the number of balls (int) to simulate, {MIN_BALL_COUNT} to {MAX_BALL_COUNT},\n"
    "  and the number of minutes (int) to run the simulation, separated by a space"
)

# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------


def parse_int_between(raw: str, label: str, minimum: int, maximum: int | None) -> int:
    """Parse ``raw`` as an integer inside ``[minimum, maximum]`` (no upper bound if None)."""
    try:
        value = int(raw)
    except ValueError as exc:
        raise NonIntegerInput(label, raw) from exc
    if value < minimum or (maximum is not None and value > maximum):
        raise OutOfRangeInput(label, value, minimum, maximum)
    return value


def resolve_inputs(values: Sequence[str], method: CycleMethod = CycleMethod.STEP) -> ClockConfig:
    """Validate raw positional inputs and select the run mode."""
    if len(values) not in (1, 2):
        raise InvalidArgumentCount(len(values))
    minutes = None
    if len(values) == 2:
        minutes = parse_int_between(values[1], "minutes to simulate", 0, None)
    ball_count = parse_int_between(
        values[0], "number of balls", MIN_BALL_COUNT, MAX_BALL_COUNT
    )
    return ClockConfig(ball_count=ball_count, minutes=minutes, method=method)


def format_duration(elapsed_seconds: float) -> str:
    milliseconds = int(elapsed_seconds * 1000 + 0.5)
    return f"Completed in {milliseconds} milliseconds ({elapsed_seconds:.3f} seconds)"


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Simulate a mechanical ball clock",
        epilog=USAGE_GUIDANCE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("values", nargs="*", metavar="BALLS [MINUTES]")
    parser.add_argument(
        "--method",
        type=str,
        choices=[method.value for method in CycleMethod],
        default=CycleMethod.STEP.value,
        help="Cycle-length computation (mode 1 only)",
    )
    parser.add_argument(
        "--trace",
        type=Path,
        default=None,
        help="Write the state after every minute to this Parquet file (mode 2 only)",
    )
    parser.add_argument("--log-level", type=str, default="WARNING")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        config = resolve_inputs(args.values, method=CycleMethod(args.method))
    except InvalidArgumentCount as exc:
        parser.error(f"{exc}\n{USAGE_GUIDANCE}")
    except BallClockInputError as exc:
        parser.error(str(exc))

    result = run(config, trace_path=args.trace)
    if isinstance(result, CycleResult):
        print(f"{result.ball_count} balls cycle after {result.days} days.")
    else:
        print(result.snapshot.to_json())
    print(format_duration(result.elapsed_seconds))


if __name__ == "__main__":
    main()
