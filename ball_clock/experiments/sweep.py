"""CLI entrypoint for cycle-length sweeps.

Supports ``--config path/to/config.json``; CLI arguments override config-file
values and config-file values override built-in defaults.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from ball_clock.config.constants import MAX_BALL_COUNT, MIN_BALL_COUNT
from ball_clock.config.types import CycleMethod, SweepConfig
from ball_clock.simulation.sweep import run_cycle_sweep

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_method(raw_method: str) -> CycleMethod:
    """Parse cycle method from CLI/config."""
    try:
        return CycleMethod(raw_method)
    except ValueError as exc:
        valid = ", ".join(method.value for method in CycleMethod)
        raise ValueError(f"method must be one of {valid}") from exc


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_str(cli_val: str | None, key: str, file_cfg: dict[str, object], default: str) -> str:
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Compute ball clock cycle lengths over a range")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--min-balls", type=int, default=None)
    parser.add_argument("--max-balls", type=int, default=None)
    parser.add_argument(
        "--method",
        type=str,
        choices=[method.value for method in CycleMethod],
        default=None,
    )
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Run a cycle sweep and print a JSON summary."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")

    try:
        config = SweepConfig(
            min_balls=_get_int(args.min_balls, "min_balls", file_cfg, MIN_BALL_COUNT),
            max_balls=_get_int(args.max_balls, "max_balls", file_cfg, MAX_BALL_COUNT),
            method=_parse_method(
                _get_str(args.method, "method", file_cfg, CycleMethod.PERMUTATION.value)
            ),
            out_dir=Path(_get_str(args.out_dir, "out_dir", file_cfg, "data")),
        )
    except ValueError as exc:
        parser.error(str(exc))

    results = run_cycle_sweep(config)
    longest = max(results, key=lambda r: r.minutes)
    summary = {
        "method": config.method.value,
        "min_balls": config.min_balls,
        "max_balls": config.max_balls,
        "total_runs": len(results),
        "longest_cycle": {"ball_count": longest.ball_count, "days": longest.days},
        "elapsed_seconds": round(sum(r.elapsed_seconds for r in results), 3),
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
