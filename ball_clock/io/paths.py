"""Path construction helpers for clock output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def cycle_sweep_path(out_dir: Path) -> Path:
    """Return path to the cycle sweep Parquet file."""
    return logs_dir(out_dir) / "cycle_sweep.parquet"
