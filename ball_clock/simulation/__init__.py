"""Run drivers, cycle sweeps, and Parquet persistence."""

from ball_clock.simulation.engine import (
    cycle_minutes_by_stepping,
    run,
    run_cycle_length,
    run_point_in_time,
)
from ball_clock.simulation.persistence import (
    append_snapshot_rows,
    flush_trace_columns,
    new_trace_columns,
    write_cycle_sweep,
)
from ball_clock.simulation.sweep import run_cycle_sweep

__all__ = [
    "append_snapshot_rows",
    "cycle_minutes_by_stepping",
    "flush_trace_columns",
    "new_trace_columns",
    "run",
    "run_cycle_length",
    "run_cycle_sweep",
    "run_point_in_time",
    "write_cycle_sweep",
]
