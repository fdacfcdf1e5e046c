"""Parquet persistence helpers for minute traces and cycle sweeps."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from ball_clock.config.types import CycleResult
from ball_clock.domain.clock import ClockSnapshot
from ball_clock.io.paths import cycle_sweep_path
from ball_clock.io.schemas import CYCLE_SWEEP_SCHEMA, SWEEP_SCHEMA_VERSION, TRACE_SCHEMA

logger = logging.getLogger(__name__)


def new_trace_columns() -> dict[str, list[int | str]]:
    return {field.name: [] for field in TRACE_SCHEMA}


def append_snapshot_rows(trace_columns: dict[str, list[int | str]], snapshot: ClockSnapshot) -> None:
    """Buffer one row per ball, labelled with its track and position."""
    for track_name, balls in snapshot.to_dict().items():
        for position, ball in enumerate(balls):
            trace_columns["minute"].append(snapshot.minutes_elapsed)
            trace_columns["track"].append(track_name)
            trace_columns["position"].append(position)
            trace_columns["ball"].append(ball)


def flush_trace_columns(
    trace_columns: dict[str, list[int | str]],
    trace_path: Path,
    trace_writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated trace rows to Parquet and clear in-memory buffers."""
    if not trace_columns["minute"]:
        return trace_writer
    table = pa.Table.from_pydict(trace_columns, schema=TRACE_SCHEMA)
    if trace_writer is None:
        trace_path.parent.mkdir(parents=True, exist_ok=True)
        trace_writer = pq.ParquetWriter(trace_path, TRACE_SCHEMA)
    trace_writer.write_table(table)
    logger.debug("Flushed %d trace rows to %s", table.num_rows, trace_path)
    for values in trace_columns.values():
        values.clear()
    return trace_writer


def write_cycle_sweep(results: Sequence[CycleResult], out_dir: Path) -> Path:
    """Persist sweep rows to ``logs/cycle_sweep.parquet`` under ``out_dir``."""
    path = cycle_sweep_path(out_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    table = pa.Table.from_pydict(
        {
            "schema_version": [SWEEP_SCHEMA_VERSION] * len(results),
            "ball_count": [r.ball_count for r in results],
            "cycle_minutes": [r.minutes for r in results],
            "cycle_days": [r.days for r in results],
            "method": [r.method.value for r in results],
            "elapsed_seconds": [r.elapsed_seconds for r in results],
        },
        schema=CYCLE_SWEEP_SCHEMA,
    )
    pq.write_table(table, path)
    logger.info("Wrote %d sweep rows to %s", table.num_rows, path)
    return path
