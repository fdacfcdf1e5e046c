"""Parquet schema definitions for clock artifacts.

Arrow schemas for the per-minute trace and the cycle sweep are centralised
here so that writers and tests work against the same column contracts.
"""

from __future__ import annotations

import pyarrow as pa

SWEEP_SCHEMA_VERSION = 1

TRACE_SCHEMA = pa.schema(
    [
        ("minute", pa.int64()),
        ("track", pa.string()),
        ("position", pa.int64()),
        ("ball", pa.int64()),
    ]
)

CYCLE_SWEEP_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("ball_count", pa.int64()),
        ("cycle_minutes", pa.int64()),
        ("cycle_days", pa.int64()),
        ("method", pa.string()),
        ("elapsed_seconds", pa.float64()),
    ]
)
