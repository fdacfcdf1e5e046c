"""Tests for cycle sweeps and their Parquet output."""

from __future__ import annotations

from pathlib import Path

import pyarrow.parquet as pq

from ball_clock.config.types import CycleMethod, SweepConfig
from ball_clock.io.schemas import CYCLE_SWEEP_SCHEMA
from ball_clock.simulation.sweep import run_cycle_sweep


class TestRunCycleSweep:
    def test_returns_one_result_per_ball_count(self, tmp_path: Path) -> None:
        results = run_cycle_sweep(SweepConfig(min_balls=27, max_balls=31, out_dir=tmp_path))
        assert [r.ball_count for r in results] == [27, 28, 29, 30, 31]
        assert [r.days for r in results] == [23, 76, 102, 15, 85]

    def test_writes_cycle_sweep_parquet(self, tmp_path: Path) -> None:
        run_cycle_sweep(SweepConfig(min_balls=27, max_balls=30, out_dir=tmp_path))
        table = pq.read_table(tmp_path / "logs" / "cycle_sweep.parquet")
        assert table.schema.equals(CYCLE_SWEEP_SCHEMA)
        assert table.column("ball_count").to_pylist() == [27, 28, 29, 30]
        assert table.column("cycle_minutes").to_pylist() == [33_120, 109_440, 146_880, 21_600]
        assert set(table.column("method").to_pylist()) == {"permutation"}

    def test_step_method_agrees(self, tmp_path: Path) -> None:
        results = run_cycle_sweep(
            SweepConfig(min_balls=30, max_balls=30, method=CycleMethod.STEP, out_dir=tmp_path)
        )
        assert results[0].minutes == 21_600

    def test_persist_false_writes_nothing(self, tmp_path: Path) -> None:
        run_cycle_sweep(SweepConfig(min_balls=27, max_balls=27, out_dir=tmp_path), persist=False)
        assert not (tmp_path / "logs").exists()
