"""Experiment orchestration: cycle sweeps across ball counts."""

from ball_clock.experiments.sweep import main

__all__ = ["main"]
