"""Single Monte Carlo trial execution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .sampler import Sampler
from .statistics import RunningStatistics


@dataclass(frozen=True)
class TrialResult:
    """Outcome of one trial. ``variance`` is None when it was not tracked."""

    mean: float
    sample_count: int
    variance: Optional[float] = None


def run_trial(sampler: Sampler, sample_count: int, *, track_variance: bool = False) -> TrialResult:
    """Feed ``sample_count`` sequential draws through a fresh accumulator."""
    if sample_count <= 0:
        raise ValueError("sample_count must be positive")
    stats = RunningStatistics(track_variance=track_variance)
    for _ in range(sample_count):
        stats.observe(sampler.draw())
    return TrialResult(
        mean=stats.mean,
        sample_count=stats.count,
        variance=stats.variance if track_variance else None,
    )


def run_trials(sampler: Sampler, sample_count: int, trial_count: int) -> list[float]:
    """Run ``trial_count`` mean-only trials back to back on one stream."""
    return [run_trial(sampler, sample_count).mean for _ in range(trial_count)]


__all__ = ["TrialResult", "run_trial", "run_trials"]
