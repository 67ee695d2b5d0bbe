"""Online mean/variance accumulator for Monte Carlo observations.

The recurrences below fix the update order:

    variance[n] = ((n-2)/(n-1)) * variance[n-1] + (1/n) * (x_n - mean[n-1])**2
    mean[n]     = ((n-1)/n) * mean[n-1] + x_n / n

``variance`` must be updated first because it consumes the mean *before*
the n-th observation is folded in. The result is the unbiased sample
variance of all ``n`` observations, but accumulated rounding differs from a
two-pass or Welford computation.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import sqrt
from typing import Iterable


@dataclass
class RunningStatistics:
    """Mean and (optionally) sample variance of a stream in O(1) memory."""

    count: int = 0
    mean: float = 0.0
    variance: float = 0.0
    track_variance: bool = True

    def observe(self, x: float) -> None:
        """Fold one observation into the running estimates."""
        n = self.count + 1
        if self.track_variance and n > 1:
            self.variance = ((n - 2.0) / (n - 1.0)) * self.variance + (1.0 / n) * (x - self.mean) ** 2
        self.mean = ((n - 1.0) / n) * self.mean + x / n
        self.count = n

    def observe_many(self, values: Iterable[float]) -> "RunningStatistics":
        for value in values:
            self.observe(value)
        return self

    @property
    def standard_error(self) -> float:
        """Standard error of the mean; 0.0 until two observations are seen."""
        if self.count < 2 or not self.track_variance:
            return 0.0
        return sqrt(self.variance / self.count)


__all__ = ["RunningStatistics"]
