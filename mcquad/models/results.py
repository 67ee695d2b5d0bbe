"""Result data models for reporting."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class EstimateResult(BaseModel):
    """Single-process estimate with its variance diagnostics."""

    sample_count: int = Field(..., gt=0, description="Number of observations drawn")
    seed: int = Field(..., description="Seed used for the random stream")
    mean: float = Field(..., description="Estimate of the integral")
    variance: float = Field(0.0, description="Sample variance of the observations")
    standard_error: float = Field(0.0, description="sqrt(variance / sample_count)")
    elapsed_seconds: float = Field(0.0, ge=0.0)


class ResultSet(BaseModel):
    """Trial means gathered from every worker in worker-major order."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    trial_means: np.ndarray = Field(..., description="One float64 mean per executed trial")
    worker_trial_counts: List[int] = Field(
        ..., description="Trials contributed by each worker, indexed by worker id"
    )
    samples_per_trial: Optional[int] = Field(default=None, description="Observations per trial")
    base_seed: Optional[int] = Field(default=None, description="Seed offset shared by all workers")

    @field_validator("trial_means", mode="before")
    @classmethod
    def _as_float_array(cls, value: Any) -> np.ndarray:
        array = np.array(value, dtype=np.float64).reshape(-1)
        array.setflags(write=False)
        return array

    @model_validator(mode="after")
    def _check_counts(self) -> "ResultSet":
        if any(count < 0 for count in self.worker_trial_counts):
            raise ValueError("worker_trial_counts cannot be negative")
        if sum(self.worker_trial_counts) != self.trial_means.size:
            raise ValueError(
                f"worker_trial_counts sum to {sum(self.worker_trial_counts)} "
                f"but {self.trial_means.size} trial means were supplied"
            )
        return self

    def __len__(self) -> int:
        return int(self.trial_means.size)

    @property
    def worker_count(self) -> int:
        return len(self.worker_trial_counts)

    def _locate(self, index: int) -> tuple[int, int]:
        if not 0 <= index < len(self):
            raise IndexError(f"trial index {index} out of range for {len(self)} results")
        bounds = np.cumsum(self.worker_trial_counts)
        worker = int(np.searchsorted(bounds, index, side="right"))
        start = int(bounds[worker]) - self.worker_trial_counts[worker]
        return worker, index - start

    def worker_of(self, index: int) -> int:
        """Worker rank that produced the trial at global ``index``."""
        return self._locate(index)[0]

    def local_index(self, index: int) -> int:
        """Position of global ``index`` within its worker's execution order."""
        return self._locate(index)[1]

    def worker_slice(self, worker_id: int) -> np.ndarray:
        start = sum(self.worker_trial_counts[:worker_id])
        return self.trial_means[start : start + self.worker_trial_counts[worker_id]]

    def to_frame(self) -> pd.DataFrame:
        workers = np.repeat(np.arange(self.worker_count), self.worker_trial_counts)
        local = np.concatenate(
            [np.arange(count) for count in self.worker_trial_counts] or [np.empty(0, dtype=int)]
        )
        return pd.DataFrame(
            {
                "trial": np.arange(len(self)),
                "worker_id": workers.astype(int),
                "local_index": local.astype(int),
                "mean": self.trial_means,
            }
        )

    def summary(self) -> Dict[str, float]:
        return summarize_means(self.trial_means)


def summarize_means(values: Any) -> Dict[str, float]:
    """Distribution summary for a collection of trial means."""
    series = pd.Series(np.asarray(values, dtype=float), dtype=float)
    count = int(series.size)
    if count == 0:
        return {"count": 0}
    std = float(series.std(ddof=1)) if count > 1 else 0.0
    return {
        "count": count,
        "mean": float(series.mean()),
        "std": std,
        "stderr": std / float(np.sqrt(count)),
        "min": float(series.min()),
        "p5": float(series.quantile(0.05)),
        "p50": float(series.quantile(0.50)),
        "p95": float(series.quantile(0.95)),
        "max": float(series.max()),
    }


__all__ = ["EstimateResult", "ResultSet", "summarize_means"]
