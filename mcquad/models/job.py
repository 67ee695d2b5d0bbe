"""Job payloads exchanged between the coordinator and workers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from ..core.distributor import WorkerAssignment
from ..core.result_validation import ValidationResult
from ..core.sampler import ZeroDrawPolicy
from .results import ResultSet


@dataclass(frozen=True)
class JobParameters:
    """Everything a worker needs before it may start sampling.

    Built once by the coordinator and broadcast unchanged to every rank.
    """

    base_seed: int
    samples_per_trial: int
    assignments: Tuple[WorkerAssignment, ...]
    integrand: str = "cos"
    zero_draw: ZeroDrawPolicy = ZeroDrawPolicy.SHIFT

    @property
    def worker_count(self) -> int:
        return len(self.assignments)

    @property
    def trials_per_worker(self) -> int:
        """Trial count of worker 0 (the largest share under any policy)."""
        return self.assignments[0].trial_count if self.assignments else 0

    def assignment_for(self, rank: int) -> WorkerAssignment:
        assignment = self.assignments[rank]
        if assignment.worker_id != rank:
            raise ValueError(f"assignment table is out of order at rank {rank}")
        return assignment


@dataclass
class JobReport:
    """Coordinator-side outcome of a parallel job."""

    parameters: JobParameters
    results: ResultSet
    requested_trials: int
    elapsed_seconds: float
    clock_precision: float
    validation: ValidationResult
    output_path: Optional[Path] = None

    @property
    def dropped_trials(self) -> int:
        return self.requested_trials - len(self.results)


__all__ = ["JobParameters", "JobReport"]
