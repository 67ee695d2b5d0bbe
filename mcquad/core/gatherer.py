"""Assembly of per-worker trial means into one ordered result set."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from ..models.results import ResultSet
from .distributor import WorkerAssignment


def gather_results(
    local_results: Sequence[Sequence[float]],
    assignments: Sequence[WorkerAssignment],
    *,
    samples_per_trial: Optional[int] = None,
    base_seed: Optional[int] = None,
) -> ResultSet:
    """
    Concatenate local results in worker-id order.

    ``local_results[r]`` must hold exactly ``assignments[r].trial_count``
    values in the order worker ``r`` executed its trials.
    """
    if len(local_results) != len(assignments):
        raise ValueError(
            f"Expected results from {len(assignments)} workers, received {len(local_results)}"
        )

    chunks = []
    for rank, (values, assignment) in enumerate(zip(local_results, assignments)):
        if assignment.worker_id != rank:
            raise ValueError(f"Assignment at position {rank} belongs to worker {assignment.worker_id}")
        chunk = np.asarray(values, dtype=np.float64).reshape(-1)
        if chunk.size != assignment.trial_count:
            raise ValueError(
                f"Worker {rank} returned {chunk.size} result(s); {assignment.trial_count} were assigned"
            )
        chunks.append(chunk)

    combined = np.concatenate(chunks) if chunks else np.empty(0, dtype=np.float64)
    return ResultSet(
        trial_means=combined,
        worker_trial_counts=[item.trial_count for item in assignments],
        samples_per_trial=samples_per_trial,
        base_seed=base_seed,
    )


__all__ = ["gather_results"]
