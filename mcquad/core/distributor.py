"""Trial partitioning and per-worker seed derivation."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

LOGGER = logging.getLogger(__name__)


class RemainderPolicy(str, Enum):
    """What to do with ``T mod W`` trials that do not split evenly."""

    DROP = "drop"
    REDISTRIBUTE = "redistribute"


@dataclass(frozen=True)
class WorkerAssignment:
    """Fixed work unit for one worker rank."""

    worker_id: int
    trial_count: int
    seed: int
    offset: int = 0  # global index of this worker's first trial


def derive_base_seed(clock: Optional[Callable[[], float]] = None) -> int:
    """Whole seconds of wall-clock time at job start."""
    now = (clock or time.time)()
    return int(now)


def worker_seed(base_seed: int, worker_id: int) -> int:
    return base_seed + worker_id


def plan(
    total_trials: int,
    worker_count: int,
    base_seed: int,
    policy: RemainderPolicy = RemainderPolicy.DROP,
) -> List[WorkerAssignment]:
    """
    Split ``total_trials`` across ``worker_count`` ranks.

    With ``RemainderPolicy.DROP`` every worker receives ``total_trials //
    worker_count`` trials and the remainder is never executed. With
    ``REDISTRIBUTE`` the lowest ranks each take one of the leftover trials.
    """
    if worker_count <= 0:
        raise ValueError("worker_count must be positive")
    if total_trials < 0:
        raise ValueError("total_trials must be non-negative")
    if base_seed < 0:
        raise ValueError("base_seed must be non-negative")

    policy = RemainderPolicy(policy)
    per_worker, remainder = divmod(total_trials, worker_count)
    if remainder and policy is RemainderPolicy.DROP:
        LOGGER.warning(
            "%d trial(s) do not divide evenly across %d workers and will not run (%d of %d executed).",
            remainder,
            worker_count,
            per_worker * worker_count,
            total_trials,
        )

    assignments: List[WorkerAssignment] = []
    offset = 0
    for worker_id in range(worker_count):
        count = per_worker
        if policy is RemainderPolicy.REDISTRIBUTE and worker_id < remainder:
            count += 1
        assignments.append(
            WorkerAssignment(
                worker_id=worker_id,
                trial_count=count,
                seed=worker_seed(base_seed, worker_id),
                offset=offset,
            )
        )
        offset += count

    LOGGER.info(
        "Planned %d trial(s) over %d worker(s) from base seed %d (policy=%s).",
        offset,
        worker_count,
        base_seed,
        policy.value,
    )
    return assignments


def executed_trials(assignments: List[WorkerAssignment]) -> int:
    return sum(item.trial_count for item in assignments)


__all__ = [
    "RemainderPolicy",
    "WorkerAssignment",
    "derive_base_seed",
    "executed_trials",
    "plan",
    "worker_seed",
]
