"""SPMD job program for parallel trial runs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from ..core.data_loader import TrialSpec
from ..core.distributor import RemainderPolicy, derive_base_seed, plan
from ..core.gatherer import gather_results
from ..core.result_validation import validate_trial_means
from ..core.sampler import Sampler, ZeroDrawPolicy
from ..core.trial import run_trials
from ..models.job import JobParameters, JobReport
from ..models.results import ResultSet
from ..reporting.result_file import write_result_file
from ..utils.timing import Stopwatch
from .communicator import Communicator, WorkerFailedError

LOGGER = logging.getLogger(__name__)


def run_worker(comm: Communicator, parameters: Optional[JobParameters] = None) -> Optional[ResultSet]:
    """
    Program executed by every rank.

    Rank 0 supplies ``parameters``; the other ranks receive them through the
    broadcast. Returns the gathered :class:`ResultSet` on rank 0 and ``None``
    elsewhere.
    """
    params: JobParameters = comm.bcast(parameters if comm.is_root else None)
    assignment = params.assignment_for(comm.rank)
    sampler = Sampler.seeded(assignment.seed, params.integrand, zero_draw=params.zero_draw)
    LOGGER.debug(
        "Rank %d seeded with %d; running %d trial(s) of %d sample(s)",
        comm.rank,
        assignment.seed,
        assignment.trial_count,
        params.samples_per_trial,
    )
    # No rank samples until every rank holds its seed.
    comm.barrier()

    local = run_trials(sampler, params.samples_per_trial, assignment.trial_count)

    gathered = comm.gather(local)
    results: Optional[ResultSet] = None
    if comm.is_root:
        results = gather_results(
            gathered,
            params.assignments,
            samples_per_trial=params.samples_per_trial,
            base_seed=params.base_seed,
        )
    comm.barrier()
    return results


def build_parameters(
    spec: TrialSpec,
    worker_count: int,
    *,
    base_seed: Optional[int] = None,
    integrand: str = "cos",
    zero_draw: ZeroDrawPolicy = ZeroDrawPolicy.SHIFT,
    remainder: RemainderPolicy = RemainderPolicy.DROP,
) -> JobParameters:
    """Derive the seed and assignment table on the coordinator."""
    seed = derive_base_seed() if base_seed is None else int(base_seed)
    assignments = plan(spec.total_trials, worker_count, seed, remainder)
    return JobParameters(
        base_seed=seed,
        samples_per_trial=spec.samples_per_trial,
        assignments=tuple(assignments),
        integrand=integrand,
        zero_draw=ZeroDrawPolicy(zero_draw),
    )


def launch_job(
    spec: TrialSpec,
    comm: Optional[Communicator] = None,
    *,
    base_seed: Optional[int] = None,
    output_path: Optional[Union[str, Path]] = None,
    integrand: str = "cos",
    zero_draw: ZeroDrawPolicy = ZeroDrawPolicy.SHIFT,
    remainder: RemainderPolicy = RemainderPolicy.DROP,
) -> Optional[JobReport]:
    """Run ``spec`` across every rank of ``comm`` (``COMM_WORLD`` by default).

    Must be called on every rank. Rank 0 plans the job, writes the output
    file and returns the :class:`JobReport`; other ranks return ``None``.
    A failure on any rank of a multi-rank job aborts the whole job before
    the output file is written.
    """
    comm = comm or Communicator.world()
    stopwatch = Stopwatch().start()
    parameters: Optional[JobParameters] = None
    try:
        if comm.is_root:
            parameters = build_parameters(
                spec,
                comm.size,
                base_seed=base_seed,
                integrand=integrand,
                zero_draw=zero_draw,
                remainder=remainder,
            )
        results = run_worker(comm, parameters)
    except Exception as exc:
        if comm.size == 1:
            raise
        LOGGER.exception("Rank %d failed", comm.rank)
        comm.abort()
        raise WorkerFailedError(f"rank {comm.rank} failed: {exc}; job aborted") from exc

    if not comm.is_root:
        return None
    assert parameters is not None and results is not None

    written: Optional[Path] = None
    if output_path is not None:
        written = write_result_file(output_path, results)

    elapsed = stopwatch.stop()
    validation = validate_trial_means(results.trial_means)
    if not validation.passed:
        LOGGER.warning("Trial means failed validation: %s", ", ".join(validation.failed_checks))
    return JobReport(
        parameters=parameters,
        results=results,
        requested_trials=spec.total_trials,
        elapsed_seconds=elapsed,
        clock_precision=stopwatch.precision,
        validation=validation,
        output_path=written,
    )


__all__ = ["build_parameters", "launch_job", "run_worker"]
