"""High-level orchestration for Monte Carlo quadrature runs."""

from __future__ import annotations

import logging
from math import sqrt
from pathlib import Path
from typing import Optional, Union

from .config import SimulationSettings
from .core.data_loader import TrialSpec, load_sample_count, load_trial_spec
from .core.distributor import RemainderPolicy, derive_base_seed
from .core.sampler import Sampler, ZeroDrawPolicy
from .core.trial import run_trial
from .core.validator import ValidationError, validate_positive
from .jobs.communicator import Communicator
from .jobs.job_manager import launch_job
from .models.job import JobReport
from .models.results import EstimateResult
from .utils.timing import Stopwatch

LOGGER = logging.getLogger(__name__)

PathLike = Union[str, Path]


class MonteCarloQuadrature:
    """Primary entry point for estimating ``E[g(Y)]`` with ``Y ~ Exp(1)``."""

    def __init__(self, settings: Optional[SimulationSettings] = None) -> None:
        self.settings = settings or SimulationSettings.from_env()

    # ---------------------------------------------------------- single process
    def estimate(self, sample_count: int, *, seed: Optional[int] = None) -> EstimateResult:
        """Run one trial of ``sample_count`` draws with variance tracking."""
        validate_positive("sample count", sample_count)
        seed = derive_base_seed() if seed is None else int(seed)
        LOGGER.info("Estimating with %d sample(s), seed %d", sample_count, seed)

        stopwatch = Stopwatch().start()
        sampler = Sampler.seeded(seed, self.settings.integrand, zero_draw=self.settings.zero_draw)
        trial = run_trial(sampler, sample_count, track_variance=True)
        elapsed = stopwatch.stop()

        variance = trial.variance or 0.0
        return EstimateResult(
            sample_count=trial.sample_count,
            seed=seed,
            mean=trial.mean,
            variance=variance,
            standard_error=sqrt(variance / trial.sample_count),
            elapsed_seconds=elapsed,
        )

    def estimate_from_file(self, input_path: PathLike, *, seed: Optional[int] = None) -> EstimateResult:
        return self.estimate(load_sample_count(input_path), seed=seed)

    # ---------------------------------------------------------------- parallel
    def run_trials(
        self,
        spec: TrialSpec,
        *,
        comm: Optional[Communicator] = None,
        seed: Optional[int] = None,
        output_path: Optional[PathLike] = None,
        remainder: Optional[RemainderPolicy] = None,
    ) -> Optional[JobReport]:
        """Distribute ``spec.total_trials`` trials over the ranks of ``comm``.

        Call on every rank; only rank 0 receives the :class:`JobReport`.
        """
        return launch_job(
            spec,
            comm,
            base_seed=seed,
            output_path=output_path,
            integrand=self.settings.integrand,
            zero_draw=ZeroDrawPolicy(self.settings.zero_draw),
            remainder=RemainderPolicy(remainder or self.settings.remainder),
        )

    def run_trials_from_file(
        self,
        input_path: PathLike,
        output_path: Optional[PathLike] = None,
        *,
        comm: Optional[Communicator] = None,
        **kwargs,
    ) -> Optional[JobReport]:
        """Parse ``input_path`` on rank 0 and run the job it describes on every rank.

        An unreadable or malformed input file raises the same error on every
        rank, so no rank is left waiting in a collective.
        """
        comm = comm or Communicator.world()
        spec: Optional[TrialSpec] = None
        error: Optional[ValidationError] = None
        if comm.is_root:
            try:
                spec = load_trial_spec(input_path)
            except ValidationError as exc:
                error = exc
        spec, error = comm.bcast((spec, error))
        if error is not None:
            raise error
        return self.run_trials(spec, comm=comm, output_path=output_path, **kwargs)


__all__ = ["MonteCarloQuadrature"]
