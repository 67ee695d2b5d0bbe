"""Monte Carlo quadrature with online statistics and SPMD trial distribution."""

from .config import SimulationSettings
from .core import (
    InputFileError,
    RemainderPolicy,
    RunningStatistics,
    Sampler,
    TrialResult,
    TrialSpec,
    ValidationError,
    WorkerAssignment,
    ZeroDrawPolicy,
    gather_results,
    plan,
    run_trial,
)
from .engine import MonteCarloQuadrature
from .jobs import Communicator, WorkerFailedError, launch_job
from .models import EstimateResult, JobParameters, JobReport, ResultSet
from .reporting import ResultFileError, read_result_file, write_result_file

__version__ = "0.1.0"

__all__ = [
    "Communicator",
    "EstimateResult",
    "InputFileError",
    "JobParameters",
    "JobReport",
    "MonteCarloQuadrature",
    "RemainderPolicy",
    "ResultFileError",
    "ResultSet",
    "RunningStatistics",
    "Sampler",
    "SimulationSettings",
    "TrialResult",
    "TrialSpec",
    "ValidationError",
    "WorkerAssignment",
    "WorkerFailedError",
    "ZeroDrawPolicy",
    "gather_results",
    "launch_job",
    "plan",
    "read_result_file",
    "run_trial",
    "write_result_file",
]
