"""Core numerical and partitioning components."""

from .statistics import RunningStatistics
from .sampler import INTEGRANDS, Sampler, ZeroDrawPolicy, exponential_variate, resolve_integrand
from .trial import TrialResult, run_trial, run_trials
from .distributor import RemainderPolicy, WorkerAssignment, derive_base_seed, executed_trials, plan
from .result_validation import ValidationResult, validate_trial_means
from .validator import InputFileError, ValidationError
from .data_loader import TrialSpec, load_sample_count, load_trial_spec
from .gatherer import gather_results

__all__ = [
    "INTEGRANDS",
    "InputFileError",
    "RemainderPolicy",
    "RunningStatistics",
    "Sampler",
    "TrialResult",
    "TrialSpec",
    "ValidationError",
    "ValidationResult",
    "WorkerAssignment",
    "ZeroDrawPolicy",
    "derive_base_seed",
    "executed_trials",
    "exponential_variate",
    "gather_results",
    "load_sample_count",
    "load_trial_spec",
    "plan",
    "resolve_integrand",
    "run_trial",
    "run_trials",
    "validate_trial_means",
]
