"""Validation helpers for gathered trial means."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence

import numpy as np


@dataclass
class ValidationResult:
    """Basic container for validation outcomes."""

    status: str
    failed_checks: Sequence[str]
    warnings: Sequence[str]

    @property
    def passed(self) -> bool:
        return self.status == "PASS"

    def to_dict(self) -> Dict[str, object]:
        return {
            "status": self.status,
            "failed_checks": list(self.failed_checks),
            "warnings": list(self.warnings),
        }


def validate_trial_means(means: Sequence[float]) -> ValidationResult:
    """Sanity checks on trial means.

    A non-finite mean usually means a uniform draw of exactly zero reached
    the ``-log(u)`` transform under ``ZeroDrawPolicy.PROPAGATE``.
    """
    failed: list[str] = []
    warnings: list[str] = []

    values = np.asarray(means, dtype=float)
    if values.size == 0:
        warnings.append("no_trials")
        return ValidationResult(status="PASS", failed_checks=failed, warnings=warnings)

    if not np.all(np.isfinite(values)):
        failed.append("nan_or_inf_means")
    if values.size == 1:
        warnings.append("single_trial")
    elif np.all(np.isfinite(values)) and float(values.max() - values.min()) == 0.0:
        warnings.append("zero_dispersion")

    status = "PASS" if not failed else "FAIL"
    return ValidationResult(status=status, failed_checks=failed, warnings=warnings)


__all__ = ["ValidationResult", "validate_trial_means"]
