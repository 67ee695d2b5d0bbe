"""Readers for the plain-text quadrature input files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from .validator import InputFileError, ValidationError, validate_positive

PathLike = Union[str, Path]


@dataclass(frozen=True)
class TrialSpec:
    """Contents of a parallel-mode input file."""

    samples_per_trial: int
    total_trials: int


def _read_integers(path: PathLike, expected: int) -> List[int]:
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InputFileError(f"Unable to open input file {file_path}: {exc.strerror or exc}") from exc

    tokens = text.split()
    if len(tokens) < expected:
        raise ValidationError(
            f"Input file {file_path} must contain {expected} integer(s); found {len(tokens)}"
        )
    values: List[int] = []
    for token in tokens[:expected]:
        try:
            values.append(int(token))
        except ValueError:
            raise ValidationError(f"Input file {file_path} contains non-integer value {token!r}") from None
    return values


def load_sample_count(path: PathLike) -> int:
    """Read the sample count N used by the single-process estimate."""
    (samples,) = _read_integers(path, 1)
    return validate_positive("sample count", samples)


def load_trial_spec(path: PathLike) -> TrialSpec:
    """Read ``N`` (samples per trial) then ``T`` (total trials)."""
    samples, trials = _read_integers(path, 2)
    return TrialSpec(
        samples_per_trial=validate_positive("samples per trial", samples),
        total_trials=validate_positive("total trials", trials),
    )


__all__ = ["TrialSpec", "load_sample_count", "load_trial_spec"]
