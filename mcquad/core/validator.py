"""Input validation utilities."""

from __future__ import annotations


class ValidationError(Exception):
    """Custom error for validation related issues."""


class InputFileError(ValidationError):
    """Raised when an input file is missing or cannot be read."""


def validate_positive(name: str, value: int) -> int:
    """Ensure a count parameter is a positive integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise ValidationError(f"{name} must be positive, got {value}")
    return value


__all__ = ["InputFileError", "ValidationError", "validate_positive"]
