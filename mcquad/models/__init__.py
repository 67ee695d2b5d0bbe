"""Data models shared by the engine, job runner and reporting layers."""

from .job import JobParameters, JobReport
from .results import EstimateResult, ResultSet

__all__ = ["EstimateResult", "JobParameters", "JobReport", "ResultSet"]
