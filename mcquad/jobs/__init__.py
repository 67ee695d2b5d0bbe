"""Parallel job infrastructure: collectives and the SPMD worker program."""

from .communicator import Communicator, WorkerFailedError
from .job_manager import build_parameters, launch_job, run_worker

__all__ = ["Communicator", "WorkerFailedError", "build_parameters", "launch_job", "run_worker"]
