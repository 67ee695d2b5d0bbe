"""Rank-local handle on an MPI communicator.

Jobs run SPMD under ``mpiexec -n W``; every rank executes the same program
and the collectives below must be called in the same order on every rank.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

LOGGER = logging.getLogger(__name__)

ABORT_EXIT_CODE = 5


class WorkerFailedError(RuntimeError):
    """A rank failed before the job completed; the job is aborted."""


class Communicator:
    """Thin wrapper over an ``mpi4py`` communicator (``COMM_WORLD`` by default)."""

    def __init__(self, comm: Any) -> None:
        self._comm = comm
        self.rank: int = comm.Get_rank()
        self.size: int = comm.Get_size()

    @classmethod
    def world(cls) -> "Communicator":
        # Importing mpi4py.MPI initialises MPI, so only parallel runs pay for it.
        from mpi4py import MPI

        return cls(MPI.COMM_WORLD)

    @classmethod
    def local(cls) -> "Communicator":
        """Single-rank group for in-process runs."""
        from mpi4py import MPI

        return cls(MPI.COMM_SELF)

    @property
    def is_root(self) -> bool:
        return self.rank == 0

    def bcast(self, payload: Any = None, root: int = 0) -> Any:
        """Return ``payload`` from ``root`` on every rank."""
        value = self._comm.bcast(payload, root=root)
        LOGGER.debug("Rank %d holds broadcast from rank %d", self.rank, root)
        return value

    def gather(self, payload: Any, root: int = 0) -> Optional[List[Any]]:
        """Collect one payload per rank at ``root`` in rank order."""
        collected = self._comm.gather(payload, root=root)
        if self.rank == root:
            LOGGER.debug("Rank %d gathered contributions from %d rank(s)", self.rank, self.size)
        return collected

    def barrier(self) -> None:
        self._comm.Barrier()

    def abort(self, code: int = ABORT_EXIT_CODE) -> None:
        """Terminate every rank of the job with exit status ``code``."""
        LOGGER.error("Rank %d aborting job with exit code %d", self.rank, code)
        self._comm.Abort(code)


__all__ = ["ABORT_EXIT_CODE", "Communicator", "WorkerFailedError"]
