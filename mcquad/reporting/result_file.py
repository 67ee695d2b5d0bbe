"""Binary result file: a native int32 trial count followed by float64 means.

Layout (native byte order, no padding)::

    int32    T'                 executed trial count
    float64  mean[0 .. T'-1]    worker-major order
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Sequence, Union

import numpy as np

from ..models.results import ResultSet

LOGGER = logging.getLogger(__name__)

HEADER_DTYPE = np.dtype("=i4")
VALUE_DTYPE = np.dtype("=f8")


class ResultFileError(Exception):
    """Raised when a result file cannot be decoded."""


def write_result_file(path: Union[str, Path], results: Union[ResultSet, Sequence[float]]) -> Path:
    """Write trial means to ``path`` and return the resolved path."""
    values = results.trial_means if isinstance(results, ResultSet) else results
    means = np.asarray(values, dtype=VALUE_DTYPE).reshape(-1)
    if means.size > np.iinfo(HEADER_DTYPE).max:
        raise ValueError(f"{means.size} trials exceed the int32 header range")

    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_name = tempfile.mkstemp(dir=output_path.parent, prefix=f".{output_path.name}.", suffix=".tmp")
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(np.array([means.size], dtype=HEADER_DTYPE).tobytes())
            fh.write(means.tobytes())
        temp_path.replace(output_path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise
    LOGGER.info("Wrote %d trial mean(s) to %s", means.size, output_path)
    return output_path


def read_result_file(path: Union[str, Path]) -> np.ndarray:
    """Decode a result file written by :func:`write_result_file`."""
    payload = Path(path).read_bytes()
    if len(payload) < HEADER_DTYPE.itemsize:
        raise ResultFileError(f"{path} is too short to contain a trial count header")
    count = int(np.frombuffer(payload, dtype=HEADER_DTYPE, count=1)[0])
    if count < 0:
        raise ResultFileError(f"{path} declares a negative trial count ({count})")
    body = payload[HEADER_DTYPE.itemsize :]
    expected = count * VALUE_DTYPE.itemsize
    if len(body) != expected:
        raise ResultFileError(
            f"{path} declares {count} trial(s) ({expected} bytes) but holds {len(body)} bytes of data"
        )
    return np.frombuffer(body, dtype=VALUE_DTYPE, count=count).copy()


__all__ = ["HEADER_DTYPE", "VALUE_DTYPE", "ResultFileError", "read_result_file", "write_result_file"]
