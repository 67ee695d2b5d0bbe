"""Persistence of gathered trial results."""

from .result_file import ResultFileError, read_result_file, write_result_file

__all__ = ["ResultFileError", "read_result_file", "write_result_file"]
