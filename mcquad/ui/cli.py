"""Typer-based command line interface for quadrature runs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..config import SimulationSettings
from ..core.distributor import RemainderPolicy
from ..core.result_validation import ValidationResult, validate_trial_means
from ..core.sampler import ZeroDrawPolicy
from ..core.validator import InputFileError, ValidationError
from ..engine import MonteCarloQuadrature
from ..jobs.communicator import ABORT_EXIT_CODE, Communicator, WorkerFailedError
from ..models.results import summarize_means
from ..reporting.result_file import ResultFileError, read_result_file

app = typer.Typer(help="Monte Carlo quadrature of E[g(Y)], Y ~ Exp(1), with online statistics")
console = Console()
err_console = Console(stderr=True)

EXIT_USAGE = 2
EXIT_IO_ERROR = 3
EXIT_INVALID_INPUT = 4
EXIT_WORKER_FAILURE = ABORT_EXIT_CODE


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(processName)s - %(name)s - %(levelname)s - %(message)s",
        )


def _load_settings(
    *,
    zero_draw: Optional[ZeroDrawPolicy] = None,
    remainder: Optional[RemainderPolicy] = None,
) -> SimulationSettings:
    try:
        settings = SimulationSettings.from_env()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if zero_draw is not None:
        settings.zero_draw = zero_draw
    if remainder is not None:
        settings.remainder = remainder
    return settings


def _fail(message: str, code: int, *, echo: bool = True) -> typer.Exit:
    if echo:
        err_console.print(f"[red]{message}[/red]")
    return typer.Exit(code=code)


def _print_validation(validation: ValidationResult) -> None:
    for check in validation.failed_checks:
        err_console.print(f"[red]Validation failed: {check}[/red]")
    for warning in validation.warnings:
        console.print(f"[yellow]Warning: {warning}[/yellow]")


@app.command()
def single(
    input_file: Path = typer.Argument(..., help="Text file containing the sample count N"),
    seed: Optional[int] = typer.Option(None, min=0, help="Fixed seed (default: wall-clock seconds)"),
    zero_draw: Optional[ZeroDrawPolicy] = typer.Option(
        None, case_sensitive=False, help="Treatment of a uniform draw of exactly 0.0"
    ),
) -> None:
    """Estimate the integral with one stream, reporting mean and variance."""
    engine = MonteCarloQuadrature(_load_settings(zero_draw=zero_draw))
    try:
        result = engine.estimate_from_file(input_file, seed=seed)
    except InputFileError as exc:
        raise _fail(str(exc), EXIT_IO_ERROR) from exc
    except ValidationError as exc:
        raise _fail(str(exc), EXIT_INVALID_INPUT) from exc

    console.print(f"Using {result.sample_count} samples")
    label = "Seed from clock time is" if seed is None else "Seed is"
    console.print(f"{label} {result.seed}")
    console.print(f"Estimate for integral is {result.mean:f}")
    console.print(f"Estimate for variance is {result.variance:f}")
    console.print(f"Standard error is {result.standard_error:g}")
    console.print(f"Time elapsed: {result.elapsed_seconds:g} seconds")


@app.command()
def parallel(
    input_file: Path = typer.Argument(..., help="Text file containing N (samples per trial) and T (trials)"),
    output_file: Path = typer.Argument(..., help="Binary file receiving the trial means"),
    seed: Optional[int] = typer.Option(None, min=0, help="Fixed base seed (default: wall-clock seconds)"),
    remainder: Optional[RemainderPolicy] = typer.Option(
        None, case_sensitive=False, help="Handling of trials that do not divide evenly across workers"
    ),
    zero_draw: Optional[ZeroDrawPolicy] = typer.Option(
        None, case_sensitive=False, help="Treatment of a uniform draw of exactly 0.0"
    ),
) -> None:
    """Distribute independent trials over the MPI ranks and write their means.

    Launch with ``mpiexec -n W mcquad parallel INPUT OUTPUT``; every rank runs
    this command and rank 0 reports.
    """
    engine = MonteCarloQuadrature(_load_settings(zero_draw=zero_draw, remainder=remainder))
    comm = Communicator.world()
    try:
        report = engine.run_trials_from_file(input_file, output_file, comm=comm, seed=seed)
    except InputFileError as exc:
        raise _fail(str(exc), EXIT_IO_ERROR, echo=comm.is_root) from exc
    except ValidationError as exc:
        raise _fail(str(exc), EXIT_INVALID_INPUT, echo=comm.is_root) from exc
    except WorkerFailedError as exc:
        raise _fail(str(exc), EXIT_WORKER_FAILURE) from exc
    if report is None:
        return

    params = report.parameters
    console.print(
        f"Ran {len(report.results)} of {report.requested_trials} trials "
        f"({params.samples_per_trial} samples each) on {params.worker_count} worker(s)"
    )
    label = "Base seed from clock time is" if seed is None else "Base seed is"
    console.print(f"{label} {params.base_seed}")
    if report.dropped_trials:
        console.print(f"[yellow]{report.dropped_trials} trial(s) were not run (uneven split).[/yellow]")
    console.print(f"Results written to {report.output_path}")
    _print_validation(report.validation)
    console.print(
        f"Execution time = {report.elapsed_seconds:e} seconds, with precision {report.clock_precision:e} seconds"
    )


@app.command()
def inspect(
    result_file: Path = typer.Argument(..., help="Binary result file written by 'parallel'"),
) -> None:
    """Summarise the trial means stored in a result file."""
    try:
        means = read_result_file(result_file)
    except OSError as exc:
        raise _fail(f"Unable to open result file {result_file}: {exc.strerror or exc}", EXIT_IO_ERROR) from exc
    except ResultFileError as exc:
        raise _fail(str(exc), EXIT_INVALID_INPUT) from exc

    summary = summarize_means(means)
    table = Table(title=f"Trial means: {result_file.name}")
    table.add_column("statistic")
    table.add_column("value", justify="right")
    for key, value in summary.items():
        table.add_row(key, str(value) if key == "count" else f"{value:.6f}")
    console.print(table)
    _print_validation(validate_trial_means(means))


def main() -> None:
    """Entry point for CLI execution."""
    app()


if __name__ == "__main__":
    main()
