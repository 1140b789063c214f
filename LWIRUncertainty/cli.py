"""
Command-line interface for FLIR microbolometer radiometric-to-temperature
conversion with uncertainty propagation.
"""

import logging
import time
from typing import Optional

import typer
from pydantic import ValidationError

from .CalibrationEvaluator import NonFiniteResultError
from .CalibrationProfile import CalibrationProfile
from .DistributionSourceFactory import DistributionSourceFactory
from .MonteCarloDriver import MonteCarloDriver
from .Reporting import (format_benchmark, format_json, format_report,
                        format_timing, write_csv, write_monte_carlo_samples)
from .RunConfig import OUTPUT_COUNT, RunConfig

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="FLIR microbolometer array radiometric to temperature conversion.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _fail(message: str):
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(1)


def _validation_message(error: ValidationError) -> str:
    return "; ".join(e["msg"] for e in error.errors())


@app.command()
def main(
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Path to output CSV file."),
    select_output: int = typer.Option(
        0, "--select-output", "-S",
        help=f"Compute 0-indexed output ({OUTPUT_COUNT} selects all)."),
    iterations: int = typer.Option(
        1, "--multiple-executions", "-M",
        help="Number of executions; more than 1 runs in Monte Carlo mode."),
    timing: bool = typer.Option(
        False, "--time", "-T", help="Print the CPU time of the kernel."),
    benchmarking: bool = typer.Option(
        False, "--benchmarking", "-b",
        help="Print '<value> <microseconds>' for benchmarking."),
    json_output: bool = typer.Option(
        False, "--json", "-j", help="Print output in JSON format."),
    sensor_parameter: Optional[float] = typer.Option(
        None, "--sensor-parameter", "-sp",
        help="Fixed counts value overriding the default counts distribution."),
    profile: Optional[str] = typer.Option(
        None, "--profile", help="JSON calibration profile (default FLIR Ax5)."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed."),
    particles: int = typer.Option(
        4096, "--particles",
        help="Particles per distribution in native mode."),
    monte_carlo_output: str = typer.Option(
        "data.out", "--monte-carlo-output",
        help="File receiving Monte Carlo samples."),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log progress to stderr."),
):
    """
    Convert raw bolometer counts to a calibrated temperature and report its
    uncertainty.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = RunConfig(output=output,
                           select_output=select_output,
                           iterations=iterations,
                           timing=timing,
                           benchmarking=benchmarking,
                           json_output=json_output,
                           sensor_parameter=sensor_parameter,
                           profile=profile,
                           seed=seed,
                           particles=particles,
                           monte_carlo_output=monte_carlo_output)
    except ValidationError as e:
        _fail(_validation_message(e))

    try:
        if config.profile:
            calibration_profile = CalibrationProfile.from_json(config.profile)
        else:
            calibration_profile = CalibrationProfile()
    except ValidationError as e:
        _fail(f"Invalid calibration profile: {_validation_message(e)}")
    except RuntimeError as e:
        _fail(str(e))

    source = DistributionSourceFactory.create(config)
    driver = MonteCarloDriver(calibration_profile, source)

    start = time.process_time()
    try:
        run = driver.run(config.iterations, config.overrides())
    except NonFiniteResultError as e:
        _fail(str(e))
    elapsed = time.process_time() - start

    if config.select_output == OUTPUT_COUNT:
        indices = range(OUTPUT_COUNT)
    else:
        indices = [config.select_output]

    try:
        if config.benchmarking:
            typer.echo(format_benchmark(run, elapsed))
        else:
            for index in indices:
                if config.json_output:
                    typer.echo(format_json(run, index))
                else:
                    typer.echo(format_report(run, index))

            if config.timing:
                typer.echo("\n" + format_timing(elapsed))

            if config.output is not None:
                write_csv(config.output, [run.value])

        if run.is_monte_carlo:
            write_monte_carlo_samples(config.monte_carlo_output, run.samples,
                                      elapsed)
    except RuntimeError as e:
        _fail(str(e))


if __name__ == "__main__":
    app()
