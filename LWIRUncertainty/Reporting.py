import logging
from typing import List, Sequence

import numpy as np
from pydantic import BaseModel

from .MonteCarloDriver import CalibrationRun
from .ParticleDistribution import ParticleDistribution
from .RunConfig import OUTPUT_NAMES, OUTPUT_SYMBOLS, OUTPUT_UNITS
from .Statistics import TailProbabilities, nominal_value

logger = logging.getLogger(__name__)

JSON_DESCRIPTION = "Lepton FLIR Sensor Calibration"


class JSONVariable(BaseModel):
    variableID: str
    variableDescription: str
    values: List[float]


class JSONOutput(BaseModel):
    """
    JSON document printed with ``--json``.

    ``results[0].values`` holds every Monte Carlo sample, or the single
    calibrated value outside Monte Carlo mode.
    """
    description: str = JSON_DESCRIPTION
    results: List[JSONVariable]


def format_report(run: CalibrationRun, index: int = 0) -> str:
    """
    Human-readable report: calibrated value and six tail probabilities.

    In Monte Carlo mode the representative value is the sample mean and
    the variance is appended.
    """
    name = OUTPUT_NAMES[index]
    unit = OUTPUT_UNITS[index]
    tails = TailProbabilities.from_result(run.value)

    lines = [f"{name}: {tails.nominal:.2f} {unit}.", ""]
    for p in tails.percentages:
        lines.append(
            f"\tProbability that calibrated sensor output is {p:3d}% or more "
            f"smaller than {tails.nominal:.2f} {unit}, is "
            f"{tails.smaller_than[p]:.6f}")
    lines.append("")
    for p in tails.percentages:
        lines.append(
            f"\tProbability that calibrated sensor output is {p:3d}% or more "
            f"greater than {tails.nominal:.2f} {unit}, is "
            f"{tails.greater_than[p]:.6f}")

    if run.summary is not None:
        lines.append("")
        lines.append(
            f"Variance over {run.summary.count} Monte Carlo samples: "
            f"{run.summary.variance:.6g} {unit}^2")

    return "\n".join(lines)


def format_json(run: CalibrationRun, index: int = 0) -> str:
    if run.samples is not None:
        values = [float(x) for x in run.samples]
    else:
        values = [nominal_value(run.value)]

    document = JSONOutput(results=[
        JSONVariable(variableID=OUTPUT_SYMBOLS[index],
                     variableDescription=OUTPUT_NAMES[index],
                     values=values)
    ])
    return document.model_dump_json(indent=4)


def format_benchmark(run: CalibrationRun, elapsed_seconds: float) -> str:
    """``<calibrated value> <elapsed microseconds>``."""
    return f"{nominal_value(run.value):f} {int(elapsed_seconds * 1000000)}"


def format_timing(elapsed_seconds: float) -> str:
    return f"CPU time used: {elapsed_seconds:f} seconds"


def write_csv(path: str, outputs: Sequence, names: Sequence[str] = OUTPUT_NAMES):
    """
    Write output distributions to a CSV file, one column per output.

    Distributions contribute one row per particle; scalars a single row.

    Raises
    ------
    ValueError
        If the outputs hold different numbers of particles.
    RuntimeError
        If the file cannot be written.
    """
    columns = []
    for value in outputs:
        if isinstance(value, ParticleDistribution):
            columns.append(value.particles)
        else:
            columns.append(np.atleast_1d(np.asarray(value, dtype=float)))

    if len({c.size for c in columns}) > 1:
        raise ValueError("All outputs must hold the same number of particles")

    try:
        np.savetxt(path,
                   np.column_stack(columns),
                   delimiter=",",
                   header=",".join(names),
                   comments="")
    except OSError as e:
        raise RuntimeError(f"Failed to write output file: {path}") from e

    logger.info("Wrote %d output(s) to %s", len(columns), path)


def write_monte_carlo_samples(path: str, samples: np.ndarray,
                              elapsed_seconds: float):
    """
    Dump Monte Carlo samples: elapsed microseconds on the first line,
    then one sample per line in iteration order.

    Raises
    ------
    RuntimeError
        If the file cannot be written.
    """
    try:
        np.savetxt(path,
                   samples,
                   header=str(int(elapsed_seconds * 1000000)),
                   comments="")
    except OSError as e:
        raise RuntimeError(f"Failed to write Monte Carlo samples: {path}") from e

    logger.info("Wrote %d Monte Carlo samples to %s", samples.size, path)
