### RunConfig Class ###
# Author : Cooper White (cjw9009@g.rit.edu)
# Date : 02/22/2026
# File : RunConfig.py

import math

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional

# Outputs produced by a run, in output-index order
OUTPUT_NAMES = ("Calibrated FLIR Ax5 Temperature Output",)
OUTPUT_SYMBOLS = ("calibratedSensorOutput",)
OUTPUT_UNITS = ("Kelvin",)
OUTPUT_COUNT = len(OUTPUT_NAMES)


class RunConfig(BaseModel):
    """
    Configuration for one calibration run.

    Mirrors the command-line options.  Conflicting combinations are
    rejected on construction, before any computation happens.

    Parameters
    ----------
    output : str or None, optional
        Path of a CSV file receiving the output distributions.  Not
        allowed in Monte Carlo mode.  Default is ``None``.
    select_output : int, optional
        0-indexed output to compute.  ``OUTPUT_COUNT`` selects all
        outputs, which is not allowed when benchmarking or in Monte Carlo
        mode.  Default is ``0``.
    iterations : int, optional
        Number of executions.  ``1`` runs in native distributional mode,
        more runs in Monte Carlo mode.  Default is ``1``.
    timing : bool, optional
        Print the CPU time used.  Default is ``False``.
    benchmarking : bool, optional
        Print ``<value> <microseconds>`` only.  Default is ``False``.
    json_output : bool, optional
        Print results as JSON.  Default is ``False``.
    sensor_parameter : float or None, optional
        Fixed raw counts used instead of the counts distribution.  ``NaN``
        means not set.  Default is ``None``.
    profile : str or None, optional
        Path to a JSON calibration profile.  ``None`` uses the FLIR Ax5
        defaults.
    seed : int or None, optional
        Random seed.  Default is ``None``.
    particles : int, optional
        Particles per distribution in native mode.  Default is ``4096``.
    monte_carlo_output : str, optional
        File receiving the Monte Carlo samples.  Default is ``'data.out'``.
    """
    output: Optional[str] = None
    select_output: int = Field(default=0, ge=0)
    iterations: int = Field(default=1, ge=1)
    timing: bool = False
    benchmarking: bool = False
    json_output: bool = False
    sensor_parameter: Optional[float] = None
    profile: Optional[str] = None
    seed: Optional[int] = None
    particles: int = Field(default=4096, ge=1)
    monte_carlo_output: str = "data.out"

    @field_validator("sensor_parameter", mode="before")
    @classmethod
    def validate_sensor_parameter(cls, v):
        if isinstance(v, float) and math.isnan(v):
            return None
        return v

    @model_validator(mode="after")
    def validate_combinations(self):
        if self.output is not None and self.is_monte_carlo:
            raise ValueError(
                "Writing to output file is not supported in Monte Carlo mode")

        if self.select_output > OUTPUT_COUNT:
            raise ValueError(
                f"Output select value is greater than the possible number of "
                f"outputs: provided {self.select_output}, max {OUTPUT_COUNT}")

        if self.select_output == OUTPUT_COUNT and (self.benchmarking or
                                                   self.is_monte_carlo):
            raise ValueError(
                "Please select a single output when in benchmarking mode or "
                "Monte Carlo mode")
        return self

    @property
    def is_monte_carlo(self) -> bool:
        return self.iterations > 1

    def overrides(self) -> dict:
        """Per-parameter overrides implied by the options."""
        if self.sensor_parameter is None:
            return {}
        return {"counts": self.sensor_parameter}
