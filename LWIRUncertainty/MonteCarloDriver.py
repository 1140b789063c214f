### MonteCarloDriver Class ###
# Author : Cooper White (cjw9009@g.rit.edu)
# Date : 02/22/2026
# File : MonteCarloDriver.py

import logging
from typing import Callable, Mapping, Optional

import numpy as np
from pydantic import BaseModel, ConfigDict

from .CalibrationEvaluator import evaluate
from .CalibrationProfile import CalibrationProfile
from .DistributionSource import DistributionSource, Quantity
from .InputSampler import InputSampler
from .Statistics import MeanAndVariance, mean_and_variance

logger = logging.getLogger(__name__)


class CalibrationRun(BaseModel):
    """
    Result of one driver run.

    Attributes
    ----------
    value : float or ParticleDistribution
        Representative calibrated temperature.  The sample mean in Monte
        Carlo mode, the full output distribution in native mode.
    iterations : int
        Number of evaluations performed.
    samples : np.ndarray or None
        Sample buffer in iteration order (Monte Carlo mode only).
    summary : MeanAndVariance or None
        Mean and variance of ``samples`` (Monte Carlo mode only).
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    value: Quantity
    iterations: int
    samples: Optional[np.ndarray] = None
    summary: Optional[MeanAndVariance] = None

    @property
    def is_monte_carlo(self) -> bool:
        return self.samples is not None


class MonteCarloDriver:
    """
    Repeatedly samples inputs and evaluates the calibration formula.

    With a scalar distribution source each iteration draws a fresh
    ``InputVector`` immediately before evaluating it and stores the
    result in a sample buffer, which is reduced to a mean and variance
    once the loop finishes.  With a distributional source a single
    evaluation produces the whole output distribution.

    Parameters
    ----------
    profile : CalibrationProfile
        Parameter table.  Not modified by the driver.
    source : DistributionSource
        Supplier of random variates.
    evaluator : callable, optional
        ``InputVector -> result``.  Default is ``evaluate``.

    Examples
    --------
    >>> driver = MonteCarloDriver(CalibrationProfile(), ScalarSource(seed=1))
    >>> run = driver.run(1000, overrides={"counts": 30050})
    >>> run.summary.count
    1000
    """

    def __init__(self,
                 profile: CalibrationProfile,
                 source: DistributionSource,
                 evaluator: Callable = evaluate):
        self.profile = profile
        self.source = source
        self.evaluator = evaluator

    def run(self,
            iterations: int = 1,
            overrides: Optional[Mapping[str, float]] = None,
            progress_cb: Optional[Callable] = None) -> CalibrationRun:
        """
        Run the calibration ``iterations`` times.

        Parameters
        ----------
        iterations : int, optional
            Number of evaluations.  Must be ``1`` for a distributional
            source.  Default is ``1``.
        overrides : mapping of str to float, optional
            Fixed values for some parameters, e.g. ``{'counts': 30050}``.
        progress_cb : callable or None, optional
            Called as ``progress_cb(phase='sampling', current=int,
            total=int)`` after each evaluation.  Default is ``None``.

        Returns
        -------
        CalibrationRun

        Raises
        ------
        ValueError
            If *iterations* is < 1, or > 1 with a distributional source.
        NonFiniteResultError
            If any evaluation leaves the valid domain of the formula.
        MemoryError
            If the sample buffer cannot be allocated.
        """
        if iterations < 1:
            raise ValueError("Number of iterations must be >= 1")
        if self.source.distributional and iterations != 1:
            raise ValueError(
                "Native distributional mode evaluates exactly once; "
                f"got {iterations} iterations")

        sampler = InputSampler(self.profile.with_overrides(overrides),
                               self.source)

        if self.source.distributional:
            logger.info("Native distributional evaluation")
            value = self.evaluator(sampler.sample())
            logger.debug("Output distribution: %r", value)
            if progress_cb:
                progress_cb(phase="sampling", current=1, total=1)
            return CalibrationRun(value=value, iterations=1)

        logger.info("Monte Carlo run with %d iterations", iterations)
        samples = np.empty(iterations, dtype=float)

        for i in range(iterations):
            # Sample inside the loop so each iteration is independent
            samples[i] = self.evaluator(sampler.sample())

            if progress_cb:
                progress_cb(phase="sampling", current=i + 1, total=iterations)

        summary = mean_and_variance(samples)
        logger.debug("Mean %.6f, variance %.6g over %d samples",
                     summary.mean, summary.variance, summary.count)

        return CalibrationRun(value=summary.mean,
                              iterations=iterations,
                              samples=samples,
                              summary=summary)


if __name__ == "__main__":
    from .DistributionSource import ParticleSource, ScalarSource
    from .Statistics import TailProbabilities

    profile = CalibrationProfile()

    print("Starting native distributional run...")
    native = MonteCarloDriver(profile, ParticleSource(seed=0)).run(1)
    print(f"Native result: {native.value}")
    print(TailProbabilities.from_result(native.value))

    print("Starting Monte Carlo run...")
    mc = MonteCarloDriver(profile, ScalarSource(seed=0)).run(
        10000, overrides={"counts": 30050})
    print(f"Mean {mc.summary.mean:.4f}, variance {mc.summary.variance:.4f}")
