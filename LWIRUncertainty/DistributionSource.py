import numpy as np
import scipy.stats as stats
from typing import Optional, Protocol, Union, runtime_checkable

from .ParticleDistribution import ParticleDistribution

Quantity = Union[float, ParticleDistribution]


@runtime_checkable
class DistributionSource(Protocol):
    """
    Supplier of random variates and tail-probability queries.

    ``uniform(low, high)`` returns one realisation of ``U(low, high)``;
    ``probability_greater_than(value, threshold)`` returns
    ``P(value > threshold)``.  ``distributional`` tells callers whether
    realisations are full distributions (native mode) or scalars
    (Monte Carlo mode).
    """

    distributional: bool

    def uniform(self, low: float, high: float) -> Quantity:
        ...

    def probability_greater_than(self, value: Quantity,
                                 threshold: float) -> float:
        ...


def probability_greater_than(value: Quantity, threshold: float) -> float:
    """
    ``P(value > threshold)`` for a scalar or a ``ParticleDistribution``.

    A scalar is treated as a point mass, so the answer is 0 or 1.
    """
    if isinstance(value, ParticleDistribution):
        return value.probability_greater_than(threshold)
    return 1.0 if value > threshold else 0.0


class ScalarSource:
    """
    Distribution source drawing one scalar per call.

    Used in Monte Carlo mode, where each iteration needs a single fresh
    realisation of every parameter.

    Parameters
    ----------
    seed : int or None, optional
        Seed for ``numpy.random.default_rng``.  Default is ``None``.
    """
    distributional = False

    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def uniform(self, low: float, high: float) -> float:
        if low == high:
            return float(low)
        return float(self.rng.uniform(low, high))

    def probability_greater_than(self, value, threshold):
        return probability_greater_than(value, threshold)


class ParticleSource:
    """
    Distribution source returning a ``ParticleDistribution`` per call.

    Used in native distributional mode: one evaluation of the calibration
    formula over these values yields the full output distribution.  Every
    call draws an independent ensemble, so parameters are uncorrelated.

    Parameters
    ----------
    particles : int, optional
        Number of particles per distribution.  Default is ``4096``.
    seed : int or None, optional
        Seed for ``numpy.random.default_rng``.  Default is ``None``.
    """
    distributional = True

    def __init__(self, particles: int = 4096, seed: Optional[int] = None):
        if particles < 1:
            raise ValueError("Number of particles must be >= 1")
        self.particles = particles
        self.rng = np.random.default_rng(seed)

    def uniform(self, low: float, high: float) -> Quantity:
        # Exact constants stay scalar and broadcast across the ensemble
        if low == high:
            return float(low)
        draws = stats.uniform(loc=low, scale=high - low).rvs(
            size=self.particles, random_state=self.rng)
        return ParticleDistribution(draws)

    def probability_greater_than(self, value, threshold):
        return probability_greater_than(value, threshold)
