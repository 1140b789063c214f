import math
from typing import Sequence

from pydantic import BaseModel, Field

from .CalibrationEvaluator import NonFiniteResultError
from .DistributionSource import Quantity, probability_greater_than
from .ParticleDistribution import ParticleDistribution


class MeanAndVariance(BaseModel):
    """
    Population mean and variance of a sample buffer.

    Attributes
    ----------
    mean : float
        ``(1/N) * sum(x)``.
    variance : float
        Population variance (divides by ``N``, not ``N - 1``).
    count : int
        Number of samples ``N`` the summary was computed from.
    """
    mean: float
    variance: float = Field(..., ge=0)
    count: int = Field(..., ge=1)


def mean_and_variance(samples: Sequence[float]) -> MeanAndVariance:
    """
    Reduce samples to their mean and population variance.

    Single pass with Welford's online algorithm.

    Parameters
    ----------
    samples : sequence of float
        Sample buffer, in any order.

    Returns
    -------
    MeanAndVariance
        Summary over all ``len(samples)`` values.

    Raises
    ------
    ValueError
        If *samples* is empty.
    NonFiniteResultError
        If any sample is NaN or infinite.
    """
    count = 0
    mean = 0.0
    m2 = 0.0

    for x in samples:
        x = float(x)
        if not math.isfinite(x):
            raise NonFiniteResultError(
                f"Sample {count} is not finite ({x}); refusing to summarise")
        count += 1
        delta = x - mean
        mean += delta / count
        m2 += delta * (x - mean)

    if count == 0:
        raise ValueError("Cannot summarise an empty sample buffer")

    return MeanAndVariance(mean=mean, variance=max(m2 / count, 0.0), count=count)


def nominal_value(value: Quantity) -> float:
    """Representative scalar of a result: the mean of a distribution."""
    if isinstance(value, ParticleDistribution):
        return value.mean
    return float(value)


class TailProbabilities(BaseModel):
    """
    Probabilities that a result deviates from its nominal value by a
    given relative amount.

    ``smaller_than[p]`` is ``P(X <= nominal * (1 - p/100))`` and
    ``greater_than[p]`` is ``P(X > nominal * (1 + p/100))`` for ``p`` in
    ``percentages``.  The two sides are computed independently; the
    distribution need not be symmetric.
    """
    nominal: float
    percentages: tuple = (1, 2, 5)
    smaller_than: dict
    greater_than: dict

    @classmethod
    def from_result(cls, value: Quantity, percentages=(1, 2, 5)):
        """
        Query a calibration result at symmetric relative thresholds.

        Parameters
        ----------
        value : float or ParticleDistribution
            Calibration result.  A float is a point mass, so every
            probability is 0 or 1.
        percentages : sequence of float, optional
            Relative deviations in percent.  Default is ``(1, 2, 5)``.

        Returns
        -------
        TailProbabilities
        """
        nominal = nominal_value(value)
        smaller_than = {}
        greater_than = {}

        for p in percentages:
            fraction = p / 100
            smaller_than[p] = 1 - probability_greater_than(
                value, nominal * (1 - fraction))
            greater_than[p] = probability_greater_than(
                value, nominal * (1 + fraction))

        return cls(nominal=nominal,
                   percentages=tuple(percentages),
                   smaller_than=smaller_than,
                   greater_than=greater_than)
