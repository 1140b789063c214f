### ParticleDistribution Class ###
# Author : Cooper White (cjw9009@g.rit.edu)
# Date : 02/18/2026
# File : ParticleDistribution.py

import numbers

import numpy as np
from numpy.lib.mixins import NDArrayOperatorsMixin


class ParticleDistribution(NDArrayOperatorsMixin):
    """
    Sample-based distributional value.

    Holds an ensemble of particles and behaves like a number: arithmetic
    operators and numpy ufuncs (``np.exp``, ``np.log``, ...) are applied
    particle-wise and return a new ``ParticleDistribution``.  Mixing with
    plain scalars broadcasts the scalar across every particle.  Two
    distributions combined together must hold the same number of
    particles; particle ``i`` of each operand belongs to the same joint
    realisation.

    A distribution with a single particle is a degenerate (point-mass)
    distribution.

    Parameters
    ----------
    particles : array_like
        1-D sequence of particle values.

    Examples
    --------
    >>> d = ParticleDistribution([1.0, 2.0, 3.0, 4.0])
    >>> (2 * d + 1).mean
    6.0
    >>> d.probability_greater_than(2.5)
    0.5
    """

    _HANDLED_TYPES = (np.ndarray, numbers.Number)

    def __init__(self, particles):
        particles = np.asarray(particles, dtype=float)
        if particles.ndim != 1 or particles.size == 0:
            raise ValueError("Particles must be a non-empty 1-D sequence")
        self.particles = particles

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        if method != "__call__" or "out" in kwargs:
            return NotImplemented

        unwrapped = []
        for x in inputs:
            if isinstance(x, ParticleDistribution):
                unwrapped.append(x.particles)
            elif isinstance(x, self._HANDLED_TYPES):
                unwrapped.append(x)
            else:
                return NotImplemented

        result = getattr(ufunc, method)(*unwrapped, **kwargs)

        if isinstance(result, tuple):
            return tuple(type(self)(r) for r in result)
        if result.dtype == bool:
            return result
        return type(self)(result)

    def __len__(self):
        return self.particles.size

    def __repr__(self):
        return (f"ParticleDistribution(mean={self.mean:.6g}, "
                f"variance={self.variance:.6g}, n={len(self)})")

    @property
    def mean(self) -> float:
        return float(np.mean(self.particles))

    @property
    def variance(self) -> float:
        """Population variance of the particles."""
        return float(np.var(self.particles))

    def isfinite(self) -> bool:
        """``True`` if every particle is finite."""
        return bool(np.all(np.isfinite(self.particles)))

    def probability_greater_than(self, threshold: float) -> float:
        """
        Tail probability ``P(X > threshold)``.

        Parameters
        ----------
        threshold : float
            Comparison value.

        Returns
        -------
        float
            Fraction of particles strictly greater than *threshold*, in
            ``[0, 1]``.
        """
        return float(np.count_nonzero(self.particles > threshold)) / len(self)
