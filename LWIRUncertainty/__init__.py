# LWIRUncertainty/__init__.py

from .PhysicalParameter import PhysicalParameter
from .CalibrationProfile import CalibrationProfile
from .ParticleDistribution import ParticleDistribution
from .DistributionSource import (DistributionSource, ScalarSource,
                                 ParticleSource, probability_greater_than)
from .InputVector import InputVector
from .InputSampler import InputSampler
from .CalibrationEvaluator import NonFiniteResultError, calibrate, evaluate
from .Statistics import MeanAndVariance, TailProbabilities, mean_and_variance
from .MonteCarloDriver import MonteCarloDriver, CalibrationRun
from .RunConfig import RunConfig
from .DistributionSourceFactory import DistributionSourceFactory

__all__ = [
    "PhysicalParameter", "CalibrationProfile", "ParticleDistribution",
    "DistributionSource", "ScalarSource", "ParticleSource",
    "probability_greater_than", "InputVector", "InputSampler",
    "NonFiniteResultError", "calibrate", "evaluate", "MeanAndVariance",
    "TailProbabilities", "mean_and_variance", "MonteCarloDriver",
    "CalibrationRun", "RunConfig", "DistributionSourceFactory"
]
