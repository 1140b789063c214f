### CalibrationEvaluator ###
# Author : Cooper White (cjw9009@g.rit.edu)
# Date : 02/20/2026
# File : CalibrationEvaluator.py

import numpy as np
import scipy.constants as const

from .InputVector import InputVector
from .ParticleDistribution import ParticleDistribution


class NonFiniteResultError(ArithmeticError):
    """
    Raised when the radiometric formula leaves its valid domain.

    Happens when a denominator such as ``e^(B/T) - F`` reaches zero or the
    logarithm argument becomes non-positive, so the result would be NaN or
    infinite.
    """


def _is_finite(value) -> bool:
    if isinstance(value, ParticleDistribution):
        return value.isfinite()
    return bool(np.isfinite(value))


def calibrate(counts, emiss, TRefl, TAtm, tau, TExtOptics,
              transmissionExtOptics, R, B, F, J0, J1):
    """
    FLIR radiometric conversion of raw counts to a calibrated temperature.

    Parameter names follow the FLIR reference example.  Every argument may
    be a float or a ``ParticleDistribution``; the result has the same kind.

    Parameters
    ----------
    counts : float or ParticleDistribution
        Raw bolometer counts.
    emiss : float or ParticleDistribution
        Object emissivity.
    TRefl, TAtm, TExtOptics : float or ParticleDistribution
        Reflected, atmosphere and external optics temperatures [K].
    tau : float or ParticleDistribution
        Atmospheric transmission.
    transmissionExtOptics : float or ParticleDistribution
        External optics transmission.
    R, B, F, J0, J1 : float or ParticleDistribution
        Camera calibration constants.

    Returns
    -------
    float or ParticleDistribution
        ``B / ln(R / (K1 * signal - K2) + F) - 273.15``.  Values are not
        checked; use ``evaluate()`` for domain checking.
    """
    K1 = 1 / (tau * emiss * transmissionExtOptics)

    # Pseudo radiance of the reflected environment
    r1 = ((1 - emiss) / emiss) * (R / (np.exp(B / TRefl) - F))

    # Pseudo radiance of the atmosphere
    r2 = ((1 - tau) / (emiss * tau)) * (R / (np.exp(B / TAtm) - F))

    # Pseudo radiance of the external optics
    r3 = ((1 - transmissionExtOptics) /
          (emiss * tau * transmissionExtOptics)) * (
              R / (np.exp(B / TExtOptics) - F))

    K2 = r1 + r2 + r3
    signal = (counts - J0) / J1

    return B / np.log(R / ((K1 * signal) - K2) + F) - const.zero_Celsius


def evaluate(inputs: InputVector):
    """
    Evaluate the calibration formula for one input realisation.

    Parameters
    ----------
    inputs : InputVector
        One realisation of every parameter, temperatures in Kelvin.

    Returns
    -------
    float or ParticleDistribution
        Calibrated temperature.  A float when every input is a float.

    Raises
    ------
    NonFiniteResultError
        If a division by zero, a logarithm of a non-positive argument, or
        an overflow makes the result NaN or infinite.
    """
    try:
        with np.errstate(all="ignore"):
            result = calibrate(
                counts=inputs.counts,
                emiss=inputs.emissivity,
                TRefl=inputs.reflected_temperature,
                TAtm=inputs.atmospheric_temperature,
                tau=inputs.atmospheric_transmission,
                TExtOptics=inputs.ext_optics_temperature,
                transmissionExtOptics=inputs.ext_optics_transmission,
                R=inputs.R,
                B=inputs.B,
                F=inputs.F,
                J0=inputs.J0,
                J1=inputs.J1)
    except ZeroDivisionError as e:
        raise NonFiniteResultError("Division by zero in calibration formula") from e

    if not _is_finite(result):
        raise NonFiniteResultError(
            "Calibration formula produced a non-finite temperature")

    if isinstance(result, ParticleDistribution):
        return result
    return float(result)
