### InputVector Class ###
# Author : Cooper White (cjw9009@g.rit.edu)
# Date : 02/18/2026
# File : InputVector.py

from pydantic import BaseModel, ConfigDict

from .DistributionSource import Quantity


class InputVector(BaseModel):
    """
    One realisation of every input of the radiometric formula.

    Values are plain floats in Monte Carlo mode, or
    ``ParticleDistribution`` objects in native distributional mode.
    Temperatures are always in Kelvin.

    Attributes
    ----------
    counts : float or ParticleDistribution
        Raw bolometer counts.
    emissivity : float or ParticleDistribution
        Object emissivity.
    reflected_temperature : float or ParticleDistribution
        Reflected apparent temperature [K].
    atmospheric_temperature : float or ParticleDistribution
        Atmosphere temperature [K].
    atmospheric_transmission : float or ParticleDistribution
        Atmospheric transmission (tau).
    ext_optics_temperature : float or ParticleDistribution
        External optics temperature [K].
    ext_optics_transmission : float or ParticleDistribution
        External optics transmission.
    R, B, F, J0, J1 : float or ParticleDistribution
        Camera calibration constants.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    counts: Quantity
    emissivity: Quantity
    reflected_temperature: Quantity
    atmospheric_temperature: Quantity
    atmospheric_transmission: Quantity
    ext_optics_temperature: Quantity
    ext_optics_transmission: Quantity
    R: Quantity
    B: Quantity
    F: Quantity
    J0: Quantity
    J1: Quantity
