from .CalibrationProfile import CalibrationProfile
from .DistributionSource import DistributionSource
from .InputVector import InputVector
from .PhysicalParameter import PhysicalParameter


class InputSampler:
    """
    Draws one ``InputVector`` per call from a calibration profile.

    Every parameter is drawn from its uniform distribution through the
    distribution source, unless the profile carries an override for it,
    in which case the literal value is used.  Calls are independent; the
    sampler keeps no state between them.

    Parameters
    ----------
    profile : CalibrationProfile
        Parameter table to draw from.
    source : DistributionSource
        Supplier of uniform variates.
    """

    def __init__(self, profile: CalibrationProfile, source: DistributionSource):
        self.profile = profile
        self.source = source

    def draw(self, parameter: PhysicalParameter):
        """Realise a single parameter, shifted to Kelvin if needed."""
        if parameter.override is not None:
            value = parameter.override
        else:
            value = self.source.uniform(parameter.low, parameter.high)
        return parameter.to_kelvin(value)

    def sample(self) -> InputVector:
        return InputVector(**{
            name: self.draw(parameter)
            for name, parameter in self.profile.items()
        })
