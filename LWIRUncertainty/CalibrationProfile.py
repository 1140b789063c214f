### CalibrationProfile Class ###
# Author : Cooper White (cjw9009@g.rit.edu)
# Date : 02/16/2026
# File : CalibrationProfile.py

from typing import Dict, Iterator, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .PhysicalParameter import PhysicalParameter


def _uniform(name, nominal, half_width, celsius=False):
    return PhysicalParameter(name=name,
                             low=nominal - half_width,
                             high=nominal + half_width,
                             celsius=celsius)


def _constant(name, value, celsius=False):
    return PhysicalParameter(name=name, low=value, high=value, celsius=celsius)


class CalibrationProfile(BaseModel):
    """
    Immutable table of the physical parameters for one camera and scene.

    The defaults describe a FLIR Ax5 camera viewing an object at roughly
    room temperature through a short, clear atmospheric path.  Object and
    atmosphere parameters carry a tolerance of 5 %, temperatures a
    tolerance of 0.005 degC, and the camera calibration constants their
    manufacturing tolerance.  ``R`` and the external optics temperature
    are exact.

    Pass a profile to ``InputSampler`` or ``MonteCarloDriver``.  Profiles
    are never mutated; ``with_overrides()`` returns a new one.

    Parameters
    ----------
    counts : PhysicalParameter
        Raw bolometer counts.  Default ``U(30000, 30100)``.
    emissivity : PhysicalParameter
        Object emissivity.
    reflected_temperature : PhysicalParameter
        Reflected apparent temperature [degC].
    atmospheric_temperature : PhysicalParameter
        Atmosphere temperature [degC].
    atmospheric_transmission : PhysicalParameter
        Atmospheric transmission (tau).
    ext_optics_temperature : PhysicalParameter
        External optics temperature [degC].  Exact 20 degC.
    ext_optics_transmission : PhysicalParameter
        External optics transmission.
    R, B, F, J0, J1 : PhysicalParameter
        Camera calibration constants.

    Examples
    --------
    >>> profile = CalibrationProfile().with_overrides({"counts": 30050})
    >>> profile.counts.override
    30050.0
    """
    model_config = ConfigDict(frozen=True)

    camera: str = "FLIR Ax5"

    counts: PhysicalParameter = Field(
        default_factory=lambda: PhysicalParameter(
            name="counts", low=30000, high=30100))

    # Object parameters: reflected energy
    emissivity: PhysicalParameter = Field(
        default_factory=lambda: _uniform("emissivity", 1.0, 0.05))
    reflected_temperature: PhysicalParameter = Field(
        default_factory=lambda: _uniform(
            "reflected_temperature", 21.85, 0.005, celsius=True))

    # Atmospheric attenuation
    atmospheric_temperature: PhysicalParameter = Field(
        default_factory=lambda: _uniform(
            "atmospheric_temperature", 21.85, 0.005, celsius=True))
    atmospheric_transmission: PhysicalParameter = Field(
        default_factory=lambda: _uniform("atmospheric_transmission", 1.0, 0.05))

    # External optics
    ext_optics_temperature: PhysicalParameter = Field(
        default_factory=lambda: _constant(
            "ext_optics_temperature", 20.0, celsius=True))
    ext_optics_transmission: PhysicalParameter = Field(
        default_factory=lambda: _uniform("ext_optics_transmission", 1.0, 0.05))

    # Camera calibration constants
    R: PhysicalParameter = Field(default_factory=lambda: _constant("R", 16556.0))
    B: PhysicalParameter = Field(
        default_factory=lambda: _uniform("B", 1428.0, 0.05))
    F: PhysicalParameter = Field(default_factory=lambda: _uniform("F", 1.0, 0.05))
    J0: PhysicalParameter = Field(
        default_factory=lambda: _uniform("J0", 89.796, 0.0005))
    J1: PhysicalParameter = Field(
        default_factory=lambda: _uniform("J1", 22.5916, 0.00005))

    @model_validator(mode="after")
    def validate_names(self):
        for field_name, parameter in self.items():
            if parameter.name != field_name:
                raise ValueError(
                    f"Parameter stored as '{field_name}' is named "
                    f"'{parameter.name}'")
        return self

    def items(self) -> Iterator:
        """Yield ``(field_name, PhysicalParameter)`` pairs in declaration order."""
        for field_name in type(self).model_fields:
            value = getattr(self, field_name)
            if isinstance(value, PhysicalParameter):
                yield field_name, value

    def parameter_names(self):
        return [name for name, _ in self.items()]

    def with_overrides(self, overrides: Optional[Mapping[str, float]]):
        """
        Return a copy of the profile with fixed values for some parameters.

        Parameters
        ----------
        overrides : mapping of str to float or None
            Parameter name to literal value.  ``NaN`` or ``None`` values
            clear any existing override.

        Returns
        -------
        CalibrationProfile
            A new profile; the original is unchanged.

        Raises
        ------
        KeyError
            If a name does not match a parameter of the profile.
        """
        if not overrides:
            return self

        names = self.parameter_names()
        update: Dict[str, PhysicalParameter] = {}
        for name, value in overrides.items():
            if name not in names:
                raise KeyError(f"Unknown parameter: {name}")
            parameter = getattr(self, name)
            update[name] = PhysicalParameter.model_validate(
                {**parameter.model_dump(), "override": value})

        return self.model_copy(update=update)

    def nominal(self) -> Dict[str, float]:
        """Midpoint (or override) of every parameter, temperatures in Kelvin."""
        return {
            name: parameter.to_kelvin(parameter.nominal)
            for name, parameter in self.items()
        }

    @classmethod
    def from_json(cls, path: str):
        """
        Load a profile from a JSON file.

        Parameters missing from the file keep their FLIR Ax5 defaults.

        Raises
        ------
        RuntimeError
            If the file cannot be read.
        pydantic.ValidationError
            If the contents do not describe a valid profile.
        """
        try:
            with open(path, "r") as f:
                text = f.read()
        except OSError as e:
            raise RuntimeError(f"Failed to read calibration profile: {path}") from e
        return cls.model_validate_json(text)
