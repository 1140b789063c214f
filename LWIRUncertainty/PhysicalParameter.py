### PhysicalParameter Class ###
# Author : Cooper White (cjw9009@g.rit.edu)
# Date : 02/16/2026
# File : PhysicalParameter.py

import math
from typing import Literal, Optional

import scipy.constants as const
import scipy.stats as stats
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class PhysicalParameter(BaseModel):
    """
    A named uncertain physical quantity used by the radiometric formula.

    Each parameter is described by a uniform distribution between ``low``
    and ``high``.  A parameter whose bounds coincide is an exact constant.
    An ``override`` replaces the distribution with a literal value for
    every draw.

    Attributes
    ----------
    name : str
        Identifier of the parameter (e.g. ``'emissivity'``).
    distribution : {'uniform'}
        Distribution family.  Only uniform is supported.
    low : float
        Lower bound of the distribution.
    high : float
        Upper bound of the distribution.  Must be >= ``low``.
    override : float or None
        Fixed value used instead of a draw.  ``NaN`` is accepted as the
        "not set" sentinel and stored as ``None``.
    celsius : bool
        ``True`` if the bounds are in degrees Celsius and must be shifted
        to Kelvin before use.

    Examples
    --------
    >>> emiss = PhysicalParameter(name="emissivity", low=0.95, high=1.05)
    >>> emiss.nominal
    1.0
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    distribution: Literal["uniform"] = "uniform"
    low: float
    high: float
    override: Optional[float] = None
    celsius: bool = False

    @field_validator("override", mode="before")
    @classmethod
    def validate_override(cls, v):
        if isinstance(v, float) and math.isnan(v):
            return None
        return v

    @model_validator(mode="after")
    def validate_bounds(self):
        if not (math.isfinite(self.low) and math.isfinite(self.high)):
            raise ValueError(f"Bounds of '{self.name}' must be finite")
        if self.low > self.high:
            raise ValueError(
                f"Lower bound of '{self.name}' ({self.low}) exceeds upper "
                f"bound ({self.high})")
        return self

    @property
    def is_constant(self) -> bool:
        return self.low == self.high

    @property
    def nominal(self) -> float:
        """Midpoint of the distribution, or the override when one is set."""
        if self.override is not None:
            return self.override
        if self.is_constant:
            return self.low
        return float(self.scipy_distribution().mean())

    def scipy_distribution(self):
        """
        Frozen ``scipy.stats`` distribution described by the bounds.

        Returns
        -------
        scipy.stats.rv_continuous_frozen
            ``uniform(loc=low, scale=high - low)``.

        Raises
        ------
        ValueError
            If the parameter is an exact constant (zero-width support).
        """
        if self.is_constant:
            raise ValueError(f"'{self.name}' is an exact constant")
        return stats.uniform(loc=self.low, scale=self.high - self.low)

    def contains(self, value: float) -> bool:
        """Return ``True`` if *value* lies inside ``[low, high]``."""
        return self.low <= value <= self.high

    def to_kelvin(self, value):
        """
        Shift a realisation to Kelvin if the parameter is in Celsius.

        The offset is exactly 273.15 with no uncertainty attached.
        """
        if self.celsius:
            return value + const.zero_Celsius
        return value
