import json
import math

import pytest
from pydantic import ValidationError

from LWIRUncertainty import CalibrationProfile, PhysicalParameter


def test_parameter_rejects_inverted_bounds():
    with pytest.raises(ValidationError):
        PhysicalParameter(name="emissivity", low=1.05, high=0.95)


def test_parameter_nan_override_means_not_set():
    parameter = PhysicalParameter(name="counts", low=30000, high=30100,
                                  override=float("nan"))

    assert parameter.override is None


def test_parameter_nominal_is_midpoint_or_override():
    parameter = PhysicalParameter(name="counts", low=30000, high=30100)

    assert parameter.nominal == pytest.approx(30050)
    assert parameter.model_copy(update={"override": 1.0}).nominal == 1.0


def test_constant_parameter():
    parameter = PhysicalParameter(name="R", low=16556, high=16556)

    assert parameter.is_constant
    assert parameter.nominal == 16556
    with pytest.raises(ValueError):
        parameter.scipy_distribution()


def test_scipy_distribution_support_matches_bounds():
    parameter = PhysicalParameter(name="B", low=1427.95, high=1428.05)
    dist = parameter.scipy_distribution()

    assert dist.support() == pytest.approx((1427.95, 1428.05))


def test_celsius_parameter_is_shifted_exactly():
    parameter = PhysicalParameter(name="ext_optics_temperature", low=20,
                                  high=20, celsius=True)

    assert parameter.to_kelvin(20.0) == 20.0 + 273.15


def test_default_profile_is_flir_ax5(profile):
    assert profile.camera == "FLIR Ax5"
    assert profile.counts.low == 30000
    assert profile.counts.high == 30100
    assert profile.R.is_constant
    assert profile.ext_optics_temperature.is_constant
    assert profile.J1.low == pytest.approx(22.5916 - 0.00005)


def test_default_profile_nominal_values(profile):
    nominal = profile.nominal()

    assert nominal["reflected_temperature"] == pytest.approx(295.0)
    assert nominal["atmospheric_temperature"] == pytest.approx(295.0)
    assert nominal["ext_optics_temperature"] == pytest.approx(293.15)
    assert nominal["emissivity"] == pytest.approx(1.0)
    assert nominal["J0"] == pytest.approx(89.796)
    assert nominal["R"] == 16556


def test_profile_lists_twelve_parameters(profile):
    assert len(profile.parameter_names()) == 12
    assert profile.parameter_names()[0] == "counts"


def test_with_overrides_returns_new_profile(profile):
    overridden = profile.with_overrides({"counts": 30050, "F": 1.0})

    assert overridden.counts.override == 30050
    assert overridden.F.override == 1.0
    assert profile.counts.override is None
    assert profile.F.override is None


def test_with_overrides_nan_clears_override(profile):
    overridden = profile.with_overrides({"counts": 30050})
    cleared = overridden.with_overrides({"counts": math.nan})

    assert cleared.counts.override is None


def test_with_overrides_rejects_unknown_parameter(profile):
    with pytest.raises(KeyError):
        profile.with_overrides({"humidity": 0.5})


def test_profile_is_immutable(profile):
    with pytest.raises(ValidationError):
        profile.counts = PhysicalParameter(name="counts", low=0, high=1)


def test_profile_rejects_misnamed_parameter():
    with pytest.raises(ValidationError):
        CalibrationProfile(B=PhysicalParameter(name="F", low=0.95, high=1.05))


def test_profile_from_json(tmp_path):
    path = tmp_path / "boson.json"
    path.write_text(json.dumps({
        "camera": "FLIR Boson",
        "R": {"name": "R", "low": 12000, "high": 12000},
    }))

    profile = CalibrationProfile.from_json(str(path))

    assert profile.camera == "FLIR Boson"
    assert profile.R.nominal == 12000
    assert profile.B.nominal == pytest.approx(1428.0)


def test_profile_from_missing_json(tmp_path):
    with pytest.raises(RuntimeError):
        CalibrationProfile.from_json(str(tmp_path / "missing.json"))


def test_parameter_contains_closed_interval():
    parameter = PhysicalParameter(name="F", low=0.95, high=1.05)

    assert parameter.contains(0.95)
    assert parameter.contains(1.05)
    assert not parameter.contains(1.06)
