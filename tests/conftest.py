"""
Shared pytest fixtures for the LWIRUncertainty tests.
"""
import pytest
from typer.testing import CliRunner

from LWIRUncertainty import (CalibrationProfile, InputVector, ParticleSource,
                             ScalarSource)


@pytest.fixture
def profile() -> CalibrationProfile:
    """Default FLIR Ax5 calibration profile."""
    return CalibrationProfile()


@pytest.fixture
def scalar_source() -> ScalarSource:
    return ScalarSource(seed=1234)


@pytest.fixture
def particle_source() -> ParticleSource:
    return ParticleSource(particles=2000, seed=1234)


@pytest.fixture
def nominal_inputs() -> InputVector:
    """Every uncertain parameter fixed at its nominal midpoint."""
    return InputVector(counts=30050.0,
                       emissivity=1.0,
                       reflected_temperature=295.0,
                       atmospheric_temperature=295.0,
                       atmospheric_transmission=1.0,
                       ext_optics_temperature=293.15,
                       ext_optics_transmission=1.0,
                       R=16556.0,
                       B=1428.0,
                       F=1.0,
                       J0=89.796,
                       J1=22.5916)


@pytest.fixture(scope="session")
def runner() -> CliRunner:
    """Return a Typer CliRunner instance for invoking commands."""
    return CliRunner()


@pytest.fixture
def in_tmp_path(tmp_path, monkeypatch):
    """Change the working directory to a temporary path for the test."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
