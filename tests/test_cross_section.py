"""
Differential cross section vs the analytic Klein-Nishina formula.
"""
import sys
from pathlib import Path
sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from comptonx.config import Tolerance
from comptonx.cross_section import (
    differential_cross_section,
    klein_nishina,
    thomson_limit,
    unsafe_differential_cross_section,
)
from comptonx.kinematics import FourVector
from comptonx.matrix_elements import PerturbativeCompton
from comptonx.phase_space import PhaseSpaceDefinition, PhaseSpacePoint, compton_point
from comptonx.process import Compton
from comptonx.states import Fixed, Polarization, Spin


@pytest.mark.parametrize("omega", [0.01, 0.5, 1.0, 4.0])
@pytest.mark.parametrize("cos_theta", [-1.0, -0.6, 0.0, 0.25, 0.9, 1.0])
def test_unpolarized_matches_klein_nishina(omega, cos_theta):
    point = compton_point(Compton(), omega, cos_theta, phi=0.3)
    assert differential_cross_section(point) == pytest.approx(klein_nishina(omega, cos_theta), rel=1e-9)


@pytest.mark.parametrize("cos_theta", [-0.5, 0.0, 0.7])
def test_low_energy_thomson_limit(cos_theta):
    point = compton_point(Compton(), 1e-6, cos_theta)
    assert differential_cross_section(point) == pytest.approx(thomson_limit(cos_theta), rel=1e-5)


def test_polarized_pieces_sum_to_unpolarized():
    """Averaging the four fixed initial states reproduces the unpolarized result."""
    omega, cos_theta, phi = 0.9, 0.4, 0.8
    pieces = [
        differential_cross_section(compton_point(Compton(Fixed(s), Fixed(pol)), omega, cos_theta, phi))
        for s in Spin
        for pol in Polarization
    ]
    unpolarized = differential_cross_section(compton_point(Compton(), omega, cos_theta, phi))
    assert sum(pieces) / 4 == pytest.approx(unpolarized, rel=1e-12)


def test_outside_phase_space_is_zero():
    point = PhaseSpacePoint(
        Compton(),
        PhaseSpaceDefinition(),
        (FourVector(1.0, 0.0, 0.0, 0.0), FourVector(1.0, 0.0, 0.0, 1.0)),
        (FourVector(1.2, -0.8, 0.0, 1.0), FourVector(0.8, 0.8, 0.0, 0.0)),
    )
    assert differential_cross_section(point) == 0.0
    assert unsafe_differential_cross_section(point) > 0.0


def test_cross_section_positive():
    for cos_theta in (-1.0, 0.0, 1.0):
        assert differential_cross_section(compton_point(Compton(), 2.0, cos_theta)) > 0.0


@pytest.mark.parametrize("cos_theta", [-0.5, 0.8])
def test_high_energy_with_widened_tolerance(cos_theta):
    point = compton_point(Compton(), 1e4, cos_theta, phi=0.7)
    kernel = PerturbativeCompton(tolerance=Tolerance(rtol=1e-8, atol=1e-5))
    value = differential_cross_section(point, kernel)
    assert value == pytest.approx(klein_nishina(1e4, cos_theta), rel=1e-6)
