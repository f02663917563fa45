"""
Checks on the numpy Dirac algebra backend.
"""
import sys
from pathlib import Path
sys.path.append(str(Path(__file__).resolve().parents[1]))

import numpy as np
import pytest

from comptonx.dirac import DEFAULT_ALGEBRA, NumpyDiracAlgebra
from comptonx.errors import UnsupportedConfiguration
from comptonx.kinematics import FourVector
from comptonx.particles import ELECTRON, PHOTON, Incoming, Outgoing
from comptonx.states import Polarization, Spin

METRIC = np.diag([1.0, -1.0, -1.0, -1.0])
ELECTRON_MOM = FourVector(np.sqrt(1.0 + 0.09 + 0.16 + 0.25), 0.3, -0.4, 0.5)
PHOTON_MOM = FourVector(np.sqrt(0.04 + 0.36 + 0.09), 0.2, 0.6, -0.3)


def test_clifford_algebra():
    g = DEFAULT_ALGEBRA.gamma
    for mu in range(4):
        for nu in range(4):
            anti = g[mu] @ g[nu] + g[nu] @ g[mu]
            np.testing.assert_allclose(anti, 2 * METRIC[mu, nu] * np.eye(4), atol=1e-14)


def test_slashed_accepts_fourvector_or_array():
    np.testing.assert_array_equal(
        DEFAULT_ALGEBRA.slashed(ELECTRON_MOM),
        DEFAULT_ALGEBRA.slashed(ELECTRON_MOM.to_array()),
    )
    with pytest.raises(ValueError):
        DEFAULT_ALGEBRA.slashed([1.0, 2.0])


def test_pslash_squared_is_mass2():
    ps = DEFAULT_ALGEBRA.slashed(ELECTRON_MOM)
    np.testing.assert_allclose(ps @ ps, ELECTRON_MOM.mass2 * np.eye(4), atol=1e-12)


@pytest.mark.parametrize("spin", list(Spin))
def test_bispinor_solves_dirac_equation(spin):
    u = DEFAULT_ALGEBRA.base_state(ELECTRON, Incoming, ELECTRON_MOM, spin)
    ubar = DEFAULT_ALGEBRA.base_state(ELECTRON, Outgoing, ELECTRON_MOM, spin)
    dirac_op = DEFAULT_ALGEBRA.slashed(ELECTRON_MOM) - ELECTRON.mass * np.eye(4)
    np.testing.assert_allclose(dirac_op @ u, np.zeros(4), atol=1e-12)
    np.testing.assert_allclose(ubar @ dirac_op, np.zeros(4), atol=1e-12)
    assert ubar @ u == pytest.approx(2 * ELECTRON.mass, rel=1e-12)


def test_spin_completeness():
    total = sum(
        np.outer(
            DEFAULT_ALGEBRA.base_state(ELECTRON, Incoming, ELECTRON_MOM, s),
            DEFAULT_ALGEBRA.base_state(ELECTRON, Outgoing, ELECTRON_MOM, s),
        )
        for s in Spin
    )
    expected = DEFAULT_ALGEBRA.slashed(ELECTRON_MOM) + ELECTRON.mass * np.eye(4)
    np.testing.assert_allclose(total, expected, atol=1e-12)


@pytest.mark.parametrize("pol", list(Polarization))
def test_polarization_is_transverse_and_normalized(pol):
    eps = DEFAULT_ALGEBRA.base_state(PHOTON, Incoming, PHOTON_MOM, pol)
    k = PHOTON_MOM.to_array()
    assert eps[0] == 0.0
    assert abs(eps @ METRIC @ k) < 1e-12
    assert (eps @ METRIC @ eps).real == pytest.approx(-1.0, rel=1e-12)


def test_polarizations_orthogonal():
    ex = DEFAULT_ALGEBRA.base_state(PHOTON, Outgoing, PHOTON_MOM, Polarization.X)
    ey = DEFAULT_ALGEBRA.base_state(PHOTON, Outgoing, PHOTON_MOM, Polarization.Y)
    assert abs(ex @ METRIC @ ey) < 1e-12


def test_propagator_inverts_dirac_operator():
    q = FourVector(1.7, 0.2, 0.1, 0.9)  # off shell
    prop = DEFAULT_ALGEBRA.propagator(q, 1.0)
    dirac_op = DEFAULT_ALGEBRA.slashed(q) - np.eye(4)
    np.testing.assert_allclose(prop @ dirac_op, np.eye(4), atol=1e-12)


def test_unsupported_base_state():
    with pytest.raises(UnsupportedConfiguration):
        DEFAULT_ALGEBRA.base_state(PHOTON, Incoming, PHOTON_MOM, Spin.UP)
    with pytest.raises(UnsupportedConfiguration):
        DEFAULT_ALGEBRA.base_state(ELECTRON, Incoming, ELECTRON_MOM, Polarization.X)


def test_single_precision_backend():
    algebra = NumpyDiracAlgebra(np.complex64)
    assert algebra.slashed(ELECTRON_MOM).dtype == np.complex64
    u = algebra.base_state(ELECTRON, Incoming, ELECTRON_MOM, Spin.UP)
    assert u.dtype == np.complex64
