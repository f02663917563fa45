"""
Dirac algebra for tree-level QED amplitudes.

The amplitude code only talks to the ``DiracAlgebra`` interface:

    base_state(particle, direction, momentum, state)  -> external wavefunction
    slashed(vector)                                   -> 4x4 matrix  (gamma^mu v_mu)
    propagator(momentum, mass)                        -> 4x4 matrix

and contracts the results with ``@``. ``NumpyDiracAlgebra`` is the
numpy-backed implementation (Dirac representation, metric +,-,-,-).

External wavefunctions
----------------------
- incoming electron: bispinor u(p, s), a length-4 column
- outgoing electron: adjoint bispinor ubar(p, s) = u(p, s)^dagger gamma^0, a length-4 row
- incoming photon:   polarization vector eps^mu(k, lambda)
- outgoing photon:   conj(eps^mu(k, lambda))

Spinors are normalized to ubar u = 2m. Photon polarizations are the two
real linear polarizations transverse to the photon momentum.
"""
import math
from abc import ABC, abstractmethod

import numpy as np

from .errors import UnsupportedConfiguration
from .kinematics import FourVector
from .particles import Direction, Particle
from .states import Polarization, Spin


class DiracAlgebra(ABC):
    """
    Capability interface consumed by the matrix-element code.

    Implementations must be pure (no RNG, no caching across calls).
    """

    name: str = "abstract"

    @abstractmethod
    def base_state(self, particle: Particle, direction: Direction, momentum: FourVector, state):
        """External wavefunction for one leg in one definite state."""

    @abstractmethod
    def slashed(self, vector):
        """Contract a four-vector (FourVector or contravariant 4-array) with gamma^mu."""

    @abstractmethod
    def propagator(self, momentum: FourVector, mass: float):
        """Fermion propagator (pslash + m) / (p^2 - m^2)."""


_PAULI = (
    np.array([[0, 1], [1, 0]], dtype=complex),
    np.array([[0, -1j], [1j, 0]], dtype=complex),
    np.array([[1, 0], [0, -1]], dtype=complex),
)


def dirac_gamma_matrices(dtype=np.complex128):
    """gamma^0..gamma^3 in the Dirac representation."""
    zero = np.zeros((2, 2), dtype=complex)
    eye = np.eye(2, dtype=complex)
    g0 = np.block([[eye, zero], [zero, -eye]])
    gs = [np.block([[zero, s], [-s, zero]]) for s in _PAULI]
    return tuple(g.astype(dtype) for g in (g0, *gs))


def _components(vector) -> np.ndarray:
    if isinstance(vector, FourVector):
        return vector.to_array()
    arr = np.asarray(vector)
    if arr.shape != (4,):
        raise ValueError(f"Expected four components, got shape {arr.shape}")
    return arr


class NumpyDiracAlgebra(DiracAlgebra):
    """Dirac algebra on dense numpy arrays of a fixed complex dtype."""

    name = "numpy"

    def __init__(self, dtype=np.complex128):
        self.dtype = np.dtype(dtype)
        self.gamma = dirac_gamma_matrices(self.dtype)
        self.identity = np.eye(4, dtype=self.dtype)

    # -------------------- Gamma algebra --------------------

    def slashed(self, vector) -> np.ndarray:
        v = _components(vector).astype(self.dtype)
        g0, g1, g2, g3 = self.gamma
        # lower the spatial index: v_mu = (v^0, -v^1, -v^2, -v^3)
        return v[0] * g0 - v[1] * g1 - v[2] * g2 - v[3] * g3

    def propagator(self, momentum: FourVector, mass: float) -> np.ndarray:
        return (self.slashed(momentum) + mass * self.identity) / (momentum.mass2 - mass * mass)

    # -------------------- External states --------------------

    def base_state(self, particle: Particle, direction: Direction, momentum: FourVector, state):
        if particle.is_fermion and isinstance(state, Spin):
            u = self.bispinor(momentum, particle.mass, state)
            if direction is Direction.INCOMING:
                return u
            return self.adjoint(u)
        if particle.mass == 0.0 and particle.spin == 1.0 and isinstance(state, Polarization):
            eps = self.polarization_vector(momentum, state)
            if direction is Direction.INCOMING:
                return eps
            return eps.conj()
        raise UnsupportedConfiguration(
            f"No {direction.value} base state for {particle.name} in state {state!r}"
        )

    def bispinor(self, momentum: FourVector, mass: float, spin: Spin) -> np.ndarray:
        """u(p, s) = (pslash + m) xi_s / sqrt(E + m), xi_s the upper unit spinors.

        For E < -m the normalization goes complex instead of raising, so a
        point outside the physical phase space still evaluates to a number.
        """
        xi = np.zeros(4, dtype=self.dtype)
        xi[0 if spin is Spin.UP else 1] = 1.0
        # python complex keeps the backend dtype
        norm = complex(np.emath.sqrt(momentum.E + mass))
        return (self.slashed(momentum) + mass * self.identity) @ xi / norm

    def adjoint(self, bispinor: np.ndarray) -> np.ndarray:
        return bispinor.conj() @ self.gamma[0]

    def polarization_vector(self, momentum: FourVector, pol: Polarization) -> np.ndarray:
        """Linear polarization transverse to the photon direction (theta, phi)."""
        theta = momentum.theta
        phi = momentum.phi
        cth, sth = math.cos(theta), math.sin(theta)
        cph, sph = math.cos(phi), math.sin(phi)
        if pol is Polarization.X:
            eps = (0.0, cth * cph, cth * sph, -sth)
        else:
            eps = (0.0, -sph, cph, 0.0)
        return np.array(eps, dtype=self.dtype)


DEFAULT_ALGEBRA = NumpyDiracAlgebra()
