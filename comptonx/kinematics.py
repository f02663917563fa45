"""
Kinematics helpers for ComptonX.

Units: natural units (c = 1), energies in units of the electron mass.
Metric signature (+, -, -, -).
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Tuple
import numpy as np

from .constants import ELECTRON_MASS
from .errors import InvalidKinematics


# -----------------------------
# FourVector
# -----------------------------
@dataclass(frozen=True)
class FourVector:
    E: float
    px: float
    py: float
    pz: float

    @classmethod
    def from_array(cls, arr) -> "FourVector":
        a = np.asarray(arr, dtype=float)
        return cls(float(a[0]), float(a[1]), float(a[2]), float(a[3]))

    @property
    def p(self) -> np.ndarray:
        return np.array([self.px, self.py, self.pz], dtype=float)

    @property
    def rho(self) -> float:
        """Magnitude of the 3-momentum."""
        return math.sqrt(self.px * self.px + self.py * self.py + self.pz * self.pz)

    @property
    def mass2(self) -> float:
        return self.E * self.E - (self.px * self.px + self.py * self.py + self.pz * self.pz)

    @property
    def mass(self) -> float:
        return math.sqrt(max(self.mass2, 0.0))

    @property
    def theta(self) -> float:
        """Polar angle of the 3-momentum (0 for a vanishing 3-momentum)."""
        rho = self.rho
        if rho == 0.0:
            return 0.0
        return math.acos(max(-1.0, min(1.0, self.pz / rho)))

    @property
    def phi(self) -> float:
        return math.atan2(self.py, self.px)

    def dot(self, other: "FourVector") -> float:
        """Minkowski inner product."""
        return self.E * other.E - (self.px * other.px + self.py * other.py + self.pz * other.pz)

    def boost(self, beta: np.ndarray) -> "FourVector":
        return FourVector.from_array(lorentz_boost_array(self.to_array(), beta))

    def to_array(self) -> np.ndarray:
        return np.array([self.E, self.px, self.py, self.pz], dtype=float)

    def __add__(self, other: "FourVector") -> "FourVector":
        return FourVector(self.E + other.E, self.px + other.px, self.py + other.py, self.pz + other.pz)

    def __sub__(self, other: "FourVector") -> "FourVector":
        return FourVector(self.E - other.E, self.px - other.px, self.py - other.py, self.pz - other.pz)

    def __neg__(self) -> "FourVector":
        return FourVector(-self.E, -self.px, -self.py, -self.pz)

    def __mul__(self, scalar: float) -> "FourVector":
        return FourVector(scalar * self.E, scalar * self.px, scalar * self.py, scalar * self.pz)

    __rmul__ = __mul__

    def __repr__(self) -> str:
        return f"FourVector(E={self.E:.6f}, px={self.px:.6f}, py={self.py:.6f}, pz={self.pz:.6f})"


# -----------------------------
# Lorentz boost
# -----------------------------
def lorentz_boost_array(p4: np.ndarray, beta: np.ndarray) -> np.ndarray:
    beta = np.asarray(beta, dtype=float)
    p4 = np.asarray(p4, dtype=float)
    beta2 = float(np.dot(beta, beta))
    if beta2 >= 1.0:
        raise ValueError("beta^2 < 1 required.")
    if beta2 <= 1e-18:
        return p4.copy()
    gamma = 1.0 / math.sqrt(1.0 - beta2)
    bp = float(np.dot(beta, p4[1:]))
    Eprime = gamma * (p4[0] + bp)
    factor = ((gamma - 1.0) * bp / beta2) + gamma * p4[0]
    pprime = p4[1:] + factor * beta
    return np.array([Eprime, pprime[0], pprime[1], pprime[2]], dtype=float)


# -----------------------------
# Compton kinematics (electron rest frame)
# -----------------------------
def compton_outgoing_energy(omega: float, cos_theta: float, mass: float = ELECTRON_MASS) -> float:
    """Compton formula: omega' = omega / (1 + omega (1 - cos theta) / m)."""
    return omega / (1.0 + omega * (1.0 - cos_theta) / mass)


def compton_rest_frame_momenta(omega: float,
                               cos_theta: float,
                               phi: float = 0.0,
                               mass: float = ELECTRON_MASS
                               ) -> Tuple[Tuple[FourVector, FourVector], Tuple[FourVector, FourVector]]:
    """Deterministic on-shell Compton kinematics in the electron rest frame.

    The incoming photon travels along +z with energy ``omega``; the outgoing
    photon is emitted at polar angle ``acos(cos_theta)`` and azimuth ``phi``.
    The outgoing electron takes up the recoil.

    Returns
    -------
    ((electron_in, photon_in), (electron_out, photon_out))
    """
    if mass <= 0.0:
        raise InvalidKinematics(f"Electron mass must be positive, got {mass}")
    if omega <= 0.0:
        raise InvalidKinematics(f"Photon energy must be positive, got {omega}")
    if not -1.0 <= cos_theta <= 1.0:
        raise InvalidKinematics(f"cos(theta) must lie in [-1, 1], got {cos_theta}")

    omega_prime = compton_outgoing_energy(omega, cos_theta, mass)
    sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

    electron_in = FourVector(mass, 0.0, 0.0, 0.0)
    photon_in = FourVector(omega, 0.0, 0.0, omega)
    photon_out = FourVector(
        omega_prime,
        omega_prime * sin_theta * math.cos(phi),
        omega_prime * sin_theta * math.sin(phi),
        omega_prime * cos_theta,
    )
    electron_out = electron_in + photon_in - photon_out
    return (electron_in, photon_in), (electron_out, photon_out)
