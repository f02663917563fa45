"""
Differential cross section for Compton scattering, built from a ProcessKernel.

    dsigma = 1 / (4 * flux) * averaging_norm * sum_states |M|^2 * phase_space_factor

plus the analytic Klein-Nishina formula used to validate it.
"""
import logging
from typing import Optional

import numpy as np

from .constants import ALPHA, ELECTRON_MASS
from .kinematics import compton_outgoing_energy
from .matrix_elements import PerturbativeCompton, ProcessKernel

logger = logging.getLogger(__name__)

_DEFAULT_KERNEL = PerturbativeCompton()


def unsafe_differential_cross_section(point, kernel: Optional[ProcessKernel] = None) -> float:
    """Differential cross section without checking that the point is physical."""
    kernel = kernel or _DEFAULT_KERNEL
    amplitudes = kernel.matrix_elements(point)
    squared_sum = float(np.sum(np.abs(amplitudes) ** 2))
    inverse_flux = 1.0 / (4.0 * kernel.incident_flux(point))
    return inverse_flux * kernel.averaging_norm(point.process) * squared_sum * kernel.phase_space_factor(point)


def differential_cross_section(point, kernel: Optional[ProcessKernel] = None) -> float:
    """Differential cross section; zero for points outside the physical phase space.

    Whether a point is inside is decided by ``kernel.is_in_phase_space``, so
    high-energy points from ``compton_point`` can come back as zero under the
    default tolerance. Pass ``PerturbativeCompton(tolerance=...)`` to widen it.
    """
    kernel = kernel or _DEFAULT_KERNEL
    if not kernel.is_in_phase_space(point):
        logger.debug("Point outside phase space, returning zero cross section")
        return 0.0
    return unsafe_differential_cross_section(point, kernel)


def klein_nishina(omega: float, cos_theta: float, mass: float = ELECTRON_MASS) -> float:
    """Unpolarized dsigma/dOmega in the electron rest frame (Klein-Nishina)."""
    omega_prime = compton_outgoing_energy(omega, cos_theta, mass)
    ratio = omega_prime / omega
    sin2 = 1.0 - cos_theta * cos_theta
    return ALPHA ** 2 / (2.0 * mass ** 2) * ratio ** 2 * (ratio + 1.0 / ratio - sin2)


def thomson_limit(cos_theta: float, mass: float = ELECTRON_MASS) -> float:
    """Low-energy limit of klein_nishina: alpha^2 / (2 m^2) (1 + cos^2 theta)."""
    return ALPHA ** 2 / (2.0 * mass ** 2) * (1.0 + cos_theta * cos_theta)
