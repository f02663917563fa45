"""
Perturbative (tree-level) Compton scattering: e- gamma -> e- gamma.

Two diagrams contribute, s-channel and u-channel fermion exchange:

    M = e^2 ubar(p') [ eps'slash S(p + k) epsslash + epsslash S(p - k') eps'slash ] u(p)

with S(q) = (qslash + m) / (q^2 - m^2).

Leg ordering everywhere is (electron, photon) for both incoming and outgoing.
"""
import itertools
import logging
import math

import numpy as np

from ..config import DEFAULT_TOLERANCE, Tolerance
from ..conservation import check_conservation, check_on_shell
from ..constants import ELECTRON_MASS, ELEMENTARY_CHARGE_SQUARE
from ..dirac import DEFAULT_ALGEBRA, DiracAlgebra
from ..errors import UnsupportedConfiguration
from ..kinematics import FourVector
from ..particles import Incoming, Outgoing
from ..phase_space import Frame
from ..states import StateSelector
from .base import ProcessKernel


logger = logging.getLogger(__name__)


# ========== PHASE-SPACE VALIDATION ==========

def _all_onshell(point, tolerance: Tolerance) -> bool:
    proc = point.process
    legs = zip(
        (*proc.incoming_particles, *proc.outgoing_particles),
        (*point.in_momenta, *point.out_momenta),
    )
    for particle, mom in legs:
        if not check_on_shell(mom, particle.mass, tolerance):
            logger.debug("Off-shell %s: p^2=%.12g, m^2=%.12g", particle.name, mom.mass2, particle.mass ** 2)
            return False
    return True


def is_in_phase_space(point, tolerance: Tolerance = DEFAULT_TOLERANCE) -> bool:
    """
    True if four-momentum is conserved and all four legs are on shell.

    Never raises for unphysical input; amplitudes and factors of a rejected
    point carry no physical meaning.
    """
    if not check_conservation(point.momenta(Incoming), point.momenta(Outgoing), tolerance):
        logger.debug("Four-momentum not conserved: in=%s out=%s", point.in_momenta, point.out_momenta)
        return False
    return _all_onshell(point, tolerance)


# ========== NORMALIZATION & FLUX ==========

def incident_flux(point) -> float:
    """Product of the incoming electron and photon energies (no validation)."""
    return point.momentum(Incoming, 0).E * point.momentum(Incoming, 1).E


def number_of_spin_pol(selector: StateSelector) -> int:
    return selector.cardinality


def averaging_norm(process) -> float:
    """
    Reciprocal of the number of initial spin/polarization configurations.

    Convention: initial spins and polarizations are averaged, final ones summed.
    """
    normalizations = [number_of_spin_pol(sel) for sel in process.in_spin_and_pol()]
    return 1.0 / math.prod(normalizations)


# ========== AMPLITUDES ==========

def compton_amplitude(in_electron_mom: FourVector,
                      in_electron_state,
                      in_photon_mom: FourVector,
                      in_photon_state,
                      out_electron_mom: FourVector,
                      out_electron_state,
                      out_photon_mom: FourVector,
                      out_photon_state,
                      mass: float = ELECTRON_MASS,
                      algebra: DiracAlgebra = DEFAULT_ALGEBRA) -> complex:
    """
    Amplitude for one definite helicity configuration.

    Args:
        in_electron_state: bispinor u(p)
        in_photon_state: polarization vector eps(k)
        out_electron_state: adjoint bispinor ubar(p')
        out_photon_state: polarization vector conj(eps(k'))
        mass: mass of the exchanged electron

    Note:
        The outgoing electron momentum only enters through its spinor.
    """
    in_ph_slashed = algebra.slashed(in_photon_state)
    out_ph_slashed = algebra.slashed(out_photon_state)

    prop1 = algebra.propagator(in_photon_mom + in_electron_mom, mass)
    prop2 = algebra.propagator(in_electron_mom - out_photon_mom, mass)

    # matrices act right to left on the incoming spinor
    diagram_1 = out_electron_state @ (out_ph_slashed @ (prop1 @ (in_ph_slashed @ in_electron_state)))
    diagram_2 = out_electron_state @ (in_ph_slashed @ (prop2 @ (out_ph_slashed @ in_electron_state)))

    return complex(ELEMENTARY_CHARGE_SQUARE * (diagram_1 + diagram_2))


def _leg_states(algebra: DiracAlgebra, particle, direction, momentum, selector: StateSelector) -> list:
    return [algebra.base_state(particle, direction, momentum, s) for s in selector.enumerate()]


def matrix_elements(point, algebra: DiracAlgebra = DEFAULT_ALGEBRA) -> np.ndarray:
    """
    Amplitudes for every helicity configuration selected by the process.

    Order is lexicographic in (incoming electron, incoming photon,
    outgoing electron, outgoing photon) with the incoming electron varying
    slowest; each leg runs through its states in enum order.
    """
    proc = point.process
    in_electron, in_photon = proc.incoming_particles
    out_electron, out_photon = proc.outgoing_particles
    in_electron_mom, in_photon_mom = point.in_momenta
    out_electron_mom, out_photon_mom = point.out_momenta

    base_states = (
        _leg_states(algebra, in_electron, Incoming, in_electron_mom, proc.in_spin),
        _leg_states(algebra, in_photon, Incoming, in_photon_mom, proc.in_pol),
        _leg_states(algebra, out_electron, Outgoing, out_electron_mom, proc.out_spin),
        _leg_states(algebra, out_photon, Outgoing, out_photon_mom, proc.out_pol),
    )

    result = np.empty(proc.n_amplitudes, dtype=np.complex128)
    for i, (in_el, in_ph, out_el, out_ph) in enumerate(itertools.product(*base_states)):
        result[i] = compton_amplitude(
            in_electron_mom, in_el,
            in_photon_mom, in_ph,
            out_electron_mom, out_el,
            out_photon_mom, out_ph,
            mass=in_electron.mass,
            algebra=algebra,
        )
    return result


# ========== PHASE-SPACE FACTOR ==========

def _rest_frame_ps_fac(in_photon_mom: FourVector, out_photon_mom: FourVector, mass: float) -> float:
    omega = in_photon_mom.E
    omega_prime = out_photon_mom.E
    return omega_prime ** 2 / (16 * math.pi ** 2 * omega * mass)


def phase_space_factor(point) -> float:
    """
    Differential phase-space factor for the point's frame.

    Only the electron rest frame is implemented; any other frame raises
    UnsupportedConfiguration.
    """
    ps_def = point.ps_def
    if ps_def.frame is Frame.ELECTRON_REST_FRAME:
        electron_mass = point.process.incoming_particles[0].mass
        return _rest_frame_ps_fac(point.momentum(Incoming, 1), point.momentum(Outgoing, 1), electron_mass)

    logger.error(
        "No phase-space factor for frame=%s, coordinates=%s",
        ps_def.frame.value, ps_def.coordinate_system.value,
    )
    raise UnsupportedConfiguration(
        f"Phase-space factor not implemented for {ps_def.frame.value} "
        f"({ps_def.coordinate_system.value} coordinates)"
    )


# ========== KERNEL ==========

class PerturbativeCompton(ProcessKernel):
    """Tree-level QED Compton kernel bound to one algebra backend and tolerance."""

    name = "Perturbative Compton"
    description = "Tree-level e- gamma -> e- gamma, s- and u-channel electron exchange"

    def __init__(self, algebra: DiracAlgebra = DEFAULT_ALGEBRA, tolerance: Tolerance = DEFAULT_TOLERANCE):
        self.algebra = algebra
        self.tolerance = tolerance

    def is_in_phase_space(self, point) -> bool:
        return is_in_phase_space(point, self.tolerance)

    def incident_flux(self, point) -> float:
        return incident_flux(point)

    def averaging_norm(self, process) -> float:
        return averaging_norm(process)

    def matrix_elements(self, point) -> np.ndarray:
        return matrix_elements(point, self.algebra)

    def phase_space_factor(self, point) -> float:
        return phase_space_factor(point)
