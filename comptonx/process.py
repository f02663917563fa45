"""
Process descriptor for one-photon Compton scattering: e- gamma -> e- gamma.
"""
from dataclasses import dataclass, field
from typing import Tuple

from .particles import ELECTRON, PHOTON, Particle
from .states import ALL_POLARIZATIONS, ALL_SPINS, StateSelector, as_selector


@dataclass(frozen=True)
class Compton:
    """
    Electron + photon -> electron + photon.

    Each external leg carries a StateSelector: ``Fixed(state)`` for a definite
    spin / polarization, ``AllStates(kind)`` to sum over all of them.
    Bare Spin / Polarization values are accepted and wrapped in Fixed.

    Convention: initial spins and polarizations are averaged, final ones summed.
    """
    in_spin: StateSelector = field(default=ALL_SPINS)
    in_pol: StateSelector = field(default=ALL_POLARIZATIONS)
    out_spin: StateSelector = field(default=ALL_SPINS)
    out_pol: StateSelector = field(default=ALL_POLARIZATIONS)

    def __post_init__(self):
        for name in ("in_spin", "in_pol", "out_spin", "out_pol"):
            object.__setattr__(self, name, as_selector(getattr(self, name)))

    @property
    def incoming_particles(self) -> Tuple[Particle, Particle]:
        return (ELECTRON, PHOTON)

    @property
    def outgoing_particles(self) -> Tuple[Particle, Particle]:
        return (ELECTRON, PHOTON)

    def in_spin_and_pol(self) -> Tuple[StateSelector, StateSelector]:
        return (self.in_spin, self.in_pol)

    def out_spin_and_pol(self) -> Tuple[StateSelector, StateSelector]:
        return (self.out_spin, self.out_pol)

    @property
    def n_amplitudes(self) -> int:
        """Number of helicity configurations a full evaluation produces."""
        n = 1
        for sel in (*self.in_spin_and_pol(), *self.out_spin_and_pol()):
            n *= sel.cardinality
        return n

    def __str__(self):
        return "e- gamma -> e- gamma"
