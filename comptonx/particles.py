"""
Particle species and leg directions for ComptonX.

Only the species taking part in Compton scattering are defined; masses are
taken from ``comptonx.constants``.
"""
from dataclasses import dataclass
from enum import Enum

from .constants import ELECTRON_MASS


class Direction(Enum):
    INCOMING = "incoming"
    OUTGOING = "outgoing"


Incoming = Direction.INCOMING
Outgoing = Direction.OUTGOING


@dataclass(frozen=True)
class Particle:
    """
    Static particle data (PDG-style).

    spin is in units of hbar; fermions carry half-integer spin.
    """
    name: str
    pdg_id: int
    mass: float
    spin: float

    @property
    def is_fermion(self) -> bool:
        return (2 * self.spin) % 2 == 1

    def __repr__(self):
        return f"Particle(name={self.name}, pdg_id={self.pdg_id}, mass={self.mass}, spin={self.spin})"


ELECTRON = Particle("Electron", 11, ELECTRON_MASS, 0.5)
PHOTON = Particle("Photon", 22, 0.0, 1.0)
