"""
Phase-space definitions and points.

A PhaseSpacePoint is one kinematic configuration handed to the matrix-element
kernel: the process, the frame / coordinate definition, and the incoming
(electron, photon) and outgoing (electron, photon) four-momenta.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .kinematics import FourVector, compton_rest_frame_momenta
from .particles import Direction
from .process import Compton


class Frame(Enum):
    ELECTRON_REST_FRAME = "electron rest frame"
    CENTER_OF_MOMENTUM_FRAME = "center-of-momentum frame"


class CoordinateSystem(Enum):
    SPHERICAL = "spherical"


@dataclass(frozen=True)
class PhaseSpaceDefinition:
    coordinate_system: CoordinateSystem = CoordinateSystem.SPHERICAL
    frame: Frame = Frame.ELECTRON_REST_FRAME


@dataclass(frozen=True)
class PhaseSpacePoint:
    process: Compton
    ps_def: PhaseSpaceDefinition
    in_momenta: Tuple[FourVector, FourVector]
    out_momenta: Tuple[FourVector, FourVector]

    def __post_init__(self):
        in_moms = tuple(self.in_momenta)
        out_moms = tuple(self.out_momenta)
        if len(in_moms) != len(self.process.incoming_particles):
            raise ValueError(f"Expected 2 incoming momenta, got {len(in_moms)}")
        if len(out_moms) != len(self.process.outgoing_particles):
            raise ValueError(f"Expected 2 outgoing momenta, got {len(out_moms)}")
        object.__setattr__(self, "in_momenta", in_moms)
        object.__setattr__(self, "out_momenta", out_moms)

    def momenta(self, direction: Direction) -> Tuple[FourVector, FourVector]:
        return self.in_momenta if direction is Direction.INCOMING else self.out_momenta

    def momentum(self, direction: Direction, index: int) -> FourVector:
        """Four-momentum of leg ``index`` (0 = electron, 1 = photon)."""
        return self.momenta(direction)[index]


def compton_point(process: Compton, omega: float, cos_theta: float, phi: float = 0.0) -> PhaseSpacePoint:
    """On-shell, conserved point in the electron rest frame (spherical coordinates).

    For omega well above the electron mass the rounding in E^2 - |p|^2 of the
    recoil electron exceeds the default absolute tolerance of 1e-9, so the
    default kernel may reject the point. Validate such points with a kernel
    built on a looser ``Tolerance``.
    """
    electron_mass = process.incoming_particles[0].mass
    in_moms, out_moms = compton_rest_frame_momenta(omega, cos_theta, phi, mass=electron_mass)
    return PhaseSpacePoint(process, PhaseSpaceDefinition(), in_moms, out_moms)
