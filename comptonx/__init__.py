"""
ComptonX: tree-level QED kernel for e- gamma -> e- gamma.

Usage:
    from comptonx import Compton, compton_point, is_in_phase_space, matrix_elements

    point = compton_point(Compton(), omega=1.0, cos_theta=0.5)
    if is_in_phase_space(point):
        amplitudes = matrix_elements(point)
"""
from .config import DEFAULT_TOLERANCE, Tolerance
from .cross_section import differential_cross_section, klein_nishina, unsafe_differential_cross_section
from .errors import ComptonXError, InvalidKinematics, UnsupportedConfiguration
from .kinematics import FourVector, compton_rest_frame_momenta
from .matrix_elements import (
    PerturbativeCompton,
    ProcessKernel,
    averaging_norm,
    compton_amplitude,
    incident_flux,
    is_in_phase_space,
    matrix_elements,
    phase_space_factor,
)
from .particles import ELECTRON, PHOTON, Incoming, Outgoing
from .phase_space import CoordinateSystem, Frame, PhaseSpaceDefinition, PhaseSpacePoint, compton_point
from .process import Compton
from .states import ALL_POLARIZATIONS, ALL_SPINS, AllStates, Fixed, Polarization, Spin

__all__ = [
    "ALL_POLARIZATIONS",
    "ALL_SPINS",
    "AllStates",
    "Compton",
    "ComptonXError",
    "CoordinateSystem",
    "DEFAULT_TOLERANCE",
    "ELECTRON",
    "FourVector",
    "Fixed",
    "Frame",
    "Incoming",
    "InvalidKinematics",
    "Outgoing",
    "PHOTON",
    "PerturbativeCompton",
    "PhaseSpaceDefinition",
    "PhaseSpacePoint",
    "Polarization",
    "ProcessKernel",
    "Spin",
    "Tolerance",
    "UnsupportedConfiguration",
    "averaging_norm",
    "compton_amplitude",
    "compton_point",
    "compton_rest_frame_momenta",
    "differential_cross_section",
    "incident_flux",
    "is_in_phase_space",
    "klein_nishina",
    "matrix_elements",
    "phase_space_factor",
    "unsafe_differential_cross_section",
]
