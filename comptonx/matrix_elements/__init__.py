"""
Matrix element kernels for ComptonX.

Usage:
    from comptonx.matrix_elements import matrix_elements, is_in_phase_space

    if is_in_phase_space(point):
        amplitudes = matrix_elements(point)
"""
from .base import ProcessKernel
from .compton import (
    PerturbativeCompton,
    averaging_norm,
    compton_amplitude,
    incident_flux,
    is_in_phase_space,
    matrix_elements,
    number_of_spin_pol,
    phase_space_factor,
)

__all__ = [
    "ProcessKernel",
    "PerturbativeCompton",
    "averaging_norm",
    "compton_amplitude",
    "incident_flux",
    "is_in_phase_space",
    "matrix_elements",
    "number_of_spin_pol",
    "phase_space_factor",
]
