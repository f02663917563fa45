from abc import ABC, abstractmethod

import numpy as np


class ProcessKernel(ABC):
    """
    Base class for per-point physics kernels.

    Supplies the pieces an integration framework combines into a differential
    cross section. All implementations must be pure functions of the point
    (no RNG, no caching across calls).
    """

    name: str = "abstract"
    description: str = ""

    @abstractmethod
    def is_in_phase_space(self, point) -> bool:
        """True if the point conserves four-momentum and every leg is on shell."""

    @abstractmethod
    def incident_flux(self, point) -> float:
        """Incident flux factor of the initial state."""

    @abstractmethod
    def averaging_norm(self, process) -> float:
        """Initial-state spin/polarization averaging factor."""

    @abstractmethod
    def matrix_elements(self, point) -> np.ndarray:
        """
        Return the amplitudes for every selected helicity configuration.

        Args:
            point: PhaseSpacePoint carrying the process and all leg momenta

        Returns:
            complex array, one entry per configuration
        """

    @abstractmethod
    def phase_space_factor(self, point) -> float:
        """Frame-dependent differential phase-space factor."""
