# conservation.py
# Four-momentum conservation and on-shell checks used by the phase-space validator.
#
# All comparisons go through a Tolerance (|a - b| <= atol + rtol * |b|, per component),
# so that accept/reject decisions near the boundary are pinned by one setting.
from typing import Sequence

import numpy as np

from .config import DEFAULT_TOLERANCE, Tolerance
from .kinematics import FourVector


def total_momentum(vectors: Sequence[FourVector]) -> FourVector:
    """Sum a non-empty sequence of four-vectors."""
    return sum(vectors[1:], start=vectors[0])


def check_energy_conservation(initial_vectors, final_vectors, tolerance: Tolerance = DEFAULT_TOLERANCE):
    """
    Check conservation of energy for any N-body interaction.

    Parameters
    ----------
    initial_vectors : list of FourVector
        List of incoming particles.
    final_vectors : list of FourVector
        List of outgoing particles.
    tolerance : Tolerance
        Numerical tolerance (default DEFAULT_TOLERANCE).

    Returns
    -------
    bool
        True if the summed energies agree within tolerance.

    Examples
    --------
    >>> from comptonx.kinematics import FourVector
    >>> p_in = [FourVector(1.0, 0, 0, 0), FourVector(1.0, 0, 0, 1.0)]
    >>> p_out = [FourVector(1.5, 0, 0, 1.0), FourVector(0.5, 0, 0, 0)]
    >>> check_energy_conservation(p_in, p_out)
    True
    """
    E_initial = sum(v.E for v in initial_vectors)
    E_final = sum(v.E for v in final_vectors)
    return tolerance.isclose(E_initial, E_final)


def check_momentum_conservation(initial_vectors, final_vectors, tolerance: Tolerance = DEFAULT_TOLERANCE):
    """
    Check conservation of 3-momentum for any N-body interaction.

    Returns
    -------
    bool
        True if all components (px, py, pz) are conserved within tolerance.
    """
    p_initial = sum((v.p for v in initial_vectors), np.zeros(3))
    p_final = sum((v.p for v in final_vectors), np.zeros(3))
    return tolerance.allclose(p_initial, p_final)


def check_conservation(initial_vectors, final_vectors, tolerance: Tolerance = DEFAULT_TOLERANCE):
    """
    Check full 4-momentum conservation (energy + momentum).

    Notes
    -----
    This is the check the phase-space validator uses: the summed incoming and
    outgoing four-momenta are compared component-wise.
    """
    return (
        check_energy_conservation(initial_vectors, final_vectors, tolerance) and
        check_momentum_conservation(initial_vectors, final_vectors, tolerance)
    )


def check_energy_momentum(initial_vectors, final_vectors, tolerance: Tolerance = DEFAULT_TOLERANCE):
    """Return diagnostic dict for full 4-momentum conservation.

    Returns dict with deltas for energy and momentum components and a
    boolean 'conserved' key summarizing result within tolerance.
    """
    p_i = total_momentum(list(initial_vectors))
    p_f = total_momentum(list(final_vectors))
    delta = p_i - p_f
    return {
        'conserved': tolerance.allclose(p_i.to_array(), p_f.to_array()),
        'deltaE': delta.E,
        'deltaPx': delta.px,
        'deltaPy': delta.py,
        'deltaPz': delta.pz,
        'E_initial': p_i.E,
        'E_final': p_f.E,
    }


def check_on_shell(vector: FourVector, mass: float, tolerance: Tolerance = DEFAULT_TOLERANCE) -> bool:
    """True if p^2 equals mass^2 within tolerance."""
    return tolerance.isclose(vector.mass2, mass * mass)
