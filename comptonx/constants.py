"""
Physical constants for ComptonX.

Units: natural units (hbar = c = 1) with the electron mass as the energy scale.
"""
import math

# Electron mass (energy unit)
ELECTRON_MASS = 1.0

# Fine-structure constant (no running)
ALPHA = 1.0 / 137.035999074

# e^2 = 4 pi alpha
ELEMENTARY_CHARGE_SQUARE = 4.0 * math.pi * ALPHA
