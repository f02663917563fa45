"""
Runtime settings for ComptonX.

Numeric tolerances for the on-shell / conservation checks and logging setup
for the command-line tools. Library functions only ever use the tolerance
they are handed; reading the environment is opt-in.
"""
import logging
import math
import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional

import numpy as np


@dataclass(frozen=True)
class Tolerance:
    """Approximate-equality tolerance: |a - b| <= atol + rtol * |b|."""
    rtol: float
    atol: float

    def __post_init__(self):
        if self.rtol < 0.0 or self.atol < 0.0:
            raise ValueError("Tolerances must be non-negative.")

    def isclose(self, a: float, b: float) -> bool:
        return bool(np.isclose(a, b, rtol=self.rtol, atol=self.atol))

    def allclose(self, a, b) -> bool:
        return bool(np.allclose(a, b, rtol=self.rtol, atol=self.atol))


# sqrt(machine epsilon) relative, plus a small absolute floor for massless legs
DEFAULT_RTOL = math.sqrt(np.finfo(float).eps)
DEFAULT_ATOL = 1e-9

DEFAULT_TOLERANCE = Tolerance(rtol=DEFAULT_RTOL, atol=DEFAULT_ATOL)


def tolerance_from_env(environ: Optional[Mapping[str, str]] = None) -> Tolerance:
    """Build a Tolerance from COMPTONX_RTOL / COMPTONX_ATOL, falling back to defaults."""
    environ = os.environ if environ is None else environ
    rtol = float(environ.get("COMPTONX_RTOL", DEFAULT_RTOL))
    atol = float(environ.get("COMPTONX_ATOL", DEFAULT_ATOL))
    return Tolerance(rtol=rtol, atol=atol)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
