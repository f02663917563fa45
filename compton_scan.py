#!/usr/bin/env python3
"""
Angular scan driver for ComptonX

Evaluates the tree-level Compton kernel on a grid of scattering angles in the
electron rest frame and compares it with the Klein-Nishina formula.

Examples:
    python compton_scan.py --omega 1.0 --points 19
    python compton_scan.py --omega 0.5 --in-pol x --out-pol all --output scan.csv
"""

import argparse
import csv
import logging

import numpy as np

from comptonx.config import configure_logging, tolerance_from_env
from comptonx.cross_section import differential_cross_section, klein_nishina
from comptonx.matrix_elements import PerturbativeCompton
from comptonx.phase_space import compton_point
from comptonx.process import Compton
from comptonx.states import ALL_POLARIZATIONS, ALL_SPINS, POL_X, POL_Y, SPIN_DOWN, SPIN_UP

logger = logging.getLogger("compton_scan")

SPIN_CHOICES = {"up": SPIN_UP, "down": SPIN_DOWN, "all": ALL_SPINS}
POL_CHOICES = {"x": POL_X, "y": POL_Y, "all": ALL_POLARIZATIONS}


def scan(process, omega, n_points, phi=0.0, kernel=None):
    """Return rows (cos_theta, omega_prime, dsigma, klein_nishina) over cos theta in [-1, 1]."""
    kernel = kernel or PerturbativeCompton()
    rows = []
    for cos_theta in np.linspace(-1.0, 1.0, n_points):
        point = compton_point(process, omega, float(cos_theta), phi)
        dsigma = differential_cross_section(point, kernel)
        omega_prime = point.out_momenta[1].E
        rows.append((float(cos_theta), omega_prime, dsigma, klein_nishina(omega, float(cos_theta))))
        logger.debug(f"cos(theta)={cos_theta:+.3f}  dsigma={dsigma:.6e}")
    return rows


def export_rows_to_csv(rows, filename):
    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["cos_theta", "omega_prime", "dsigma_domega", "klein_nishina"])
        writer.writerows(rows)
    logger.info(f"Exported {len(rows)} rows to {filename}")


def build_parser():
    parser = argparse.ArgumentParser(
        description="ComptonX angular scan (electron rest frame)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Examples:
  python compton_scan.py --omega 1.0 --points 19
  python compton_scan.py --omega 0.5 --in-pol x --out-pol all --output scan.csv

Environment:
  COMPTONX_RTOL, COMPTONX_ATOL  override the phase-space tolerance"""
    )
    parser.add_argument("--omega", type=float, default=1.0, help="Incoming photon energy in units of m_e (default 1.0)")
    parser.add_argument("--points", type=int, default=19, help="Number of cos(theta) grid points (default 19)")
    parser.add_argument("--phi", type=float, default=0.0, help="Azimuth of the outgoing photon in rad (default 0)")
    parser.add_argument("--in-spin", choices=SPIN_CHOICES, default="all")
    parser.add_argument("--in-pol", choices=POL_CHOICES, default="all")
    parser.add_argument("--out-spin", choices=SPIN_CHOICES, default="all")
    parser.add_argument("--out-pol", choices=POL_CHOICES, default="all")
    parser.add_argument("--output", type=str, help="Write the scan to a CSV file")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    if args.points < 2:
        raise SystemExit("--points must be at least 2")

    process = Compton(
        in_spin=SPIN_CHOICES[args.in_spin],
        in_pol=POL_CHOICES[args.in_pol],
        out_spin=SPIN_CHOICES[args.out_spin],
        out_pol=POL_CHOICES[args.out_pol],
    )
    kernel = PerturbativeCompton(tolerance=tolerance_from_env())
    logger.info(f"Process {process}, omega={args.omega} m_e, {process.n_amplitudes} helicity configurations")

    rows = scan(process, args.omega, args.points, args.phi, kernel)

    print("\n" + "=" * 64)
    print(f"{'cos(theta)':>10s} {'omega_prime':>12s} {'dsigma/dOmega':>16s} {'Klein-Nishina':>16s}")
    print("=" * 64)
    for cos_theta, omega_prime, dsigma, kn in rows:
        print(f"{cos_theta:+10.4f} {omega_prime:12.6f} {dsigma:16.8e} {kn:16.8e}")
    print("=" * 64 + "\n")

    if args.output:
        export_rows_to_csv(rows, args.output)
    return rows


if __name__ == "__main__":
    main()
