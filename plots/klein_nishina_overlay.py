import numpy as np
import matplotlib.pyplot as plt

from comptonx.cross_section import differential_cross_section, klein_nishina, thomson_limit
from comptonx.phase_space import compton_point
from comptonx.process import Compton

OMEGAS = (0.01, 0.5, 1.0, 5.0)  # photon energies in units of m_e


def main():
    process = Compton()
    cos_grid = np.linspace(-1.0, 1.0, 41)
    x_grid = np.linspace(-1.0, 1.0, 400)

    plt.figure(figsize=(7, 5))
    for omega in OMEGAS:
        dsigma = [differential_cross_section(compton_point(process, omega, float(c))) for c in cos_grid]
        line, = plt.plot(x_grid, [klein_nishina(omega, x) for x in x_grid], '-', alpha=0.6)
        plt.plot(cos_grid, dsigma, 'o', ms=4, color=line.get_color(), label=rf'$\omega = {omega}\,m_e$')

    plt.plot(x_grid, [thomson_limit(x) for x in x_grid], 'k--', label='Thomson')

    plt.xlabel(r'$\cos\theta$')
    plt.ylabel(r'$d\sigma/d\Omega$  [$m_e^{-2}$]')
    plt.title(r'Compton scattering: kernel (points) vs Klein-Nishina (lines)')
    plt.grid(alpha=0.3)
    plt.legend()
    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()
