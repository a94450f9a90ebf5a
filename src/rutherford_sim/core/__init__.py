# MIT License (see LICENSE)
"""
Core physics components.

This subpackage provides:
    - Force model: Coulomb-like particle-nucleus acceleration.
    - Integrator: Fixed-step semi-implicit Euler.

Typical usage:
    from rutherford_sim.core import coulomb_acceleration, euler_step

    a = coulomb_acceleration(p, 2.0, 4.0, nucleus_pos, 79.0)
    p, v = euler_step(p, v, a)
"""
from .forces import coulomb_acceleration, nucleus_acceleration
from .integrators import euler_step

__all__ = [
    # Forces
    "coulomb_acceleration",
    "nucleus_acceleration",
    # Integrators
    "euler_step",
]
