# MIT License (see LICENSE)
"""
Numerical integrator for particle motion.

The simulation advances one tick per rendered frame with a fixed unit
timestep. Semi-implicit (symplectic) Euler is used: velocity first, then
position with the updated velocity:

    v(t+1) = v(t) + a(t) * dt
    x(t+1) = x(t) + v(t+1) * dt

There is no sub-stepping; one call is one frame.

Reference:
    https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations

import numpy as np


def euler_step(
    position: np.ndarray,
    velocity: np.ndarray,
    acceleration: np.ndarray,
    dt: float = 1.0,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Advance a point mass by one step.

    Args:
        position: Current position [x, y].
        velocity: Current velocity [vx, vy].
        acceleration: Acceleration held constant over the step.
        dt: Timestep in ticks.

    Returns:
        Tuple (new_position, new_velocity). Inputs are not modified.
    """
    new_velocity = velocity + acceleration * dt
    new_position = position + new_velocity * dt
    return new_position, new_velocity
