# MIT License (see LICENSE)
"""
Constants and default parameters used throughout the simulation.

Units are canvas units (pixels) and simulation ticks, not SI. The Coulomb
constant is calibrated for visually strong close-range deflection rather
than physical accuracy.
"""
from __future__ import annotations

# Canvas geometry. Origin at the top-left corner, y grows downwards.
CANVAS_WIDTH: float = 700.0
CANVAS_HEIGHT: float = 500.0

# The nucleus sits at the canvas centre.
NUCLEUS_X: float = CANVAS_WIDTH / 2
NUCLEUS_Y: float = CANVAS_HEIGHT / 2
# Rendering only; the force model treats the nucleus as a point charge.
NUCLEUS_RADIUS: float = 15.0
# Rendering only; extent of the diffuse positive charge cloud.
DIFFUSE_CLOUD_RADIUS: float = 120.0

# Repulsion constant k in F = k * q1 * q2 / r²
COULOMB_CONSTANT: float = 15.0

# Smallest particle-nucleus distance used in the force law.
# Keeps the acceleration finite when a particle passes through the centre.
MIN_DISTANCE: float = 1.0

# Alpha particle (helium nucleus)
ALPHA_CHARGE: float = 2.0
ALPHA_MASS: float = 4.0

# Beam entry
ENTRY_X: float = -20.0
BEAM_WIDTH: float = 300.0

# Maximum number of points kept in a particle trace
TRAJECTORY_LENGTH: int = 200

# Particles are deactivated once they leave the canvas padded by this margin.
BOUNDS_MARGIN: float = 50.0

# Spawn cadence: interval = BASE - energy * SCALE (milliseconds)
BASE_SPAWN_INTERVAL_MS: float = 400.0
SPAWN_RATE_SCALE: float = 2.0
MIN_SPAWN_INTERVAL_MS: float = 1.0

# Launch speed: BASE + energy / 100 * SCALE (units per tick)
BASE_SPEED: float = 2.0
SPEED_SCALE: float = 4.0

# Parameter ranges enforced by the control surface
ENERGY_RANGE: tuple[int, int] = (0, 100)
PROTON_RANGE: tuple[int, int] = (20, 100)
NEUTRON_RANGE: tuple[int, int] = (20, 150)

# Initial parameters (gold-like nucleus, Au-201)
DEFAULT_PROTONS: int = 80
DEFAULT_NEUTRONS: int = 121
DEFAULT_ENERGY: int = 75
