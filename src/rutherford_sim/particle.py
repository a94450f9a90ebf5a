# MIT License (see LICENSE)
"""
Alpha particle entity.

An AlphaParticle owns its kinematic state, a bounded trace of past positions
and a lifecycle flag. Each update applies the nucleus force, takes one
semi-implicit Euler step and records the new position:

    a = F / m           (force model, concentrated nucleus only)
    v ← v + a
    x ← x + v
"""
from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field

import numpy as np

from .constants import (
    ALPHA_CHARGE,
    ALPHA_MASS,
    ENTRY_X,
    NUCLEUS_Y,
    TRAJECTORY_LENGTH,
)
from .core.forces import nucleus_acceleration
from .core.integrators import euler_step
from .types import Bounds, DEFAULT_BOUNDS, Nucleus, ParticleView
from .util import f64, norm


@dataclass(eq=False)
class AlphaParticle:
    """
    A helium nucleus in flight.

    Attributes:
        position: Current position [x, y] in canvas units.
        velocity: Velocity [vx, vy] in canvas units per tick.
        charge: Particle charge (2 for an alpha particle).
        mass: Particle mass (4 for an alpha particle).
        active: False once the particle has left the padded canvas.
        id: Spawn id assigned by SimulationEngine.
        trajectory: Most recent positions, oldest first, capped at
                    TRAJECTORY_LENGTH points.
        initial_velocity: Velocity at creation, used for the deflection angle.

    Note:
        The last trajectory point is always equal to position.
    """
    position: np.ndarray | tuple[float, float] = (ENTRY_X, NUCLEUS_Y)
    velocity: np.ndarray | tuple[float, float] = (0.0, 0.0)
    charge: float = ALPHA_CHARGE
    mass: float = ALPHA_MASS
    active: bool = True
    id: int = -1

    # Runtime state (not user-specified)
    trajectory: deque = field(init=False, repr=False)
    initial_velocity: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Convert vectors to float64 arrays and seed the trace."""
        self.position = f64(self.position)
        self.velocity = f64(self.velocity)
        self.initial_velocity = self.velocity.copy()
        self.trajectory = deque(maxlen=TRAJECTORY_LENGTH)
        self._record()

    @classmethod
    def launch(cls, y: float, speed: float, x: float = ENTRY_X) -> AlphaParticle:
        """Create a particle at (x, y) moving right with the given speed."""
        return cls(position=(x, y), velocity=(speed, 0.0))

    def update(self, nucleus: Nucleus, bounds: Bounds = DEFAULT_BOUNDS) -> None:
        """
        Advance the particle by one tick.

        Does nothing if the particle is inactive. Otherwise applies the
        nucleus acceleration, integrates, appends the new position to the
        trace and deactivates the particle once it leaves bounds.

        Args:
            nucleus: Scattering centre for this tick.
            bounds: Region the particle must stay inside to remain active.
        """
        if not self.active:
            return

        a = nucleus_acceleration(self, nucleus)
        self.position, self.velocity = euler_step(self.position, self.velocity, a)
        self._record()

        if not bounds.contains(self.position):
            self.active = False

    def _record(self) -> None:
        # deque(maxlen=...) drops the oldest point on overflow
        self.trajectory.append((float(self.position[0]), float(self.position[1])))

    @property
    def speed(self) -> float:
        """Current speed in canvas units per tick."""
        return norm(self.velocity)

    @property
    def deflection_angle(self) -> float:
        """
        Scattering angle so far, in radians.

        Angle between the current and the initial velocity, in [0, π].
        Zero if either velocity vanishes.
        """
        n0, n1 = norm(self.initial_velocity), self.speed
        if n0 == 0.0 or n1 == 0.0:
            return 0.0
        cos_theta = float(np.dot(self.initial_velocity, self.velocity)) / (n0 * n1)
        return float(np.arccos(np.clip(cos_theta, -1.0, 1.0)))

    def view(self) -> ParticleView:
        """Immutable snapshot for renderers."""
        return ParticleView(
            id=self.id,
            position=(float(self.position[0]), float(self.position[1])),
            trajectory=tuple(self.trajectory),
        )
