# MIT License (see LICENSE)
"""
Force model for alpha particle scattering.

The nucleus acts on each particle through a Coulomb-like central force

    F = k * q_particle * q_nucleus / r²

directed along the line from the nucleus to the particle. The acceleration
a = F / m is returned per simulation tick; there is no distance cutoff, so
far-field particles pick up small deflections as well.

Key concepts:
- Only the particle-nucleus interaction exists. Particles never act on
  each other.
- The distance is clamped to MIN_DISTANCE so the acceleration stays finite
  when a particle passes through the nucleus centre.
- Under the diffuse model no force is applied at all.
"""
from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np

from ..constants import COULOMB_CONSTANT, MIN_DISTANCE
from ..types import Nucleus, NucleusModel
from ..util import displacement, norm, unit

if TYPE_CHECKING:
    from ..particle import AlphaParticle


def coulomb_acceleration(
    position: np.ndarray,
    charge: float,
    mass: float,
    nucleus_position: np.ndarray,
    nucleus_charge: float,
    k: float = COULOMB_CONSTANT,
    min_distance: float = MIN_DISTANCE,
) -> np.ndarray:
    """
    Acceleration of a point charge in the field of a fixed point charge.

    Implements a = k * q * Q / (m * r²) along (position - nucleus_position).
    A positive charge product repels, a negative one attracts.

    Args:
        position: Particle position [x, y].
        charge: Particle charge q.
        mass: Particle mass m. Must be > 0.
        nucleus_position: Centre of the scattering charge [x, y].
        nucleus_charge: Scattering charge Q.
        k: Repulsion constant.
        min_distance: Lower bound applied to r before squaring.

    Returns:
        Acceleration [ax, ay] for one tick. The zero vector when the particle
        sits exactly on the nucleus centre (direction undefined) or either
        charge is zero.
    """
    r = displacement(position, nucleus_position)
    distance = max(norm(r), min_distance)
    magnitude = k * charge * nucleus_charge / (distance * distance)
    return unit(r) * (magnitude / mass)


def nucleus_acceleration(particle: "AlphaParticle", nucleus: Nucleus) -> np.ndarray:
    """
    Acceleration the nucleus imparts on a particle under the active model.

    CONCENTRATED applies the Coulomb law. DIFFUSE applies nothing, which
    keeps particles on straight lines.
    """
    if nucleus.model is NucleusModel.CONCENTRATED:
        return coulomb_acceleration(
            particle.position,
            particle.charge,
            particle.mass,
            nucleus.position,
            nucleus.charge,
        )
    return np.zeros(2, dtype=np.float64)
