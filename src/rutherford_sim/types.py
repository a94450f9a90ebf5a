# MIT License (see LICENSE)
"""
Core type definitions for the scattering simulation.

Defines the fundamental data structures:
- NucleusModel: Charge distribution variant (concentrated or diffuse).
- Nucleus: The scattering centre, rebuilt from the parameters every tick.
- Bounds: Extended canvas region that keeps particles alive.
- SimulationParams: The mutable parameter set owned by the engine.
- ParticleView, FrameSnapshot: Read-only per-frame state for renderers.

The particle itself lives in particle.py.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from .constants import (
    CANVAS_WIDTH,
    CANVAS_HEIGHT,
    BOUNDS_MARGIN,
    NUCLEUS_X,
    NUCLEUS_Y,
    NUCLEUS_RADIUS,
    DIFFUSE_CLOUD_RADIUS,
    DEFAULT_PROTONS,
    DEFAULT_NEUTRONS,
    DEFAULT_ENERGY,
)


# =============================================================================
# Nucleus
# =============================================================================

class NucleusModel(str, Enum):
    """
    Charge distribution of the target atom.

    CONCENTRATED: Point-like positive charge (Rutherford). Particles are
                  deflected by an inverse-square force.
    DIFFUSE:      Charge spread over the whole atom (Thomson "plum pudding").
                  No force is applied; particles travel in straight lines.
    """
    CONCENTRATED = "concentrated"
    DIFFUSE = "diffuse"

    @classmethod
    def parse(cls, value: NucleusModel | str) -> NucleusModel:
        """
        Resolve an enum member from a member or its name.

        Accepts the historical labels used by the experiment UI
        ("rutherford", "thomson", "plum_pudding") as aliases.

        Raises:
            ValueError: If the value names no known model.
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("-", "_").replace(" ", "_")
        if key in _MODEL_ALIASES:
            return _MODEL_ALIASES[key]
        raise ValueError(f"Unknown nucleus model: '{value}'")


_MODEL_ALIASES = {
    "concentrated": NucleusModel.CONCENTRATED,
    "rutherford": NucleusModel.CONCENTRATED,
    "diffuse": NucleusModel.DIFFUSE,
    "thomson": NucleusModel.DIFFUSE,
    "plum_pudding": NucleusModel.DIFFUSE,
}


@dataclass(frozen=True)
class Nucleus:
    """
    Scattering centre parameters for one tick.

    Attributes:
        protons: Proton count. Sets the nuclear charge.
        neutrons: Neutron count. Affects rendering only.
        model: Charge distribution variant.
        position: Centre [x, y] in canvas units.
        radius: Drawn radius of the concentrated nucleus.
        cloud_radius: Drawn radius of the diffuse charge cloud.
    """
    protons: int = DEFAULT_PROTONS
    neutrons: int = DEFAULT_NEUTRONS
    model: NucleusModel = NucleusModel.CONCENTRATED
    position: tuple[float, float] = (NUCLEUS_X, NUCLEUS_Y)
    radius: float = NUCLEUS_RADIUS
    cloud_radius: float = DIFFUSE_CLOUD_RADIUS

    def __post_init__(self) -> None:
        """Store position as a plain (x, y) float tuple."""
        x, y = self.position
        object.__setattr__(self, "position", (float(x), float(y)))

    @property
    def charge(self) -> float:
        """Nuclear charge in units of the elementary charge."""
        return float(self.protons)

    @property
    def mass_number(self) -> int:
        """A = Z + N."""
        return self.protons + self.neutrons


# =============================================================================
# Bounds
# =============================================================================

@dataclass(frozen=True)
class Bounds:
    """
    Canvas rectangle padded by a margin on all sides.

    A particle is alive while its position lies inside the padded region,
    so traces run off-screen before being dropped.
    """
    width: float = CANVAS_WIDTH
    height: float = CANVAS_HEIGHT
    margin: float = BOUNDS_MARGIN

    def contains(self, point) -> bool:
        x, y = point[0], point[1]
        return (
            -self.margin <= x <= self.width + self.margin
            and -self.margin <= y <= self.height + self.margin
        )


DEFAULT_BOUNDS = Bounds()


# =============================================================================
# Parameters
# =============================================================================

@dataclass
class SimulationParams:
    """
    Mutable parameter set of a running simulation.

    Owned by SimulationEngine and changed only through its setters, which the
    ControlSurface calls after clamping user input.

    Attributes:
        protons: Nuclear proton count (expected 20-100).
        neutrons: Nuclear neutron count (expected 20-150).
        energy: Beam energy level (expected 0-100). Sets speed and spawn rate.
        model: Active nucleus model.
        playing: Whether new particles are spawned.
        show_traces: Whether renderers draw particle trajectories.
    """
    protons: int = DEFAULT_PROTONS
    neutrons: int = DEFAULT_NEUTRONS
    energy: int = DEFAULT_ENERGY
    model: NucleusModel = NucleusModel.CONCENTRATED
    playing: bool = False
    show_traces: bool = True


# =============================================================================
# Render-facing views
# =============================================================================

@dataclass(frozen=True)
class ParticleView:
    """Immutable copy of the drawable state of one particle."""
    id: int
    position: tuple[float, float]
    trajectory: tuple[tuple[float, float], ...]


@dataclass(frozen=True)
class FrameSnapshot:
    """
    Everything a renderer needs to draw one frame.

    Particles are listed in spawn order.
    """
    timestamp: float
    nucleus: Nucleus
    show_traces: bool
    playing: bool
    particles: tuple[ParticleView, ...] = field(default_factory=tuple)
