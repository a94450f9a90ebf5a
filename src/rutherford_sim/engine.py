# MIT License (see LICENSE)
"""
The simulation engine and per-frame tick.

SimulationEngine acts as the world container and simulation controller.
It manages:
- The collection of live alpha particles, in spawn order.
- The parameter set (proton/neutron counts, energy, model, playing flag).
- The spawn cadence of the beam.
- The per-frame tick:
    1. Spawn a particle if playing and the spawn interval has elapsed.
    2. Update every particle, then drop the ones that left the bounds.
    3. Return a FrameSnapshot for the renderer.

Structure:
    - User creates a SimulationEngine.
    - Control surface calls the setters between frames.
    - The host calls engine.tick(timestamp) once per frame.

The engine performs no drawing and never validates parameter ranges;
clamping happens in controls.ControlSurface.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field

import numpy as np

from .constants import (
    BASE_SPAWN_INTERVAL_MS,
    SPAWN_RATE_SCALE,
    MIN_SPAWN_INTERVAL_MS,
    BASE_SPEED,
    SPEED_SCALE,
    ENTRY_X,
    NUCLEUS_Y,
    BEAM_WIDTH,
)
from .particle import AlphaParticle
from .types import (
    Bounds,
    DEFAULT_BOUNDS,
    FrameSnapshot,
    Nucleus,
    NucleusModel,
    SimulationParams,
)

logger = logging.getLogger(__name__)


def spawn_interval(energy: float) -> float:
    """
    Milliseconds between spawns at a given energy level.

    interval = BASE_SPAWN_INTERVAL_MS - energy * SPAWN_RATE_SCALE, floored at
    MIN_SPAWN_INTERVAL_MS. Higher energy fires particles more often.
    """
    return max(MIN_SPAWN_INTERVAL_MS, BASE_SPAWN_INTERVAL_MS - energy * SPAWN_RATE_SCALE)


def launch_speed(energy: float) -> float:
    """Initial speed (units per tick), linear in energy."""
    return BASE_SPEED + (energy / 100.0) * SPEED_SCALE


@dataclass
class SimulationEngine:
    """
    Scattering simulation world.

    Attributes:
        params: Parameter set read every tick. Mutate it through the setters.
        bounds: Region particles must stay inside to remain alive.
        seed: Seed for the beam's random impact parameters. None draws fresh
              entropy from the OS.
        particles: Live particles in spawn order.
        last_spawn_time: Timestamp (ms) of the most recent spawn.
        time: Timestamp (ms) of the most recent tick.
        ticks: Number of ticks performed.
    """
    params: SimulationParams = field(default_factory=SimulationParams)
    bounds: Bounds = DEFAULT_BOUNDS
    seed: int | None = None

    # Internal state
    particles: list[AlphaParticle] = field(default_factory=list)
    last_spawn_time: float = 0.0
    time: float = 0.0
    ticks: int = 0

    def __post_init__(self) -> None:
        """Initialize internal structures after dataclass creation."""
        self._rng = np.random.default_rng(self.seed)
        self._next_id = 1

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def nucleus(self) -> Nucleus:
        """Scattering centre built from the current parameters."""
        return Nucleus(
            protons=self.params.protons,
            neutrons=self.params.neutrons,
            model=self.params.model,
        )

    @property
    def particle_count(self) -> int:
        return len(self.particles)

    def snapshot(self, timestamp: float | None = None) -> FrameSnapshot:
        """
        Read-only view of the current state for renderers.

        Args:
            timestamp: Frame time to stamp on the snapshot. Defaults to the
                       time of the last tick.
        """
        return FrameSnapshot(
            timestamp=self.time if timestamp is None else timestamp,
            nucleus=self.nucleus,
            show_traces=self.params.show_traces,
            playing=self.params.playing,
            particles=tuple(p.view() for p in self.particles),
        )

    # -------------------------------------------------------------------------
    # Simulation
    # -------------------------------------------------------------------------

    def spawn_particle(self) -> AlphaParticle:
        """
        Fire one alpha particle into the beam.

        The particle enters at ENTRY_X with a uniformly random vertical
        offset (impact parameter) inside BEAM_WIDTH centred on the nucleus,
        moving right at launch_speed(energy).

        Returns:
            The new particle (already added to the collection).
        """
        y_offset = (self._rng.random() - 0.5) * BEAM_WIDTH
        particle = AlphaParticle.launch(
            y=NUCLEUS_Y + y_offset,
            speed=launch_speed(self.params.energy),
            x=ENTRY_X,
        )
        particle.id = self._next_id
        self._next_id += 1
        self.particles.append(particle)
        logger.debug(
            "Spawned particle %d at (%.1f, %.1f) speed=%.2f",
            particle.id, particle.position[0], particle.position[1], particle.speed,
        )
        return particle

    def tick(self, timestamp: float) -> FrameSnapshot:
        """
        Advance the simulation by one frame.

        Args:
            timestamp: Host frame time in milliseconds (monotonic).

        Returns:
            Snapshot of the state after the tick.
        """
        if self.params.playing and timestamp - self.last_spawn_time > spawn_interval(self.params.energy):
            self.spawn_particle()
            self.last_spawn_time = timestamp

        nucleus = self.nucleus
        for p in self.particles:
            p.update(nucleus, self.bounds)

        alive = [p for p in self.particles if p.active]
        if len(alive) != len(self.particles):
            logger.debug("Removed %d particle(s) out of bounds", len(self.particles) - len(alive))
        self.particles = alive

        self.time = timestamp
        self.ticks += 1
        return self.snapshot(timestamp)

    # -------------------------------------------------------------------------
    # Controls
    # -------------------------------------------------------------------------

    def play(self) -> None:
        """Start spawning particles."""
        self.params.playing = True

    def pause(self) -> None:
        """Stop spawning. Particles in flight keep moving."""
        self.params.playing = False

    def set_playing(self, playing: bool) -> None:
        self.params.playing = bool(playing)

    def reset(self) -> None:
        """Remove all particles and stop spawning."""
        logger.debug("Reset: cleared %d particle(s)", len(self.particles))
        self.particles.clear()
        self.params.playing = False

    def set_model(self, model: NucleusModel | str) -> None:
        """
        Switch the nucleus model and clear all particles.

        Trajectories computed under one model are not carried into the other.

        Raises:
            ValueError: If model names no known NucleusModel.
        """
        self.params.model = NucleusModel.parse(model)
        self.particles.clear()
        logger.debug("Nucleus model set to %s", self.params.model.value)

    def set_energy(self, energy: int) -> None:
        self.params.energy = energy

    def set_protons(self, protons: int) -> None:
        self.params.protons = protons

    def set_neutrons(self, neutrons: int) -> None:
        self.params.neutrons = neutrons

    def set_show_traces(self, show: bool) -> None:
        self.params.show_traces = bool(show)
