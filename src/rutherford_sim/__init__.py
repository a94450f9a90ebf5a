# MIT License (see LICENSE)
"""
rutherford_sim - Alpha particle scattering off a model nucleus.

This package simulates a Rutherford gold-foil experiment for interactive,
pedagogical visualization: alpha particles are fired at a nucleus and
deflected by an inverse-square repulsive force (concentrated model) or pass
straight through (diffuse model).

Main entry points:
    - SimulationEngine: Particle collection, parameters and per-frame tick.
    - ControlSurface: Clamping setters for UI widgets.
    - FrameLoop: Update-then-render driver.
    - AlphaParticle: A single particle with its bounded trace.
    - NucleusModel: CONCENTRATED or DIFFUSE.

Submodules:
    - core: Force model and integrator.
    - renderer: Rendering adapters.

Example:
    from rutherford_sim import SimulationEngine, FrameLoop
    from rutherford_sim.renderer import DebugRenderer

    engine = SimulationEngine(seed=42)
    engine.play()
    FrameLoop(engine, DebugRenderer()).run(120)
"""
from .engine import SimulationEngine, spawn_interval, launch_speed
from .controls import ControlSurface
from .loop import FrameLoop
from .particle import AlphaParticle
from .types import Bounds, FrameSnapshot, Nucleus, NucleusModel, ParticleView, SimulationParams

__all__ = [
    # Simulation
    "SimulationEngine",
    "ControlSurface",
    "FrameLoop",
    "spawn_interval",
    "launch_speed",
    # Entities
    "AlphaParticle",
    "Nucleus",
    "NucleusModel",
    "Bounds",
    "SimulationParams",
    # Render-facing views
    "FrameSnapshot",
    "ParticleView",
]
