# MIT License (see LICENSE)
"""
Renderer adapters for scattering visualization.

This module provides an abstract base class for rendering and headless
implementations. The engine has no rendering dependency; it hands each
frame over as an immutable FrameSnapshot and adapters decide how to draw it.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TextIO
import sys

from ..types import FrameSnapshot, Nucleus, NucleusModel, ParticleView


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses implement the drawing methods to integrate with a graphics
    backend (canvas, matplotlib, pygame, ...). Colors, glow and gradients
    are entirely the subclass's business.

    Usage:
        renderer.begin_frame(snapshot)
        renderer.draw_nucleus(snapshot.nucleus)
        for particle in snapshot.particles:
            renderer.draw_particle(particle, snapshot.show_traces)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_frame(snapshot)
    """

    @abstractmethod
    def begin_frame(self, snapshot: FrameSnapshot) -> None:
        """
        Begin a new frame for rendering.

        Args:
            snapshot: State of the frame about to be drawn.
        """
        ...

    @abstractmethod
    def draw_nucleus(self, nucleus: Nucleus) -> None:
        """Draw the scattering centre (point nucleus or diffuse cloud)."""
        ...

    @abstractmethod
    def draw_particle(self, particle: ParticleView, show_trace: bool) -> None:
        """
        Draw a single particle.

        Args:
            particle: The particle to draw.
            show_trace: Whether to draw its trajectory polyline as well.
        """
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_frame(self, snapshot: FrameSnapshot) -> None:
        """
        Convenience method to draw a whole frame in spawn order.

        Args:
            snapshot: The frame to render.
        """
        self.begin_frame(snapshot)
        self.draw_nucleus(snapshot.nucleus)
        for particle in snapshot.particles:
            self.draw_particle(particle, snapshot.show_traces)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Console/text debug renderer for development and testing.

    Writes a human-readable line per entity to a stream (stdout by default).

    Output:
        === Frame t=1016.7 ms (concentrated, Z=80, A=201) ===
        [1] @ (33.20, 187.41) trace=10
        [2] @ (-14.00, 302.77) trace=2
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Initialize the debug renderer.

        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include trace lengths.
        """
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, snapshot: FrameSnapshot) -> None:
        nucleus = snapshot.nucleus
        self.output.write(
            f"=== Frame t={snapshot.timestamp:.1f} ms "
            f"({nucleus.model.value}, Z={nucleus.protons}, A={nucleus.mass_number}) ===\n"
        )

    def draw_nucleus(self, nucleus: Nucleus) -> None:
        # The header already carries the nucleus parameters.
        pass

    def draw_particle(self, particle: ParticleView, show_trace: bool) -> None:
        x, y = particle.position
        line = f"[{particle.id}] @ ({x:.2f}, {y:.2f})"
        if self.verbose and show_trace:
            line += f" trace={len(particle.trajectory)}"
        self.output.write(line + "\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """
    No-op renderer that does nothing.

    Useful as a placeholder or for benchmarking without rendering overhead.
    """

    def begin_frame(self, snapshot: FrameSnapshot) -> None:
        pass

    def draw_nucleus(self, nucleus: Nucleus) -> None:
        pass

    def draw_particle(self, particle: ParticleView, show_trace: bool) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that buffers frame data for later retrieval.

    Stores a plain-dict copy of every frame, useful for recording runs or
    feeding an offline plotting step.

    Example:
        renderer = BufferedRenderer()
        FrameLoop(engine, renderer).run(300)

        for frame in renderer.frames:
            print(f"t={frame['time']}, particles={len(frame['particles'])}")
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, snapshot: FrameSnapshot) -> None:
        """Begin buffering a new frame."""
        self._current_frame = {
            "time": snapshot.timestamp,
            "playing": snapshot.playing,
            "nucleus": None,
            "particles": [],
        }

    def draw_nucleus(self, nucleus: Nucleus) -> None:
        if self._current_frame is None:
            return

        self._current_frame["nucleus"] = {
            "model": nucleus.model.value,
            "position": list(nucleus.position),
            "protons": nucleus.protons,
            "neutrons": nucleus.neutrons,
            "radius": nucleus.radius if nucleus.model is NucleusModel.CONCENTRATED else nucleus.cloud_radius,
        }

    def draw_particle(self, particle: ParticleView, show_trace: bool) -> None:
        """Buffer particle state."""
        if self._current_frame is None:
            return

        self._current_frame["particles"].append({
            "id": particle.id,
            "position": list(particle.position),
            "trajectory": [list(p) for p in particle.trajectory] if show_trace else [],
        })

    def end_frame(self) -> None:
        """Finalize and store the buffered frame."""
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        """Clear all buffered frames."""
        self.frames.clear()
