# MIT License (see LICENSE)
"""
Update-then-render frame loop.

One simulation tick per rendered frame. In a browser or GUI the host's
frame callback calls FrameLoop.frame(timestamp); headless runs use
FrameLoop.run(), which stands in for the scheduler with evenly spaced
synthetic timestamps.

Example:
    loop = FrameLoop(engine, DebugRenderer())
    engine.play()
    loop.run(600)   # ten seconds at 60 fps
"""
from __future__ import annotations
import logging

from .engine import SimulationEngine
from .renderer.adapter import NullRenderer, RendererAdapter
from .types import FrameSnapshot

logger = logging.getLogger(__name__)


class FrameLoop:
    """
    Couples an engine with a renderer.

    Attributes:
        engine: Simulation to advance.
        renderer: Adapter that draws each frame (NullRenderer by default).
        frame_interval_ms: Spacing of synthetic timestamps used by run().
    """

    def __init__(
        self,
        engine: SimulationEngine,
        renderer: RendererAdapter | None = None,
        frame_interval_ms: float = 1000.0 / 60.0,
    ):
        if frame_interval_ms <= 0:
            raise ValueError(f"frame_interval_ms must be positive, got {frame_interval_ms}")
        self.engine = engine
        self.renderer = renderer or NullRenderer()
        self.frame_interval_ms = frame_interval_ms

    def frame(self, timestamp: float) -> FrameSnapshot:
        """Tick the engine once and render the resulting state."""
        snapshot = self.engine.tick(timestamp)
        self.renderer.render_frame(snapshot)
        return snapshot

    def run(self, n_frames: int, start_time: float = 0.0) -> FrameSnapshot:
        """
        Drive n_frames frames at start_time, start_time + interval, ...

        Returns:
            Snapshot of the last frame (current state if n_frames is 0).
        """
        snapshot = self.engine.snapshot()
        for i in range(n_frames):
            snapshot = self.frame(start_time + i * self.frame_interval_ms)
        logger.info(
            "Ran %d frame(s): %d particle(s) in flight", n_frames, len(snapshot.particles)
        )
        return snapshot
