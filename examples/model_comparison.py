"""
Fire the same beam at both nucleus models and compare scattering angles.

Under the concentrated model a few particles come back (angle > 90°);
under the diffuse model every particle passes straight through.
"""
import logging

import numpy as np

from rutherford_sim import ControlSurface, SimulationEngine
from rutherford_sim.logging_config import setup_logging

setup_logging(logging.INFO)
logger = logging.getLogger("rutherford_sim.examples")


def fire(model: str, n_particles: int = 2000, seed: int = 1) -> np.ndarray:
    engine = SimulationEngine(seed=seed)
    controls = ControlSurface(engine)
    controls.set_model(model)
    controls.set_protons(79)
    controls.set_energy(50)

    angles = []
    for _ in range(n_particles):
        p = engine.spawn_particle()
        while p.active:
            p.update(engine.nucleus, engine.bounds)
        angles.append(p.deflection_angle)
        engine.reset()
    return np.degrees(np.array(angles))


for model in ("concentrated", "diffuse"):
    deg = fire(model)
    logger.info(
        "%-12s mean=%6.2f°  max=%6.2f°  >10°: %4d  >90°: %4d",
        model, deg.mean(), deg.max(), int((deg > 10).sum()), int((deg > 90).sum()),
    )
