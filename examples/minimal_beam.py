# examples/minimal_beam.py
from rutherford_sim import SimulationEngine, FrameLoop
from rutherford_sim.renderer import DebugRenderer

engine = SimulationEngine(seed=42)
engine.play()

# Two seconds at 60 fps, printing every frame
snapshot = FrameLoop(engine, DebugRenderer(verbose=False)).run(120)

print("t:", snapshot.timestamp)
print("particles in flight:", len(snapshot.particles))
