"""
Microbenchmark: time per tick vs beam energy (which sets particle count).
Run:
  python benchmarks/bench_ticks.py
"""
import time

from rutherford_sim import FrameLoop, SimulationEngine, SimulationParams


def run(energy: int, frames: int = 600):
    engine = SimulationEngine(
        params=SimulationParams(playing=True, energy=energy),
        seed=12345,  # determinism
    )
    loop = FrameLoop(engine)

    # warmup: fill the canvas with particles
    loop.run(300)

    t0 = time.perf_counter()
    loop.run(frames, start_time=engine.time + loop.frame_interval_ms)
    t1 = time.perf_counter()

    per_tick = (t1 - t0) / frames
    return per_tick, engine.particle_count


if __name__ == "__main__":
    for energy in [0, 25, 50, 75, 100]:
        per_tick, n = run(energy)
        print(f"energy={energy:3d}  particles={n:3d}  tick={1e3*per_tick:8.3f} ms  ticks/s={1/per_tick:8.1f}")
