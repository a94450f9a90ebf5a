import numpy as np

from rutherford_sim.constants import (
    COULOMB_CONSTANT,
    MIN_DISTANCE,
    NUCLEUS_X,
    NUCLEUS_Y,
    ALPHA_CHARGE,
    ALPHA_MASS,
)
from rutherford_sim.core.forces import coulomb_acceleration, nucleus_acceleration
from rutherford_sim.core.integrators import euler_step
from rutherford_sim.particle import AlphaParticle
from rutherford_sim.types import Nucleus, NucleusModel

CENTER = np.array([NUCLEUS_X, NUCLEUS_Y])


def _accel_at(distance, nucleus_charge=80.0):
    pos = CENTER + np.array([-distance, 0.0])
    return coulomb_acceleration(pos, ALPHA_CHARGE, ALPHA_MASS, CENTER, nucleus_charge)


def test_inverse_square_magnitude():
    """
    a = k q Q / (m r²)
    """
    r = 40.0
    a = _accel_at(r)
    expected = COULOMB_CONSTANT * ALPHA_CHARGE * 80.0 / (ALPHA_MASS * r * r)
    assert abs(np.linalg.norm(a) - expected) < 1e-12

    # Halving the distance quadruples the acceleration
    ratio = np.linalg.norm(_accel_at(r / 2)) / np.linalg.norm(a)
    assert abs(ratio - 4.0) < 1e-9


def test_acceleration_strictly_increases_as_distance_decreases():
    distances = [600.0, 350.0, 120.0, 50.0, 15.0, 4.0, 1.5, MIN_DISTANCE * 1.01]
    mags = [np.linalg.norm(_accel_at(d)) for d in distances]
    print("magnitudes", mags)
    assert all(b > a for a, b in zip(mags, mags[1:]))


def test_force_is_repulsive_for_like_charges():
    """Particle left of the nucleus is pushed further left."""
    a = _accel_at(100.0)
    assert a[0] < 0.0
    assert a[1] == 0.0

    below = CENTER + np.array([0.0, 30.0])
    a = coulomb_acceleration(below, ALPHA_CHARGE, ALPHA_MASS, CENTER, 80.0)
    assert a[1] > 0.0
    assert abs(a[0]) < 1e-12


def test_opposite_charges_attract():
    pos = CENTER + np.array([-100.0, 0.0])
    a = coulomb_acceleration(pos, -2.0, ALPHA_MASS, CENTER, 80.0)
    assert a[0] > 0.0


def test_no_cutoff_at_long_range():
    a = _accel_at(5000.0)
    assert np.linalg.norm(a) > 0.0


def test_coincident_particle_gets_finite_acceleration():
    """Exact coincidence has no direction: zero acceleration, never NaN/inf."""
    a = coulomb_acceleration(CENTER.copy(), ALPHA_CHARGE, ALPHA_MASS, CENTER, 100.0)
    assert np.array_equal(a, [0.0, 0.0])

    # Inside the clamp radius the magnitude is capped at the r = MIN_DISTANCE value
    a = coulomb_acceleration(CENTER + [1e-9, 0.0], ALPHA_CHARGE, ALPHA_MASS, CENTER, 100.0)
    cap = COULOMB_CONSTANT * ALPHA_CHARGE * 100.0 / (ALPHA_MASS * MIN_DISTANCE ** 2)
    assert np.all(np.isfinite(a))
    assert abs(np.linalg.norm(a) - cap) < 1e-9


def test_zero_nucleus_charge_gives_zero_acceleration():
    a = _accel_at(10.0, nucleus_charge=0.0)
    assert np.array_equal(a, [0.0, 0.0])


def test_diffuse_model_applies_no_force():
    p = AlphaParticle(position=CENTER + [-5.0, 3.0], velocity=(5.0, 0.0))
    a = nucleus_acceleration(p, Nucleus(protons=100, model=NucleusModel.DIFFUSE))
    assert np.array_equal(a, [0.0, 0.0])

    a = nucleus_acceleration(p, Nucleus(protons=100, model=NucleusModel.CONCENTRATED))
    assert np.linalg.norm(a) > 0.0


def test_euler_step_updates_velocity_then_position():
    p, v = euler_step(np.array([0.0, 0.0]), np.array([1.0, 2.0]), np.array([0.5, -1.0]))
    assert np.allclose(v, [1.5, 1.0])
    assert np.allclose(p, [1.5, 1.0])
