import pytest

from rutherford_sim.controls import ControlSurface, parse_int
from rutherford_sim.engine import SimulationEngine
from rutherford_sim.types import NucleusModel


@pytest.fixture
def controls():
    return ControlSurface(SimulationEngine(seed=0))


def test_defaults(controls):
    params = controls.engine.params
    assert params.protons == 80
    assert params.neutrons == 121
    assert params.energy == 75
    assert params.model is NucleusModel.CONCENTRATED
    assert params.playing is False
    assert params.show_traces is True


def test_play_pause_reset(controls):
    controls.play()
    assert controls.engine.params.playing
    controls.engine.spawn_particle()

    controls.pause()
    assert not controls.engine.params.playing
    assert controls.engine.particle_count == 1

    controls.play()
    controls.reset()
    assert not controls.engine.params.playing
    assert controls.engine.particle_count == 0


def test_numeric_inputs_are_clamped(controls):
    params = controls.engine.params

    assert controls.set_protons(150) == 100
    assert params.protons == 100
    assert controls.set_protons(3) == 20
    assert controls.set_protons("64") == 64
    assert params.protons == 64

    assert controls.set_neutrons(999) == 150
    assert controls.set_neutrons(-1) == 20
    assert params.neutrons == 20

    assert controls.set_energy(120) == 100
    assert controls.set_energy(-10) == 0
    assert params.energy == 0


def test_fractional_input_is_truncated(controls):
    """Numeric strings keep their leading integer, floats truncate."""
    assert controls.set_protons("12.5") == 20
    assert controls.set_protons("64.9") == 64
    assert controls.set_neutrons(" 42px") == 42
    assert controls.set_energy(33.7) == 33
    assert controls.engine.params.energy == 33


@pytest.mark.parametrize("value", ["abc", "", "   ", float("nan"), float("inf"), None])
def test_malformed_input_leaves_parameters_unchanged(controls, value):
    params = controls.engine.params
    controls.set_protons(55)
    controls.set_neutrons(90)
    controls.set_energy(40)

    assert controls.set_protons(value) == 55
    assert controls.set_neutrons(value) == 90
    assert controls.set_energy(value) == 40
    assert (params.protons, params.neutrons, params.energy) == (55, 90, 40)


def test_parse_int():
    assert parse_int("12.5") == 12
    assert parse_int("-7") == -7
    assert parse_int(99) == 99
    assert parse_int("x1") is None
    assert parse_int(float("nan")) is None


def test_increase_decrease_stop_at_bounds(controls):
    params = controls.engine.params
    controls.set_protons(99)
    assert controls.increase("protons") == 100
    assert controls.increase("protons") == 100

    controls.set_neutrons(21)
    assert controls.decrease("neutrons") == 20
    assert controls.decrease("neutrons") == 20
    assert params.neutrons == 20

    with pytest.raises(ValueError):
        controls.increase("electrons")


def test_toggle_traces(controls):
    controls.toggle_traces(False)
    assert controls.engine.snapshot().show_traces is False
    controls.toggle_traces(True)
    assert controls.engine.snapshot().show_traces is True


@pytest.mark.parametrize(
    "name, expected",
    [
        ("concentrated", NucleusModel.CONCENTRATED),
        ("rutherford", NucleusModel.CONCENTRATED),
        ("diffuse", NucleusModel.DIFFUSE),
        ("Plum Pudding", NucleusModel.DIFFUSE),
        (NucleusModel.DIFFUSE, NucleusModel.DIFFUSE),
    ],
)
def test_set_model_accepts_aliases(controls, name, expected):
    controls.engine.spawn_particle()
    controls.set_model(name)
    assert controls.engine.params.model is expected
    assert controls.engine.particle_count == 0
