# MIT License (see LICENSE)
"""
Control surface between UI widgets and the simulation engine.

Widgets (sliders, number inputs, +/- buttons, model selector) call these
methods between frames. Every numeric value is clamped to its allowed range
before it reaches the engine; out-of-range input is never rejected and
malformed input is ignored.

Example:
    controls = ControlSurface(engine)
    controls.set_protons("120")   # clamped to 100
    controls.set_energy("abc")    # ignored, energy unchanged
    controls.increase("neutrons")
    controls.set_model("diffuse")
"""
from __future__ import annotations
import logging
import math
import re

from .constants import ENERGY_RANGE, PROTON_RANGE, NEUTRON_RANGE
from .engine import SimulationEngine
from .types import NucleusModel
from .util import clamp

logger = logging.getLogger(__name__)


class ControlSurface:
    """
    Clamping front-end for a SimulationEngine.

    Attributes:
        engine: The engine whose parameters are controlled.
    """

    def __init__(self, engine: SimulationEngine):
        self.engine = engine

    # -------------------------------------------------------------------------
    # Buttons
    # -------------------------------------------------------------------------

    def play(self) -> None:
        self.engine.play()

    def pause(self) -> None:
        self.engine.pause()

    def reset(self) -> None:
        self.engine.reset()

    def toggle_traces(self, show: bool) -> None:
        self.engine.set_show_traces(show)

    def set_model(self, model: NucleusModel | str) -> None:
        """Select the nucleus model. Clears particles in flight."""
        self.engine.set_model(model)

    # -------------------------------------------------------------------------
    # Numeric inputs
    # -------------------------------------------------------------------------

    def set_energy(self, value: int | float | str) -> int:
        """Set the beam energy. Returns the value actually applied."""
        energy = self._clamped("energy", value, ENERGY_RANGE, self.engine.params.energy)
        self.engine.set_energy(energy)
        return energy

    def set_protons(self, value: int | float | str) -> int:
        """Set the proton count. Returns the value actually applied."""
        protons = self._clamped("protons", value, PROTON_RANGE, self.engine.params.protons)
        self.engine.set_protons(protons)
        return protons

    def set_neutrons(self, value: int | float | str) -> int:
        """Set the neutron count. Returns the value actually applied."""
        neutrons = self._clamped("neutrons", value, NEUTRON_RANGE, self.engine.params.neutrons)
        self.engine.set_neutrons(neutrons)
        return neutrons

    def increase(self, target: str) -> int:
        """Step a nucleon count up by one, stopping at the upper bound."""
        return self._step(target, +1)

    def decrease(self, target: str) -> int:
        """Step a nucleon count down by one, stopping at the lower bound."""
        return self._step(target, -1)

    def _step(self, target: str, delta: int) -> int:
        params = self.engine.params
        if target == "protons":
            return self.set_protons(params.protons + delta)
        if target == "neutrons":
            return self.set_neutrons(params.neutrons + delta)
        raise ValueError(f"Unknown control target: '{target}'")

    @staticmethod
    def _clamped(name: str, value: int | float | str, bounds: tuple[int, int], current: int) -> int:
        """
        Parse value as an integer and limit it to bounds.

        Unparseable input leaves the parameter at current.
        """
        raw = parse_int(value)
        if raw is None:
            logger.debug("Ignored malformed %s input %r", name, value)
            return current
        lo, hi = bounds
        result = clamp(raw, lo, hi)
        if result != raw:
            logger.debug("Clamped %s from %d to %d", name, raw, result)
        return result


def parse_int(value: int | float | str) -> int | None:
    """
    Lenient integer parsing for widget input.

    Numbers are truncated toward zero; strings yield their leading integer
    ("12.5" -> 12, " 42px" -> 42). Returns None for NaN, infinities and
    strings without leading digits.
    """
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(0)) if match else None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return int(number)


_LEADING_INT = re.compile(r"\s*[+-]?\d+")
