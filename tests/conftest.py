"""Shared fixtures: deterministic random sources and simulator builders."""
from typing import Iterable, Optional

import pytest

from cspsim.sim.config import PlantSimulationConfig
from cspsim.sim.factory import SimulatorFactory


class ConstantRandom:
    """Random source that always draws the same fraction."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value

    def uniform(self, low: float, high: float) -> float:
        return low + self.value * (high - low)


class ScriptedRandom:
    """Random source replaying fixed sequences of draws."""

    def __init__(self, randoms: Iterable[float] = (), uniforms: Iterable[float] = ()):
        self._randoms = list(randoms)
        self._uniforms = list(uniforms)

    def random(self) -> float:
        return self._randoms.pop(0)

    def uniform(self, low: float, high: float) -> float:
        return self._uniforms.pop(0)


@pytest.fixture
def constant_rng():
    return ConstantRandom


@pytest.fixture
def scripted_rng():
    return ScriptedRandom


@pytest.fixture
def quiet_rng():
    """Never triggers a weather or equipment event."""
    return ConstantRandom(0.99)


@pytest.fixture
def make_simulator(quiet_rng):
    def _make(rng: Optional[object] = None, **overrides):
        config = PlantSimulationConfig(**overrides)
        return SimulatorFactory.create_simulator(config, rng=rng if rng is not None else quiet_rng)

    return _make
