"""Tests for the pyrolysis reactor model."""
import pytest

from cspsim.core.catalog import get_feedstock
from cspsim.core.errors import ConfigurationError
from cspsim.core.reactor.config import PyrolysisReactorConfig
from cspsim.core.reactor.model import PyrolysisReactor
from cspsim.core.reactor.products import PyrolysisProducts

PS = get_feedstock("PS")
HDPE = get_feedstock("HDPE")


@pytest.fixture
def reactor():
    return PyrolysisReactor(PyrolysisReactorConfig())


def test_readiness_threshold(reactor):
    assert reactor.is_ready(700.1, PS)
    assert not reactor.is_ready(700.0, PS)
    assert reactor.is_ready(650.5, HDPE)
    assert not reactor.is_ready(290.0, HDPE)


def test_readiness_follows_configured_margin():
    reactor = PyrolysisReactor(PyrolysisReactorConfig(readiness_margin=100.0))

    assert reactor.readiness_temperature(PS) == 800.0
    assert reactor.readiness_temperature(HDPE) == 750.0
    assert not reactor.is_ready(760.0, PS)
    assert reactor.is_ready(760.0, HDPE)


def test_one_hour_of_polystyrene_at_10_mw(reactor):
    # Arrange
    expected_plastic = min(10_000 / (450 / 3600), 500) * 1.0

    # Act
    products = reactor.advance(850.0, thermal_power_mw=10.0, dt_seconds=3600, feedstock=PS)

    # Assert
    assert products.rate_kg_h == pytest.approx(500.0)
    assert products.plastic == pytest.approx(expected_plastic)
    assert products.hydrogen == pytest.approx(expected_plastic * 1000 * 95 * 2.016 / 1e6)
    assert products.carbon == pytest.approx(expected_plastic * 0.48)
    assert products.wax == pytest.approx(expected_plastic * 0.20)
    assert products.waste == pytest.approx(expected_plastic * 0.08)


def test_throughput_limited_by_power(reactor):
    # 10 kW sustains 10 / (450 / 3600) = 80 kg/h
    products = reactor.process(0.01, dt_seconds=1800, feedstock=HDPE)

    assert products.rate_kg_h == pytest.approx(80.0)
    assert products.plastic == pytest.approx(40.0)


def test_idle_when_not_ready(reactor):
    assert reactor.advance(600.0, 50.0, 3600, HDPE) == PyrolysisProducts()


@pytest.mark.parametrize("power", [0.0, 1.0, 2.0])
def test_idle_without_enough_power(reactor, power):
    products = reactor.advance(850.0, power, 3600, HDPE)

    assert products.is_empty
    assert products.hydrogen == 0.0


def test_zero_power_does_not_divide(reactor):
    products = reactor.process(0.0, dt_seconds=3600, feedstock=HDPE)

    assert products.plastic == 0.0


def test_invalid_config_rejected():
    with pytest.raises(ConfigurationError):
        PyrolysisReactorConfig(pyrolysis_energy=0.0)
    with pytest.raises(ConfigurationError):
        PyrolysisReactorConfig(capacity_kg_h=-1.0)
