"""End-to-end tests of the plant simulator tick pipeline."""
import dataclasses
import datetime
from unittest.mock import patch

import numpy as np
import pytest

from cspsim.core.accumulator import DailyStats, ProductionTotals
from cspsim.core.catalog import SPEED_PRESETS
from cspsim.core.errors import ConfigurationError
from cspsim.core.weather.state import WeatherState

PRODUCTION_FIELDS = ("hydrogen", "carbon", "wax", "waste", "plastic_processed")
DAILY_FIELDS = ("energy_collected", "plastic_processed", "hydrogen_produced", "carbon_produced", "heat_loss")


def ticks_per_day(speed: str) -> int:
    return 24 * 60 // SPEED_PRESETS[speed].multiplier


def test_initial_state(make_simulator):
    snapshot = make_simulator().snapshot()

    assert (snapshot.hour, snapshot.minute, snapshot.tick_count) == (6, 0, 0)
    assert snapshot.date == datetime.date(2026, 1, 15)
    assert snapshot.thermal.reactor_temperature == 290.0
    assert snapshot.thermal.hot_salt_temperature == 420.0
    assert snapshot.thermal.cold_salt_temperature == 290.0
    assert snapshot.weather == WeatherState()
    assert snapshot.heliostats.operational == 2127
    assert snapshot.production == ProductionTotals()
    assert snapshot.daily == DailyStats()
    assert snapshot.field_efficiency == 1.0
    assert snapshot.field_area_ha == pytest.approx(2127 * 115 / 10000)


def test_riyadh_morning_heats_reactor(make_simulator):
    # Arrange
    simulator = make_simulator(location="Riyadh, Saudi Arabia", feedstock="HDPE", speed="realtime")

    # Act: 06:00 to 12:00, one minute per tick, no clouds
    snapshots = simulator.run(360)

    # Assert
    noon = snapshots[-1]
    assert (noon.hour, noon.minute) == (12, 0)
    assert noon.weather.cloud_cover == 0.0
    assert noon.thermal_power_mw > 0
    temperatures = [s.thermal.reactor_temperature for s in snapshots]
    first_rise = next(i for i, t in enumerate(temperatures) if t > 290.0)
    assert all(t == 290.0 for t in temperatures[:first_rise])
    rising = temperatures[first_rise:]
    assert all(later > earlier for earlier, later in zip(rising, rising[1:]))


def test_polystyrene_hour_at_fixed_power(make_simulator):
    # Arrange
    simulator = make_simulator(feedstock="PS", speed="realtime")
    simulator.thermal.reactor_temperature = 850.0

    # Act: one simulated hour at 10 MW
    with patch.object(simulator.power_model, "thermal_power_mw", return_value=10.0):
        snapshots = simulator.run(60)

    # Assert
    expected_plastic = min(10_000 / (450 / 3600), 500) * 1.0
    production = snapshots[-1].production
    assert all(s.thermal.pyrolysis_active for s in snapshots)
    assert production.plastic_processed == pytest.approx(expected_plastic)
    assert production.hydrogen == pytest.approx(expected_plastic * 1000 * 95 * 2.016 / 1e6)
    assert production.carbon == pytest.approx(expected_plastic * 0.48)
    assert snapshots[-1].daily.energy_collected == pytest.approx(10.0)


def test_full_cloud_cover_attenuates_power(make_simulator, constant_rng):
    # Arrange: draws of 0.0 trigger a cloud event with zero increase every update
    simulator = make_simulator(rng=constant_rng(0.0), speed="fast")
    simulator.weather = WeatherState(cloud_cover=100.0)

    # Act
    snapshots = simulator.run(ticks_per_day("fast"))

    # Assert
    for snapshot in snapshots:
        assert snapshot.weather.cloud_cover == 100.0
        day_of_year = snapshot.date.timetuple().tm_yday
        clear = simulator.solar_model.compute(snapshot.hour, snapshot.minute, day_of_year, simulator.location, 0)
        assert snapshot.dni == pytest.approx(clear.dni * 0.3)
        assert snapshot.thermal_power_mw <= simulator.power_model.thermal_power_mw(clear.dni, 2127, 0.0) * 0.3 + 1e-9


def test_reactor_cools_at_fixed_rate_at_night(make_simulator):
    simulator = make_simulator(speed="ultra_fast")
    simulator.thermal.reactor_temperature = 400.0
    simulator.clock.hour = 19

    snapshots = simulator.run(5)

    temperatures = [s.thermal.reactor_temperature for s in snapshots]
    assert temperatures == pytest.approx([400.0 - 3.6 * k for k in range(1, 6)])
    assert not any(s.is_daytime for s in snapshots)


def test_reactor_settles_at_cold_salt_floor(make_simulator):
    simulator = make_simulator(speed="ultra_fast")
    simulator.thermal.reactor_temperature = 300.0
    simulator.clock.hour = 19

    snapshots = simulator.run(8)

    assert snapshots[2].thermal.reactor_temperature == 290.0
    assert snapshots[-1].thermal.reactor_temperature == 290.0


def test_day_rollover_resets_daily_stats(make_simulator):
    # Arrange: a day of accumulation, then jump to 23:00
    simulator = make_simulator(speed="ultra_fast")
    simulator.run(10)
    assert simulator.snapshot().daily.energy_collected > 0
    production_before = simulator.snapshot().production
    simulator.clock.hour = 23
    simulator.clock.minute = 0

    # Act
    crossing = simulator.step()

    # Assert
    assert crossing.date == datetime.date(2026, 1, 16)
    assert (crossing.hour, crossing.minute) == (0, 12)
    assert crossing.daily == DailyStats()
    assert crossing.production == production_before
    reports = simulator.daily_reports
    assert len(reports) == 1
    assert reports[0].date == datetime.date(2026, 1, 15)
    assert reports[0].stats.energy_collected > 0
    assert reports[0].stats.heat_loss > 0

    following = simulator.step()
    assert following.daily.heat_loss > 0
    assert following.daily.energy_collected == 0.0


@pytest.mark.parametrize("speed, days", [("fast", 8), ("extreme", 20)])
def test_totals_monotonic_and_daily_reset_at_boundaries(make_simulator, speed, days):
    simulator = make_simulator(rng=np.random.default_rng(3), speed=speed)
    previous = simulator.snapshot()

    for snapshot in simulator.run(days * ticks_per_day(speed)):
        for name in PRODUCTION_FIELDS:
            assert getattr(snapshot.production, name) >= getattr(previous.production, name)
        if snapshot.date != previous.date:
            assert snapshot.daily == DailyStats()
        else:
            for name in DAILY_FIELDS:
                assert getattr(snapshot.daily, name) >= getattr(previous.daily, name)
        previous = snapshot

    assert len(simulator.daily_reports) == days
    if speed == "fast":
        assert previous.production.hydrogen > 0


@pytest.mark.parametrize("speed", list(SPEED_PRESETS.keys()))
@pytest.mark.parametrize("feedstock", ["HDPE", "PS"])
def test_reactor_temperature_bounds(make_simulator, speed, feedstock):
    simulator = make_simulator(rng=np.random.default_rng(5), speed=speed, feedstock=feedstock)
    optimum = simulator.feedstock.optimal_temperature

    for snapshot in simulator.run(5 * ticks_per_day(speed)):
        assert 290.0 <= snapshot.thermal.reactor_temperature <= optimum
        assert 290.0 <= snapshot.thermal.hot_salt_temperature <= 565.0


def test_heliostat_field_invariant(make_simulator):
    simulator = make_simulator(rng=np.random.default_rng(9), speed="extreme")

    for snapshot in simulator.run(5000):
        field = snapshot.heliostats
        assert field.operational + field.faulty <= 2127
        assert min(field.operational, field.faulty, field.cleaning_needed, field.maintenance) >= 0
        assert field.cleaning_needed <= field.operational * 0.1


def test_reset_is_idempotent(make_simulator):
    # Arrange
    simulator = make_simulator(rng=np.random.default_rng(1))
    fresh = simulator.snapshot()
    simulator.run(100)

    # Act
    first = simulator.reset()
    second = simulator.reset()

    # Assert
    assert first == second
    assert first == fresh
    assert simulator.daily_reports == []


def test_step_uses_given_random_source(make_simulator, constant_rng):
    simulator = make_simulator()

    snapshot = simulator.step(rng=constant_rng(0.0))

    assert snapshot.heliostats.faulty == 1


def test_configure_changes_selections(make_simulator):
    simulator = make_simulator(speed="fast")

    simulator.configure(location="Atacama, Chile", speed="extreme")
    snapshot = simulator.step()

    assert simulator.location.dni_kwh_m2_day == 8.5
    assert snapshot.location == "Atacama, Chile"
    assert snapshot.multiplier == 144
    assert (snapshot.hour, snapshot.minute) == (8, 24)


def test_configure_rejects_unknown_keys_without_side_effects(make_simulator):
    simulator = make_simulator()

    with pytest.raises(ConfigurationError):
        simulator.configure(feedstock="PS", location="Atlantis")

    assert simulator.feedstock.code == "HDPE"
    assert simulator.location_key == "Riyadh, Saudi Arabia"


def test_feedstock_switch_clamps_reactor(make_simulator):
    simulator = make_simulator(feedstock="PS")
    simulator.thermal.reactor_temperature = 900.0

    simulator.configure(feedstock="HDPE")

    assert simulator.thermal.reactor_temperature == 850.0


def test_unknown_selection_fails_at_construction(make_simulator):
    with pytest.raises(ConfigurationError):
        make_simulator(location="Berlin, Germany")


def test_snapshot_is_detached(make_simulator):
    simulator = make_simulator(speed="realtime")
    snapshot = simulator.snapshot()

    simulator.run(600)

    assert snapshot.thermal.reactor_temperature == 290.0
    assert snapshot.tick_count == 0
    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot.hour = 12


def test_snapshot_as_dict(make_simulator):
    snapshot = make_simulator().step()

    data = snapshot.as_dict()

    assert data["date"] == "2026-01-15"
    assert data["thermal"]["reactor_temperature"] == snapshot.thermal.reactor_temperature
    assert set(data["tank_levels"]) == {"hydrogen", "carbon", "wax", "waste"}
    assert snapshot.time_label == "07:12"


def test_daily_report_retention(make_simulator):
    simulator = make_simulator(speed="extreme", max_daily_reports=2)

    simulator.run(30)

    assert [report.date for report in simulator.daily_reports] == [
        datetime.date(2026, 1, 16),
        datetime.date(2026, 1, 17),
    ]
