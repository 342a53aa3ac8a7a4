"""Tests for the run recorder."""
import pandas as pd

from cspsim.sim.recorder import SimulationRecorder


def test_to_dataframe(make_simulator):
    # Arrange
    simulator = make_simulator(speed="fast")
    recorder = SimulationRecorder()

    # Act
    recorder.extend(simulator.run(10))
    df = recorder.to_dataframe()

    # Assert
    assert len(recorder) == 10
    assert list(df.index) == list(range(1, 11))
    assert {"thermal.reactor_temperature", "solar.dni", "tank_levels.hydrogen", "daily.heat_loss"} <= set(df.columns)
    assert df["thermal_power_mw"].iloc[-1] == simulator.thermal_power_mw


def test_recorder_as_callback(make_simulator):
    simulator = make_simulator()
    recorder = SimulationRecorder()

    recorder(simulator.step())
    recorder(simulator.step())

    assert len(recorder) == 2
    recorder.clear()
    assert recorder.to_dataframe().empty


def test_daily_reports_to_dataframe(make_simulator):
    simulator = make_simulator(speed="extreme")
    simulator.run(30)

    df = SimulationRecorder.reports_to_dataframe(simulator.daily_reports)

    assert len(df) == 3
    assert df.index[0] == pd.Timestamp("2026-01-15")
    assert (df["heat_loss"] > 0).all()


def test_no_reports():
    assert SimulationRecorder.reports_to_dataframe([]).empty
