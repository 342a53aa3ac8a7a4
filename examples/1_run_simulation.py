import logging

from cspsim.sim.config import load_config
from cspsim.sim.factory import SimulatorFactory
from cspsim.sim.recorder import SimulationRecorder

logging.basicConfig(level=logging.INFO)

# Load plant configuration from YAML file
config = load_config("config/plant_config.yaml")
print("Plant configuration loaded successfully.")

simulator = SimulatorFactory.create_simulator(config)
print(f"Plant simulator created: {simulator}")

recorder = SimulationRecorder()
recorder.record(simulator.reset())

# Two simulated days at the configured speed
ticks_per_day = 24 * 60 // simulator.clock.multiplier
recorder.extend(simulator.run(2 * ticks_per_day))

snapshot = simulator.snapshot()
print(f"Time: {snapshot.date} {snapshot.time_label}")
print(f"Reactor temperature: {snapshot.thermal.reactor_temperature:.0f} °C")
print(f"Hydrogen produced: {snapshot.production.hydrogen:.2f} kg")
print(f"Plastic processed: {snapshot.production.plastic_processed:.1f} kg")

df = recorder.to_dataframe()
print(df[["hour", "solar.dni", "thermal_power_mw", "thermal.reactor_temperature"]].describe())
print(SimulationRecorder.reports_to_dataframe(simulator.daily_reports))
