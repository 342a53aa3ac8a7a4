import logging
import time

from cspsim.sim.config import PlantSimulationConfig
from cspsim.sim.factory import SimulatorFactory

logging.basicConfig(level=logging.INFO)

config = PlantSimulationConfig(location="Atacama, Chile", feedstock="PS", speed="extreme")
runner = SimulatorFactory.create_runner(config)


def print_status(snapshot):
    if snapshot.tick_count % 10 == 0:
        print(
            f"{snapshot.date} {snapshot.time_label} | "
            f"DNI {snapshot.dni:6.0f} W/m² | "
            f"P {snapshot.thermal_power_mw:6.1f} MW | "
            f"reactor {snapshot.thermal.reactor_temperature:5.0f} °C | "
            f"H2 {snapshot.production.hydrogen:7.2f} kg"
        )


runner.add_callback(print_status)
runner.start()
time.sleep(5)

# Switch feedstock while running
runner.configure(feedstock="LDPE")
time.sleep(5)
runner.stop()
