from typing import Optional

from cspsim.core.collector.model import ThermalPowerModel
from cspsim.core.heliostats.process import EquipmentHealthProcess
from cspsim.core.reactor.model import PyrolysisReactor
from cspsim.core.shared.random_source import RandomSource, make_random_source
from cspsim.core.solar.model import SolarGeometryModel
from cspsim.core.storage.model import ThermalStorageModel
from cspsim.core.weather.process import WeatherProcess
from cspsim.sim.config import PlantSimulationConfig
from cspsim.sim.plant_sim import PlantSimulator
from cspsim.sim.runner import SimulationRunner


class SimulatorFactory:
    @staticmethod
    def create_simulator(
        config: PlantSimulationConfig, rng: Optional[RandomSource] = None
    ) -> PlantSimulator:
        """Create a simulator with all models built from the configuration."""
        return PlantSimulator(
            location=config.location,
            feedstock=config.feedstock,
            speed=config.speed,
            solar_model=SolarGeometryModel(config.solar),
            weather_process=WeatherProcess(config.weather),
            power_model=ThermalPowerModel(config.collector),
            storage_model=ThermalStorageModel(config.storage),
            reactor=PyrolysisReactor(config.reactor),
            health_process=EquipmentHealthProcess(config.heliostats),
            heliostat_config=config.heliostats,
            rng=rng if rng is not None else make_random_source(config.seed),
            start_date=config.start_date,
            max_daily_reports=config.max_daily_reports,
        )

    @staticmethod
    def create_runner(
        config: PlantSimulationConfig, rng: Optional[RandomSource] = None
    ) -> SimulationRunner:
        """Create a real-time runner around a freshly built simulator."""
        simulator = SimulatorFactory.create_simulator(config, rng)
        return SimulationRunner(simulator, period_s=config.tick_period_s)
