from cspsim.core.errors import ConfigurationError
from cspsim.sim.config import PlantSimulationConfig, load_config
from cspsim.sim.factory import SimulatorFactory
from cspsim.sim.plant_sim import PlantSimulator
from cspsim.sim.recorder import SimulationRecorder
from cspsim.sim.runner import SimulationRunner
from cspsim.sim.snapshot import PlantSnapshot

__all__ = [
    "ConfigurationError",
    "PlantSimulationConfig",
    "PlantSimulator",
    "PlantSnapshot",
    "SimulationRecorder",
    "SimulationRunner",
    "SimulatorFactory",
    "load_config",
]
