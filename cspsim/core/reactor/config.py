from dataclasses import dataclass

from cspsim.core.errors import ConfigurationError


@dataclass(frozen=True, slots=True, kw_only=True)
class PyrolysisReactorConfig:
    """Throughput and readiness parameters of the pyrolysis reactor."""

    pyrolysis_energy: float = 450.0  # energy per kg of plastic (kWh/kg)
    capacity_kg_h: float = 500.0
    readiness_margin: float = 200.0  # °C below the feedstock optimum
    min_thermal_power_mw: float = 2.0
    hydrogen_molar_mass: float = 2.016  # g/mol

    def __post_init__(self):
        if self.pyrolysis_energy <= 0:
            raise ConfigurationError("pyrolysis_energy must be positive.")
        if self.capacity_kg_h < 0:
            raise ConfigurationError("capacity_kg_h must be non-negative.")
        if self.readiness_margin < 0 or self.min_thermal_power_mw < 0:
            raise ConfigurationError("readiness_margin and min_thermal_power_mw must be non-negative.")
