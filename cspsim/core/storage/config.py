from dataclasses import dataclass

from cspsim.core.errors import ConfigurationError


@dataclass(frozen=True, slots=True, kw_only=True)
class ThermalStorageConfig:
    """Two-tank molten salt storage and reactor heating parameters."""

    # --- Solar salt ---
    hot_salt_ceiling: float = 565.0  # °C
    cold_salt_floor: float = 290.0  # °C, crystallization limit
    salt_heat_capacity: float = 1.55  # kJ/kg·K
    salt_density: float = 1800.0  # kg/m³
    tank_volume_m3: float = 12000.0
    heat_loss_per_hour: float = 0.02  # passive loss coefficient
    ambient_temperature: float = 20.0  # °C

    # --- Initial state ---
    initial_reactor_temperature: float = 290.0  # °C
    initial_hot_salt_temperature: float = 420.0  # °C

    # --- Reactor heating ---
    reactor_power_threshold_mw: float = 5.0
    reactor_heating_rate: float = 0.2  # °C per simulated minute
    reactor_heating_per_mw: float = 0.1  # °C per MW, caps heating per tick
    reactor_cooling_rate: float = 0.05  # °C per simulated minute

    # --- Hot tank charging ---
    salt_power_threshold_mw: float = 3.0
    salt_heating_rate: float = 0.08  # °C per simulated minute

    def __post_init__(self):
        if self.hot_salt_ceiling <= self.cold_salt_floor:
            raise ConfigurationError("hot_salt_ceiling must be above cold_salt_floor.")
        if not (self.cold_salt_floor <= self.initial_hot_salt_temperature <= self.hot_salt_ceiling):
            raise ConfigurationError("initial_hot_salt_temperature must lie between the salt limits.")
        if self.initial_reactor_temperature < self.cold_salt_floor:
            raise ConfigurationError("initial_reactor_temperature must not be below cold_salt_floor.")
        if self.salt_heat_capacity <= 0 or self.salt_density <= 0 or self.tank_volume_m3 < 0:
            raise ConfigurationError("Salt properties must be positive.")
        rates = (
            self.heat_loss_per_hour,
            self.reactor_heating_rate,
            self.reactor_heating_per_mw,
            self.reactor_cooling_rate,
            self.salt_heating_rate,
        )
        if any(rate < 0 for rate in rates):
            raise ConfigurationError("Heating and cooling rates must be non-negative.")
