from dataclasses import dataclass


@dataclass(slots=True)
class ThermalState:
    """Temperatures of the reactor and the salt tanks."""

    reactor_temperature: float  # °C
    hot_salt_temperature: float  # °C
    cold_salt_temperature: float  # °C
    pyrolysis_active: bool = False

    @property
    def salt_temperature_difference(self) -> float:
        return self.hot_salt_temperature - self.cold_salt_temperature
