from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SolarPosition:
    """Sun position and irradiance at one instant."""

    elevation: float  # degrees above horizon
    dni: float  # W/m²
    is_daytime: bool
    sunrise: float  # decimal hour
    sunset: float  # decimal hour

    @property
    def day_length(self) -> float:
        return self.sunset - self.sunrise
