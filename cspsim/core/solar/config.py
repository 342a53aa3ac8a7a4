from dataclasses import dataclass

from cspsim.core.errors import ConfigurationError


@dataclass(frozen=True, slots=True, kw_only=True)
class SolarGeometryConfig:
    """Parameters of the simplified sun-path and irradiance model."""

    base_sunrise_hour: float = 6.0
    base_sunset_hour: float = 18.0
    seasonal_shift_hours: float = 1.5  # max sunrise/sunset shift at the poles
    reference_day: int = 81  # spring equinox, day of year
    max_elevation: float = 70.0  # degrees, at the equator
    latitude_elevation_reduction: float = 0.3  # fraction lost at the poles
    sun_hours_per_day: float = 8.0  # converts kWh/m²/day into an average W/m²
    seasonal_amplitude: float = 0.3
    cloud_attenuation: float = 0.7  # DNI fraction lost at 100% cloud cover
    dni_scale: float = 1.4  # empirical peak factor

    def __post_init__(self):
        if self.base_sunset_hour <= self.base_sunrise_hour:
            raise ConfigurationError("Sunset must be later than sunrise.")
        if not (0 <= self.latitude_elevation_reduction < 1):
            raise ConfigurationError("latitude_elevation_reduction must be in [0, 1).")
        if not (0 <= self.cloud_attenuation <= 1):
            raise ConfigurationError("cloud_attenuation must be between 0 and 1.")
        if not (0 <= self.seasonal_amplitude < 1):
            raise ConfigurationError("seasonal_amplitude must be in [0, 1).")
        if self.sun_hours_per_day <= 0 or self.dni_scale <= 0:
            raise ConfigurationError("sun_hours_per_day and dni_scale must be positive.")
