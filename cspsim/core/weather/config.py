from dataclasses import dataclass

from cspsim.core.errors import ConfigurationError


@dataclass(frozen=True, slots=True, kw_only=True)
class WeatherConfig:
    """Random cloud and wind events."""

    update_interval_ticks: int = 6
    cloud_event_probability: float = 0.05
    cloud_increase_max: float = 30.0  # percent
    cloud_decay_max: float = 15.0  # percent per update
    wind_event_probability: float = 0.1
    wind_speed_max: float = 15.0  # m/s
    wind_decay_factor: float = 0.9

    def __post_init__(self):
        if self.update_interval_ticks < 1:
            raise ConfigurationError("update_interval_ticks must be at least 1.")
        for name in ("cloud_event_probability", "wind_event_probability", "wind_decay_factor"):
            if not (0 <= getattr(self, name) <= 1):
                raise ConfigurationError(f"{name} must be between 0 and 1.")
        if self.cloud_increase_max < 0 or self.cloud_decay_max < 0 or self.wind_speed_max < 0:
            raise ConfigurationError("Weather ranges must be non-negative.")
