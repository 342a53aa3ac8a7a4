from dataclasses import dataclass


@dataclass(slots=True)
class WeatherState:
    """Current weather over the heliostat field."""

    cloud_cover: float = 0.0  # %
    wind_speed: float = 0.0  # m/s

    def __post_init__(self):
        self.cloud_cover = min(max(self.cloud_cover, 0.0), 100.0)
        self.wind_speed = max(self.wind_speed, 0.0)
