import math

from cspsim.core.catalog.locations import Location
from cspsim.core.solar.config import SolarGeometryConfig
from cspsim.core.solar.state import SolarPosition


class SolarGeometryModel:
    """
    Half-sine sun path with seasonal and latitude corrections.

    The day is bounded by a sunrise and sunset that shift with the season,
    more strongly at high latitudes. Between them, elevation and DNI follow
    ``sin(pi * x)`` where ``x`` is the fraction of daylight elapsed.
    """

    def __init__(self, config: SolarGeometryConfig):
        self.config = config

    def seasonal_phase(self, day_of_year: int) -> float:
        """Sine of the annual phase, 0 at the spring equinox and +1 in mid-summer (north)."""
        return math.sin((day_of_year - self.config.reference_day) / 365 * 2 * math.pi)

    def daylight_window(self, day_of_year: int, location: Location) -> tuple[float, float]:
        """Return (sunrise, sunset) as decimal hours."""
        latitude_factor = abs(location.latitude) / 90
        shift = self.seasonal_phase(day_of_year) * self.config.seasonal_shift_hours * latitude_factor
        return self.config.base_sunrise_hour - shift, self.config.base_sunset_hour + shift

    def compute(
        self,
        hour: int,
        minute: float,
        day_of_year: int,
        location: Location,
        cloud_cover: float,
    ) -> SolarPosition:
        """
        Compute sun elevation and direct normal irradiance.

        Args:
            hour: Hour of day [0, 24)
            minute: Minute of hour [0, 60)
            day_of_year: 1-based day of the year
            location: Plant site
            cloud_cover: Cloud cover in percent [0, 100]

        Returns:
            SolarPosition, all zeros outside daylight
        """
        decimal_hour = hour + minute / 60
        sunrise, sunset = self.daylight_window(day_of_year, location)

        if decimal_hour < sunrise or decimal_hour > sunset:
            return SolarPosition(elevation=0.0, dni=0.0, is_daytime=False, sunrise=sunrise, sunset=sunset)

        progress = (decimal_hour - sunrise) / (sunset - sunrise)
        profile = math.sin(progress * math.pi)

        # Lower latitudes see a higher sun
        latitude_correction = 1 - abs(location.latitude) / 90 * self.config.latitude_elevation_reduction
        elevation = profile * self.config.max_elevation * latitude_correction

        base_dni = location.dni_kwh_m2_day * 1000 / self.config.sun_hours_per_day
        seasonal_factor = 1 + self.seasonal_phase(day_of_year) * self.config.seasonal_amplitude
        cloud = min(max(cloud_cover, 0.0), 100.0)
        cloud_factor = 1 - cloud / 100 * self.config.cloud_attenuation
        dni = base_dni * profile * seasonal_factor * cloud_factor * self.config.dni_scale

        return SolarPosition(
            elevation=elevation,
            dni=max(0.0, dni),
            is_daytime=True,
            sunrise=sunrise,
            sunset=sunset,
        )
