from dataclasses import dataclass

from cspsim.core.catalog.base import Catalog


@dataclass(frozen=True, slots=True)
class Location:
    """A plant site with its annual average direct normal irradiance."""

    name: str
    dni_kwh_m2_day: float  # kWh/m²/day, annual average
    latitude: float  # degrees, north positive
    longitude: float  # degrees, east positive
    utc_offset: float  # hours


LOCATIONS: Catalog[Location] = Catalog(
    "location",
    {
        location.name: location
        for location in (
            Location("Riyadh, Saudi Arabia", 6.8, 24.7, 46.7, 3),
            Location("Phoenix, USA", 7.2, 33.4, -112.1, -7),
            Location("Seville, Spain", 5.9, 37.4, -5.9, 1),
            Location("Dubai, UAE", 6.5, 25.3, 55.3, 4),
            Location("Las Vegas, USA", 7.5, 36.2, -115.1, -8),
            Location("Alice Springs, Australia", 7.3, -23.7, 133.9, 9.5),
            Location("Almeria, Spain", 6.4, 36.8, -2.4, 1),
            Location("Cairo, Egypt", 6.2, 30.0, 31.2, 2),
            Location("Atacama, Chile", 8.5, -23.6, -70.4, -4),
            Location("Ouarzazate, Morocco", 6.7, 30.9, -6.9, 0),
            Location("Tucson, USA", 7.0, 32.2, -110.9, -7),
            Location("Jodhpur, India", 6.3, 26.3, 73.0, 5.5),
        )
    },
)

DEFAULT_LOCATION = "Riyadh, Saudi Arabia"


def get_location(key: str) -> Location:
    return LOCATIONS[key]
