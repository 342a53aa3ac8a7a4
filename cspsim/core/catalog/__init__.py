from cspsim.core.catalog.base import Catalog
from cspsim.core.catalog.feedstocks import (
    DEFAULT_FEEDSTOCK,
    FEEDSTOCKS,
    Feedstock,
    get_feedstock,
)
from cspsim.core.catalog.locations import (
    DEFAULT_LOCATION,
    LOCATIONS,
    Location,
    get_location,
)
from cspsim.core.catalog.speeds import (
    DEFAULT_SPEED,
    SPEED_PRESETS,
    SpeedPreset,
    get_speed,
)

__all__ = [
    "Catalog",
    "DEFAULT_FEEDSTOCK",
    "DEFAULT_LOCATION",
    "DEFAULT_SPEED",
    "FEEDSTOCKS",
    "LOCATIONS",
    "SPEED_PRESETS",
    "Feedstock",
    "Location",
    "SpeedPreset",
    "get_feedstock",
    "get_location",
    "get_speed",
]
