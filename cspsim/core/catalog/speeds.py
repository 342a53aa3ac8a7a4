from dataclasses import dataclass

from cspsim.core.catalog.base import Catalog


@dataclass(frozen=True, slots=True)
class SpeedPreset:
    """Time acceleration: simulated minutes advanced per tick."""

    label: str
    multiplier: int


SPEED_PRESETS: Catalog[SpeedPreset] = Catalog(
    "speed preset",
    {
        "realtime": SpeedPreset("Real-time (1 day = 24 hours)", 1),
        "fast": SpeedPreset("Fast (1 day = 2 hours)", 12),
        "very_fast": SpeedPreset("Very Fast (1 day = 30 min)", 48),
        "ultra_fast": SpeedPreset("Ultra Fast (1 day = 20 min)", 72),
        "extreme": SpeedPreset("Extreme (1 day = 10 min)", 144),
    },
)

DEFAULT_SPEED = "ultra_fast"


def get_speed(key: str) -> SpeedPreset:
    return SPEED_PRESETS[key]
