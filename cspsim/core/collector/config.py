from dataclasses import dataclass

from cspsim.core.errors import ConfigurationError


@dataclass(frozen=True, slots=True, kw_only=True)
class CollectorConfig:
    """Optical chain from heliostat mirrors to the central receiver."""

    heliostat_area_m2: float = 115.0
    optical_efficiency: float = 0.68
    receiver_efficiency: float = 0.88
    wind_threshold_m_s: float = 10.0
    wind_derating: float = 0.95  # efficiency factor above the wind threshold

    def __post_init__(self):
        if self.heliostat_area_m2 <= 0:
            raise ConfigurationError("heliostat_area_m2 must be positive.")
        for name in ("optical_efficiency", "receiver_efficiency", "wind_derating"):
            if not (0 < getattr(self, name) <= 1):
                raise ConfigurationError(f"{name} must be between 0 and 1.")
