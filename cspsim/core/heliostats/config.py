from dataclasses import dataclass

from cspsim.core.errors import ConfigurationError


@dataclass(frozen=True, slots=True, kw_only=True)
class HeliostatFieldConfig:
    """Installed field and its degradation rates."""

    installed_count: int = 2127
    fault_probability: float = 0.0001  # per tick and per unit of time multiplier
    soiling_probability: float = 0.001  # per tick and per unit of time multiplier
    cleaning_cap_fraction: float = 0.1  # of operational heliostats

    def __post_init__(self):
        if self.installed_count < 0:
            raise ConfigurationError("installed_count must be non-negative.")
        for name in ("fault_probability", "soiling_probability", "cleaning_cap_fraction"):
            if not (0 <= getattr(self, name) <= 1):
                raise ConfigurationError(f"{name} must be between 0 and 1.")
