import logging
import math

from cspsim.core.heliostats.config import HeliostatFieldConfig
from cspsim.core.heliostats.state import HeliostatField
from cspsim.core.shared.random_source import RandomSource

logger = logging.getLogger(__name__)


class EquipmentHealthProcess:
    """
    One-way degradation of the heliostat field.

    Mirrors fail or get dirty at rates proportional to the time multiplier.
    Repairs and cleaning crews are not modelled, so counts only move towards
    the degraded states.
    """

    def __init__(self, config: HeliostatFieldConfig):
        self.config = config

    def cleaning_cap(self, operational: int) -> int:
        return math.floor(operational * self.config.cleaning_cap_fraction)

    def advance(self, field: HeliostatField, multiplier: float, rng: RandomSource) -> HeliostatField:
        """Return the field after one tick of random degradation."""
        operational = field.operational
        faulty = field.faulty
        cleaning_needed = field.cleaning_needed

        if rng.random() < min(1.0, self.config.fault_probability * multiplier) and operational > 0:
            operational -= 1
            faulty += 1
            logger.debug("Heliostat fault: %d operational, %d faulty", operational, faulty)

        cap = self.cleaning_cap(operational)
        if rng.random() < min(1.0, self.config.soiling_probability * multiplier):
            cleaning_needed += 1
        cleaning_needed = min(cleaning_needed, cap)

        return HeliostatField(
            operational=operational,
            maintenance=field.maintenance,
            cleaning_needed=cleaning_needed,
            faulty=faulty,
        )
