import logging

from cspsim.core.shared.random_source import RandomSource
from cspsim.core.weather.config import WeatherConfig
from cspsim.core.weather.state import WeatherState

logger = logging.getLogger(__name__)


class WeatherProcess:
    """
    Stochastic cloud and wind evolution.

    Clouds build up in rare events and otherwise clear gradually. Wind is
    replaced by a fresh gust in rare events and otherwise calms down
    geometrically. The process runs every ``update_interval_ticks`` ticks, so
    its cadence follows the tick rate rather than simulated time.
    """

    def __init__(self, config: WeatherConfig):
        self.config = config

    def should_update(self, tick_count: int) -> bool:
        return tick_count % self.config.update_interval_ticks == 0

    def advance(self, state: WeatherState, rng: RandomSource) -> WeatherState:
        """Return the weather after one process step."""
        cloud_cover = state.cloud_cover
        if rng.random() < self.config.cloud_event_probability:
            cloud_cover = min(100.0, cloud_cover + rng.uniform(0.0, self.config.cloud_increase_max))
            logger.debug("Cloud event: cover %.1f%% -> %.1f%%", state.cloud_cover, cloud_cover)
        elif cloud_cover > 0:
            cloud_cover = max(0.0, cloud_cover - rng.uniform(0.0, self.config.cloud_decay_max))

        if rng.random() < self.config.wind_event_probability:
            wind_speed = rng.uniform(0.0, self.config.wind_speed_max)
            logger.debug("Wind gust: %.1f m/s", wind_speed)
        else:
            wind_speed = max(0.0, state.wind_speed * self.config.wind_decay_factor)

        return WeatherState(cloud_cover=cloud_cover, wind_speed=wind_speed)
