from dataclasses import dataclass
import datetime

from cspsim.core.errors import ConfigurationError

DEFAULT_START_DATE = datetime.date(2026, 1, 15)
DEFAULT_START_HOUR = 6


@dataclass(slots=True)
class SimulationClock:
    """
    Simulated wall clock.

    Each tick advances ``multiplier`` simulated minutes. Minutes carry into
    hours and hours carry into the date, which is the day rollover.
    """

    multiplier: int
    date: datetime.date = DEFAULT_START_DATE
    hour: int = DEFAULT_START_HOUR
    minute: float = 0.0
    tick_count: int = 0

    def __post_init__(self):
        if self.multiplier <= 0:
            raise ConfigurationError("Time multiplier must be positive.")
        self._normalize()

    @property
    def day_of_year(self) -> int:
        return self.date.timetuple().tm_yday

    @property
    def decimal_hour(self) -> float:
        return self.hour + self.minute / 60

    @property
    def dt_seconds(self) -> float:
        """Simulated seconds covered by one tick."""
        return 60.0 * self.multiplier

    def advance(self) -> bool:
        """
        Advance by one tick.

        Returns:
            True if the tick crossed midnight into a new date
        """
        self.tick_count += 1
        self.minute += self.multiplier
        return self._normalize() > 0

    def _normalize(self) -> int:
        carry_hours, self.minute = divmod(self.minute, 60)
        self.hour += int(carry_hours)
        days, self.hour = divmod(self.hour, 24)
        if days:
            self.date = self.date + datetime.timedelta(days=days)
        return days
