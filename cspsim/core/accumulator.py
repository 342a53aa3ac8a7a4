import logging
from collections import deque
from dataclasses import dataclass, field, replace
import datetime
from typing import Deque, Dict

from cspsim.core.errors import ConfigurationError
from cspsim.core.reactor.products import PyrolysisProducts

logger = logging.getLogger(__name__)

# Capacities of the product collection tanks (kg)
TANK_CAPACITIES_KG: Dict[str, float] = {
    "hydrogen": 100.0,
    "carbon": 500.0,
    "wax": 200.0,
    "waste": 100.0,
}

# Closed days kept in memory; older reports are dropped first
MAX_DAILY_REPORTS = 366


@dataclass(slots=True)
class ProductionTotals:
    """Lifetime production since the last reset (kg)."""

    hydrogen: float = 0.0
    carbon: float = 0.0
    wax: float = 0.0
    waste: float = 0.0
    plastic_processed: float = 0.0

    def add(self, products: PyrolysisProducts) -> None:
        self.hydrogen += products.hydrogen
        self.carbon += products.carbon
        self.wax += products.wax
        self.waste += products.waste
        self.plastic_processed += products.plastic

    def tank_levels(self, capacities: Dict[str, float] = TANK_CAPACITIES_KG) -> Dict[str, float]:
        """Fill level of each product tank in percent, capped at 100."""
        return {
            name: min(getattr(self, name) / capacity * 100, 100.0) if capacity > 0 else 0.0
            for name, capacity in capacities.items()
        }


@dataclass(slots=True)
class DailyStats:
    """Running totals for the current simulated day."""

    energy_collected: float = 0.0  # MWh
    plastic_processed: float = 0.0  # kg
    hydrogen_produced: float = 0.0  # kg
    carbon_produced: float = 0.0  # kg
    heat_loss: float = 0.0  # MWh


@dataclass(frozen=True, slots=True)
class DailyReport:
    """Statistics of a closed simulated day."""

    date: datetime.date
    stats: DailyStats


@dataclass
class Accumulator:
    """Owns lifetime totals, the current day's stats and the closed-day reports."""

    totals: ProductionTotals = field(default_factory=ProductionTotals)
    daily: DailyStats = field(default_factory=DailyStats)
    max_reports: int = MAX_DAILY_REPORTS
    reports: Deque[DailyReport] = field(init=False)

    def __post_init__(self):
        if self.max_reports < 1:
            raise ConfigurationError("max_reports must be at least 1.")
        self.reports = deque(maxlen=self.max_reports)

    def record_energy(self, thermal_power_mw: float, heat_loss_mwh: float, multiplier: float) -> None:
        """Book the energy collected and the heat lost during one tick."""
        self.daily.energy_collected += max(thermal_power_mw, 0.0) * multiplier / 60
        self.daily.heat_loss += max(heat_loss_mwh, 0.0)

    def record_products(self, products: PyrolysisProducts) -> None:
        if products.is_empty:
            return
        self.totals.add(products)
        self.daily.plastic_processed += products.plastic
        self.daily.hydrogen_produced += products.hydrogen
        self.daily.carbon_produced += products.carbon

    def close_day(self, day: datetime.date) -> DailyReport:
        """Archive the current day's stats and start a new day from zero."""
        report = DailyReport(date=day, stats=replace(self.daily))
        self.reports.append(report)
        self.daily = DailyStats()
        logger.info(
            "Closed %s: %.2f MWh collected, %.1f kg plastic, %.2f kg H2",
            day.isoformat(),
            report.stats.energy_collected,
            report.stats.plastic_processed,
            report.stats.hydrogen_produced,
        )
        return report

    def reset(self) -> None:
        self.totals = ProductionTotals()
        self.daily = DailyStats()
        self.reports.clear()
