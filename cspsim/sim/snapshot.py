import datetime
from dataclasses import asdict, dataclass, field
from typing import Any, Dict

from cspsim.core.accumulator import DailyStats, ProductionTotals
from cspsim.core.heliostats.state import HeliostatField
from cspsim.core.reactor.products import PyrolysisProducts
from cspsim.core.solar.state import SolarPosition
from cspsim.core.storage.state import ThermalState
from cspsim.core.weather.state import WeatherState


@dataclass(frozen=True, slots=True)
class PlantSnapshot:
    """
    Read-only view of the whole plant after a tick.

    The nested state objects are copies, so a snapshot is unaffected by later
    ticks. Presentation layers should only read from snapshots.
    """

    # --- Clock ---
    tick_count: int
    date: datetime.date
    hour: int
    minute: float
    multiplier: int

    # --- Selections ---
    location: str
    feedstock: str
    speed: str

    # --- Mutable state ---
    weather: WeatherState
    heliostats: HeliostatField
    thermal: ThermalState
    production: ProductionTotals
    daily: DailyStats

    # --- Derived instantaneous values ---
    solar: SolarPosition
    thermal_power_mw: float
    last_products: PyrolysisProducts
    field_efficiency: float
    field_area_ha: float
    storage_transfer_kw: float
    stored_energy_mwh: float
    tank_levels: Dict[str, float] = field(default_factory=dict)

    @property
    def dni(self) -> float:
        return self.solar.dni

    @property
    def elevation(self) -> float:
        return self.solar.elevation

    @property
    def is_daytime(self) -> bool:
        return self.solar.is_daytime

    @property
    def time_label(self) -> str:
        return f"{self.hour:02d}:{int(self.minute):02d}"

    def as_dict(self) -> Dict[str, Any]:
        """Nested plain-data view, e.g. for JSON encoding or a DataFrame row."""
        data = asdict(self)
        data["date"] = self.date.isoformat()
        return data
