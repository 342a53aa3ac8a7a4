import datetime
import logging
from dataclasses import replace
from typing import List, Optional

from cspsim.core.accumulator import MAX_DAILY_REPORTS, Accumulator
from cspsim.core.catalog import FEEDSTOCKS, LOCATIONS, SPEED_PRESETS, Feedstock, Location, SpeedPreset
from cspsim.core.clock import DEFAULT_START_DATE, SimulationClock
from cspsim.core.collector.model import ThermalPowerModel
from cspsim.core.heliostats.config import HeliostatFieldConfig
from cspsim.core.heliostats.process import EquipmentHealthProcess
from cspsim.core.heliostats.state import HeliostatField
from cspsim.core.reactor.model import PyrolysisReactor
from cspsim.core.reactor.products import PyrolysisProducts
from cspsim.core.shared.random_source import RandomSource, make_random_source
from cspsim.core.solar.model import SolarGeometryModel
from cspsim.core.solar.state import SolarPosition
from cspsim.core.storage.model import ThermalStorageModel
from cspsim.core.storage.state import ThermalState
from cspsim.core.weather.process import WeatherProcess
from cspsim.core.weather.state import WeatherState
from cspsim.sim.snapshot import PlantSnapshot

logger = logging.getLogger(__name__)


class PlantSimulator:
    """
    Single-writer simulator of the CSP pyrolysis plant.

    Each call to ``step`` runs one tick through a fixed pipeline:

    1.  Clock: advance ``multiplier`` simulated minutes.
    2.  Weather: random cloud/wind update on every Nth tick.
    3.  Solar: sun elevation and DNI for the new time.
    4.  Collector: thermal power from DNI and the operational mirrors.
    5.  Storage: reactor and hot salt temperatures.
    6.  Reactor: readiness from this tick's temperature, then pyrolysis.
    7.  Accumulation: energy, heat loss and products.
    8.  Equipment health: random heliostat faults and soiling.
    9.  Day closing: archive and reset the daily stats after midnight.

    All randomness comes from the injected ``RandomSource``.
    """

    def __init__(
        self,
        location: str,
        feedstock: str,
        speed: str,
        solar_model: SolarGeometryModel,
        weather_process: WeatherProcess,
        power_model: ThermalPowerModel,
        storage_model: ThermalStorageModel,
        reactor: PyrolysisReactor,
        health_process: EquipmentHealthProcess,
        heliostat_config: HeliostatFieldConfig,
        rng: Optional[RandomSource] = None,
        start_date: datetime.date = DEFAULT_START_DATE,
        max_daily_reports: int = MAX_DAILY_REPORTS,
    ):
        # Selections are validated before anything else is built
        self._location: Location = LOCATIONS[location]
        self._feedstock: Feedstock = FEEDSTOCKS[feedstock]
        self._speed: SpeedPreset = SPEED_PRESETS[speed]
        self.location_key = location
        self.feedstock_key = feedstock
        self.speed_key = speed

        # Static elements of the simulation
        self.solar_model = solar_model
        self.weather_process = weather_process
        self.power_model = power_model
        self.storage_model = storage_model
        self.reactor = reactor
        self.health_process = health_process
        self.heliostat_config = heliostat_config
        self.start_date = start_date
        self.max_daily_reports = max_daily_reports
        self.rng: RandomSource = rng if rng is not None else make_random_source()

        # Internal state, managed by step() and reset()
        self.clock: SimulationClock
        self.weather: WeatherState
        self.heliostats: HeliostatField
        self.thermal: ThermalState
        self.accumulator: Accumulator
        self._solar: SolarPosition
        self._thermal_power_mw: float = 0.0
        self._last_products = PyrolysisProducts()
        self.reset()

    # ------------------------------------------------------------------
    # Selections
    # ------------------------------------------------------------------
    @property
    def location(self) -> Location:
        return self._location

    @property
    def feedstock(self) -> Feedstock:
        return self._feedstock

    @property
    def speed(self) -> SpeedPreset:
        return self._speed

    def configure(
        self,
        location: Optional[str] = None,
        feedstock: Optional[str] = None,
        speed: Optional[str] = None,
    ) -> None:
        """
        Change catalog selections between ticks.

        All keys are validated before any of them is applied, so an invalid
        key leaves the simulator unchanged.
        """
        new_location = LOCATIONS[location] if location is not None else self._location
        new_feedstock = FEEDSTOCKS[feedstock] if feedstock is not None else self._feedstock
        new_speed = SPEED_PRESETS[speed] if speed is not None else self._speed

        if location is not None:
            self._location, self.location_key = new_location, location
        if speed is not None:
            self._speed, self.speed_key = new_speed, speed
            self.clock.multiplier = new_speed.multiplier
        if feedstock is not None:
            self._feedstock, self.feedstock_key = new_feedstock, feedstock
            # The reactor never runs above the optimum of the current feedstock
            if self.thermal.reactor_temperature > new_feedstock.optimal_temperature:
                self.thermal.reactor_temperature = max(
                    new_feedstock.optimal_temperature, self.storage_model.config.cold_salt_floor
                )

        logger.info(
            "Selected location=%s, feedstock=%s, speed=%s (%dx)",
            self.location_key,
            self.feedstock_key,
            self.speed_key,
            self._speed.multiplier,
        )
        self._observe()

    # ------------------------------------------------------------------
    # Controls
    # ------------------------------------------------------------------
    def reset(self) -> PlantSnapshot:
        """Reinitialize all mutable state to its documented defaults."""
        self.clock = SimulationClock(multiplier=self._speed.multiplier, date=self.start_date)
        self.weather = WeatherState()
        self.heliostats = HeliostatField.fully_operational(self.heliostat_config.installed_count)
        self.thermal = self.storage_model.initialize()
        self.accumulator = Accumulator(max_reports=self.max_daily_reports)
        self._last_products = PyrolysisProducts()
        self._observe()
        logger.info("Simulation reset to %s %02d:00", self.clock.date.isoformat(), self.clock.hour)
        return self.snapshot()

    def step(self, rng: Optional[RandomSource] = None) -> PlantSnapshot:
        """
        Advance the plant by one tick.

        Args:
            rng: Random source for this tick, defaults to the simulator's own

        Returns:
            PlantSnapshot at the end of the tick
        """
        rng = rng if rng is not None else self.rng
        multiplier = self.clock.multiplier

        # --- 1. Clock ---
        weather_due = self.weather_process.should_update(self.clock.tick_count)
        closing_day = self.clock.date
        rolled_over = self.clock.advance()

        # --- 2. Weather ---
        if weather_due:
            self.weather = self.weather_process.advance(self.weather, rng)

        # --- 3. Solar geometry & 4. thermal power ---
        self._observe()
        thermal_power_mw = self._thermal_power_mw

        # --- 5. Storage and reactor temperatures ---
        self.thermal = self.storage_model.advance(
            self.thermal,
            thermal_power_mw=thermal_power_mw,
            is_daytime=self._solar.is_daytime,
            multiplier=multiplier,
            optimal_temperature=self._feedstock.optimal_temperature,
        )

        # --- 6. Pyrolysis (readiness uses this tick's temperature) ---
        self.thermal.pyrolysis_active = self.reactor.is_ready(self.thermal.reactor_temperature, self._feedstock)
        products = self.reactor.advance(
            self.thermal.reactor_temperature,
            thermal_power_mw,
            self.clock.dt_seconds,
            self._feedstock,
        )
        self._last_products = products

        # --- 7. Accumulation ---
        self.accumulator.record_energy(
            thermal_power_mw,
            self.storage_model.heat_loss_mwh(self.thermal, multiplier),
            multiplier,
        )
        self.accumulator.record_products(products)

        # --- 8. Equipment health ---
        self.heliostats = self.health_process.advance(self.heliostats, multiplier, rng)

        # --- 9. Day closing ---
        if rolled_over:
            self.accumulator.close_day(closing_day)

        return self.snapshot()

    def run(self, n_ticks: int, rng: Optional[RandomSource] = None) -> List[PlantSnapshot]:
        """Run ``n_ticks`` ticks back to back and return every snapshot."""
        if n_ticks < 0:
            raise ValueError("n_ticks must be non-negative.")
        return [self.step(rng) for _ in range(n_ticks)]

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------
    def _observe(self) -> None:
        """Recompute sun position and thermal power for the current clock and weather."""
        self._solar = self.solar_model.compute(
            self.clock.hour,
            self.clock.minute,
            self.clock.day_of_year,
            self._location,
            self.weather.cloud_cover,
        )
        self._thermal_power_mw = self.power_model.thermal_power_mw(
            self._solar.dni, self.heliostats.operational, self.weather.wind_speed
        )

    @property
    def thermal_power_mw(self) -> float:
        return self._thermal_power_mw

    @property
    def solar(self) -> SolarPosition:
        return self._solar

    def snapshot(self) -> PlantSnapshot:
        installed = self.heliostat_config.installed_count
        return PlantSnapshot(
            tick_count=self.clock.tick_count,
            date=self.clock.date,
            hour=self.clock.hour,
            minute=self.clock.minute,
            multiplier=self.clock.multiplier,
            location=self.location_key,
            feedstock=self.feedstock_key,
            speed=self.speed_key,
            weather=replace(self.weather),
            heliostats=replace(self.heliostats),
            thermal=replace(self.thermal),
            production=replace(self.accumulator.totals),
            daily=replace(self.accumulator.daily),
            solar=self._solar,
            thermal_power_mw=self._thermal_power_mw,
            last_products=self._last_products,
            field_efficiency=self.heliostats.field_efficiency(installed),
            field_area_ha=installed * self.power_model.config.heliostat_area_m2 / 10000,
            storage_transfer_kw=self.storage_model.transfer_power_kw(self.thermal),
            stored_energy_mwh=self.storage_model.stored_energy_mwh(self.thermal),
            tank_levels=self.accumulator.totals.tank_levels(),
        )

    @property
    def daily_reports(self):
        return list(self.accumulator.reports)

    def __repr__(self) -> str:
        return (
            f"<PlantSimulator("
            f"location={self.location_key!r}, "
            f"feedstock={self.feedstock_key!r}, "
            f"speed={self.speed_key!r}, "
            f"tick={self.clock.tick_count}, "
            f"time={self.clock.date.isoformat()} {self.clock.hour:02d}:{int(self.clock.minute):02d})>"
        )
