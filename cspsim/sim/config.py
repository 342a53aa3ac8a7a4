from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, Optional, Union
import logging
import os

import dacite
import yaml

from cspsim.core.accumulator import MAX_DAILY_REPORTS
from cspsim.core.catalog import (
    DEFAULT_FEEDSTOCK,
    DEFAULT_LOCATION,
    DEFAULT_SPEED,
    FEEDSTOCKS,
    LOCATIONS,
    SPEED_PRESETS,
)
from cspsim.core.clock import DEFAULT_START_DATE
from cspsim.core.collector.config import CollectorConfig
from cspsim.core.errors import ConfigurationError
from cspsim.core.heliostats.config import HeliostatFieldConfig
from cspsim.core.reactor.config import PyrolysisReactorConfig
from cspsim.core.solar.config import SolarGeometryConfig
from cspsim.core.storage.config import ThermalStorageConfig
from cspsim.core.weather.config import WeatherConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class PlantSimulationConfig:
    """Complete configuration of a plant simulation."""

    # --- Catalog selections ---
    location: str = DEFAULT_LOCATION
    feedstock: str = DEFAULT_FEEDSTOCK
    speed: str = DEFAULT_SPEED

    start_date: date = DEFAULT_START_DATE
    tick_period_s: float = 0.1  # wall-clock seconds between ticks
    seed: Optional[int] = None
    max_daily_reports: int = MAX_DAILY_REPORTS  # closed days kept in memory

    # --- Model parameters ---
    solar: SolarGeometryConfig = field(default_factory=SolarGeometryConfig)
    weather: WeatherConfig = field(default_factory=WeatherConfig)
    collector: CollectorConfig = field(default_factory=CollectorConfig)
    heliostats: HeliostatFieldConfig = field(default_factory=HeliostatFieldConfig)
    storage: ThermalStorageConfig = field(default_factory=ThermalStorageConfig)
    reactor: PyrolysisReactorConfig = field(default_factory=PyrolysisReactorConfig)

    def __post_init__(self):
        # Fail fast on unknown catalog keys
        LOCATIONS[self.location]
        FEEDSTOCKS[self.feedstock]
        SPEED_PRESETS[self.speed]
        if self.tick_period_s <= 0:
            raise ConfigurationError("tick_period_s must be positive.")
        if self.max_daily_reports < 1:
            raise ConfigurationError("max_daily_reports must be at least 1.")


def _parse_date(value: Union[str, date]) -> date:
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid start_date '{value}'.") from e


def config_from_dict(data: Optional[Mapping[str, Any]]) -> PlantSimulationConfig:
    """Build a configuration from plain data, rejecting unknown keys."""
    try:
        return dacite.from_dict(
            PlantSimulationConfig,
            dict(data or {}),
            config=dacite.Config(strict=True, type_hooks={date: _parse_date}),
        )
    except dacite.DaciteError as e:
        raise ConfigurationError(f"Invalid plant configuration: {e}") from e


def load_config(path: Union[str, os.PathLike]) -> PlantSimulationConfig:
    """Load a plant configuration from a YAML file."""
    try:
        with open(path, "r", encoding="utf-8") as file:
            data = yaml.safe_load(file)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Could not parse {path}: {e}") from e

    if data is not None and not isinstance(data, Mapping):
        raise ConfigurationError(f"{path} must contain a mapping at the top level.")

    config = config_from_dict(data)
    logger.info(
        "Loaded plant configuration from %s (location=%s, feedstock=%s, speed=%s)",
        path,
        config.location,
        config.feedstock,
        config.speed,
    )
    return config
