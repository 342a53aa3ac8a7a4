from cspsim.core.collector.config import CollectorConfig


class ThermalPowerModel:
    """Converts irradiance on the operational mirrors into receiver power."""

    def __init__(self, config: CollectorConfig):
        self.config = config

    def wind_factor(self, wind_speed: float) -> float:
        return self.config.wind_derating if wind_speed > self.config.wind_threshold_m_s else 1.0

    def thermal_power_mw(self, dni: float, operational_heliostats: int, wind_speed: float) -> float:
        """
        Thermal power delivered to the receiver.

        Uses P = N × A × DNI × η_opt × f_wind × η_rec, converted to MW.
        """
        if dni <= 0 or operational_heliostats <= 0:
            return 0.0
        mirror_area = operational_heliostats * self.config.heliostat_area_m2
        optical_power_w = mirror_area * dni * self.config.optical_efficiency * self.wind_factor(wind_speed)
        return optical_power_w * self.config.receiver_efficiency / 1e6
