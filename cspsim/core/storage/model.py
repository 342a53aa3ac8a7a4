from cspsim.core.storage.config import ThermalStorageConfig
from cspsim.core.storage.state import ThermalState


class ThermalStorageModel:
    """
    Reactor and hot tank temperature dynamics.

    Both temperatures follow a two-branch rule: they heat while the receiver
    delivers enough power in daylight and otherwise cool at a fixed rate. All
    rates are per simulated minute, and one tick covers ``multiplier``
    minutes. The cold tank is held at its floor temperature and not simulated.
    """

    def __init__(self, config: ThermalStorageConfig):
        self.config = config

    def initialize(self) -> ThermalState:
        return ThermalState(
            reactor_temperature=self.config.initial_reactor_temperature,
            hot_salt_temperature=self.config.initial_hot_salt_temperature,
            cold_salt_temperature=self.config.cold_salt_floor,
        )

    def advance(
        self,
        state: ThermalState,
        thermal_power_mw: float,
        is_daytime: bool,
        multiplier: float,
        optimal_temperature: float,
    ) -> ThermalState:
        """
        Advance the reactor and hot salt temperatures by one tick.

        Args:
            state: Thermal state at the start of the tick
            thermal_power_mw: Receiver power during the tick
            is_daytime: Whether the sun is up
            multiplier: Simulated minutes covered by the tick
            optimal_temperature: Reactor ceiling for the current feedstock

        Returns:
            Updated thermal state; ``pyrolysis_active`` is carried over
        """
        cfg = self.config

        if thermal_power_mw > cfg.reactor_power_threshold_mw and is_daytime:
            heating = min(cfg.reactor_heating_rate * multiplier, thermal_power_mw * cfg.reactor_heating_per_mw)
            reactor_temperature = min(state.reactor_temperature + heating, optimal_temperature)
        else:
            reactor_temperature = max(
                state.reactor_temperature - cfg.reactor_cooling_rate * multiplier, cfg.cold_salt_floor
            )
        # Keep the reactor within [floor, optimum] even if the optimum dropped
        ceiling = max(optimal_temperature, cfg.cold_salt_floor)
        reactor_temperature = min(max(reactor_temperature, cfg.cold_salt_floor), ceiling)

        if thermal_power_mw > cfg.salt_power_threshold_mw and is_daytime:
            hot_salt_temperature = state.hot_salt_temperature + cfg.salt_heating_rate * multiplier
        else:
            hot_salt_temperature = state.hot_salt_temperature - cfg.heat_loss_per_hour * multiplier / 60
        hot_salt_temperature = min(max(hot_salt_temperature, cfg.cold_salt_floor), cfg.hot_salt_ceiling)

        return ThermalState(
            reactor_temperature=reactor_temperature,
            hot_salt_temperature=hot_salt_temperature,
            cold_salt_temperature=state.cold_salt_temperature,
            pyrolysis_active=state.pyrolysis_active,
        )

    def heat_loss_mwh(self, state: ThermalState, multiplier: float) -> float:
        """Passive heat lost by the hot tank during one tick."""
        excess = max(state.hot_salt_temperature - self.config.ambient_temperature, 0.0)
        return self.config.heat_loss_per_hour * excess * 0.01 * multiplier / 60

    def transfer_power_kw(self, state: ThermalState) -> float:
        """Heat transfer rate between the tanks shown on the storage panel."""
        return state.salt_temperature_difference * self.config.salt_heat_capacity * 10

    def stored_energy_mwh(self, state: ThermalState) -> float:
        """Sensible heat held by the hot tank above the cold tank temperature."""
        salt_mass = self.config.tank_volume_m3 * self.config.salt_density
        return salt_mass * self.config.salt_heat_capacity * state.salt_temperature_difference / 3.6e6
