from cspsim.core.catalog.feedstocks import Feedstock
from cspsim.core.reactor.config import PyrolysisReactorConfig
from cspsim.core.reactor.products import PyrolysisProducts

SECONDS_PER_HOUR = 3600.0


class PyrolysisReactor:
    """
    Continuous pyrolysis reactor fed from the solar receiver.

    Throughput is limited by the smaller of the reactor capacity and the
    plastic rate that the available thermal power can decompose. Yields
    scale linearly with the processed mass using the feedstock coefficients.
    """

    def __init__(self, config: PyrolysisReactorConfig):
        self.config = config

    def readiness_temperature(self, feedstock: Feedstock) -> float:
        """Reactor temperature that must be exceeded before the feedstock is processed."""
        return feedstock.optimal_temperature - self.config.readiness_margin

    def is_ready(self, reactor_temperature: float, feedstock: Feedstock) -> bool:
        return reactor_temperature > self.readiness_temperature(feedstock)

    def max_rate_kg_h(self, thermal_power_mw: float) -> float:
        """Plastic rate the thermal power can sustain, in kg/h."""
        required_power_per_kg = self.config.pyrolysis_energy / SECONDS_PER_HOUR
        return max(thermal_power_mw, 0.0) * 1000 / required_power_per_kg

    def process(self, thermal_power_mw: float, dt_seconds: float, feedstock: Feedstock) -> PyrolysisProducts:
        """Convert plastic for ``dt_seconds`` at the power-limited rate."""
        rate = min(self.max_rate_kg_h(thermal_power_mw), self.config.capacity_kg_h)
        plastic = rate * (dt_seconds / SECONDS_PER_HOUR)

        hydrogen_mmol = plastic * 1000 * feedstock.hydrogen_yield_mmol_g
        return PyrolysisProducts(
            plastic=plastic,
            hydrogen=hydrogen_mmol * self.config.hydrogen_molar_mass / 1e6,
            carbon=plastic * feedstock.carbon_fraction,
            wax=plastic * feedstock.oil_fraction,
            waste=plastic * feedstock.gas_fraction,
            rate_kg_h=rate,
        )

    def advance(
        self,
        reactor_temperature: float,
        thermal_power_mw: float,
        dt_seconds: float,
        feedstock: Feedstock,
    ) -> PyrolysisProducts:
        """Products for one tick, or an empty record while the reactor idles."""
        if not self.is_ready(reactor_temperature, feedstock):
            return PyrolysisProducts()
        if thermal_power_mw <= self.config.min_thermal_power_mw:
            return PyrolysisProducts()
        return self.process(thermal_power_mw, dt_seconds, feedstock)
