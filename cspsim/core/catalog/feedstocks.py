from dataclasses import dataclass

from cspsim.core.catalog.base import Catalog


@dataclass(frozen=True, slots=True)
class Feedstock:
    """Pyrolysis characteristics of a plastic type."""

    code: str
    name: str
    hydrogen_yield_mmol_g: float  # mmol H2 per gram of plastic (catalytic)
    carbon_fraction: float  # kg solid carbon per kg plastic
    oil_fraction: float  # kg wax/oil per kg plastic
    gas_fraction: float  # kg gaseous by-products per kg plastic
    optimal_temperature: float  # °C
    description: str = ""


FEEDSTOCKS: Catalog[Feedstock] = Catalog(
    "feedstock",
    {
        feedstock.code: feedstock
        for feedstock in (
            Feedstock("HDPE", "High-Density Polyethylene", 168, 0.25, 0.15, 0.10, 850, "Bottles, containers"),
            Feedstock("LDPE", "Low-Density Polyethylene", 175, 0.22, 0.18, 0.12, 850, "Bags, films"),
            Feedstock("PP", "Polypropylene", 165, 0.26, 0.16, 0.11, 850, "Containers, textiles"),
            # Low hydrogen, aromatic-rich, much more char
            Feedstock("PS", "Polystyrene", 95, 0.48, 0.20, 0.08, 900, "Foam, packaging"),
            Feedstock("Mixed", "Mixed Plastics", 150, 0.30, 0.17, 0.10, 850, "Municipal waste"),
        )
    },
)

DEFAULT_FEEDSTOCK = "HDPE"


def get_feedstock(key: str) -> Feedstock:
    return FEEDSTOCKS[key]
