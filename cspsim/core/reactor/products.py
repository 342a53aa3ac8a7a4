from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PyrolysisProducts:
    """Plastic consumed and products formed during one tick (kg)."""

    plastic: float = 0.0
    hydrogen: float = 0.0
    carbon: float = 0.0
    wax: float = 0.0
    waste: float = 0.0
    rate_kg_h: float = 0.0

    @property
    def is_empty(self) -> bool:
        return self.plastic <= 0.0
