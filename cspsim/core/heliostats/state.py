from dataclasses import dataclass


@dataclass(slots=True)
class HeliostatField:
    """Status counts of the heliostat field."""

    operational: int
    maintenance: int = 0
    cleaning_needed: int = 0
    faulty: int = 0

    @classmethod
    def fully_operational(cls, installed_count: int) -> "HeliostatField":
        return cls(operational=installed_count)

    def field_efficiency(self, installed_count: int) -> float:
        """Share of the installed field that is operational, in [0, 1]."""
        if installed_count <= 0:
            return 0.0
        return self.operational / installed_count
