from typing import Iterable, List

import pandas as pd

from cspsim.core.accumulator import DailyReport
from cspsim.sim.snapshot import PlantSnapshot


class SimulationRecorder:
    """
    Collects snapshots of a run for later analysis.

    Can be registered as a runner callback or fed the list returned by
    ``PlantSimulator.run``.
    """

    def __init__(self):
        self._rows: List[dict] = []

    def __call__(self, snapshot: PlantSnapshot) -> None:
        self.record(snapshot)

    def __len__(self) -> int:
        return len(self._rows)

    def record(self, snapshot: PlantSnapshot) -> None:
        self._rows.append(snapshot.as_dict())

    def extend(self, snapshots: Iterable[PlantSnapshot]) -> None:
        for snapshot in snapshots:
            self.record(snapshot)

    def clear(self) -> None:
        self._rows.clear()

    def to_dataframe(self) -> pd.DataFrame:
        """One row per tick with flattened columns such as ``thermal.reactor_temperature``."""
        if not self._rows:
            return pd.DataFrame()
        df = pd.json_normalize(self._rows, sep=".")
        df.set_index("tick_count", inplace=True, drop=False)
        return df

    @staticmethod
    def reports_to_dataframe(reports: Iterable[DailyReport]) -> pd.DataFrame:
        """Daily summaries indexed by date."""
        records = [
            {
                "date": pd.Timestamp(report.date),
                "energy_collected": report.stats.energy_collected,
                "plastic_processed": report.stats.plastic_processed,
                "hydrogen_produced": report.stats.hydrogen_produced,
                "carbon_produced": report.stats.carbon_produced,
                "heat_loss": report.stats.heat_loss,
            }
            for report in reports
        ]
        if not records:
            return pd.DataFrame()
        return pd.DataFrame.from_records(records).set_index("date")
