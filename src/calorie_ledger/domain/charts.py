"""Domain models for chart-ready data."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ChartSeries:
    """Labels and values consumed by an external chart renderer."""

    kind: str
    label: str
    labels: list[str]
    values: list[int]

    def points(self) -> list[tuple[str, int]]:
        """Return the series as (label, value) pairs."""
        return list(zip(self.labels, self.values, strict=True))


@dataclass(frozen=True)
class Dashboard:
    """Totals and series for one view of the ledger."""

    today: date
    daily_total: int
    weekly_total: int
    daily_chart: ChartSeries
    weekly_chart: ChartSeries


@dataclass(frozen=True)
class FormDefaults:
    """Initial values for the entry form."""

    name: str
    calories: str
    time: str
