"""Dashboard view-model service."""

from dataclasses import dataclass
from datetime import date

from calorie_ledger.domain.charts import Dashboard
from calorie_ledger.services.aggregates import daily_total, weekly_total
from calorie_ledger.services.charts import daily_series, weekly_series
from calorie_ledger.services.store import LedgerStore


@dataclass
class DashboardService:
    """Service composing totals and chart series for display."""

    store: LedgerStore

    def snapshot(self, today: date) -> Dashboard:
        """Return totals and series as of ``today``."""
        ledger = self.store.load()
        return Dashboard(
            today=today,
            daily_total=daily_total(ledger, today),
            weekly_total=weekly_total(ledger, today),
            daily_chart=daily_series(ledger, today),
            weekly_chart=weekly_series(ledger, today),
        )
