"""Chart series built from the ledger."""

from datetime import date

from calorie_ledger.domain.charts import ChartSeries
from calorie_ledger.domain.ledger import Ledger
from calorie_ledger.services.aggregates import daily_total, week_days

EMPTY_DAY_LABEL = "No Food"


def daily_series(ledger: Ledger, day: date) -> ChartSeries:
    """Return one point per entry for ``day`` in the order they were logged.

    An empty day yields a single placeholder point since chart renderers
    need at least one.
    """
    log = ledger.day_log(day)
    foods = log.foods if log else []
    labels = [food.time.strftime("%H:%M") for food in foods]
    values = [food.calories for food in foods]
    if not foods:
        labels, values = [EMPTY_DAY_LABEL], [0]
    return ChartSeries(
        kind="bar", label="Calories per meal", labels=labels, values=values
    )


def weekly_series(ledger: Ledger, reference_day: date) -> ChartSeries:
    """Return seven daily totals, oldest first, labelled by weekday."""
    days = week_days(reference_day)
    return ChartSeries(
        kind="line",
        label="Calories per day",
        labels=[day.strftime("%a") for day in days],
        values=[daily_total(ledger, day) for day in days],
    )
