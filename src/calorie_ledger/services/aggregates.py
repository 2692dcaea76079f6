"""Daily and weekly calorie totals."""

from datetime import date, timedelta

from calorie_ledger.domain.ledger import Ledger

WEEK_DAYS = 7


def daily_total(ledger: Ledger, day: date) -> int:
    """Return a day's total, or 0 when nothing was logged."""
    log = ledger.day_log(day)
    return log.total_calories if log else 0


def week_days(reference_day: date) -> list[date]:
    """Return the 7 days ending at ``reference_day``, oldest first."""
    return [
        reference_day - timedelta(days=offset)
        for offset in range(WEEK_DAYS - 1, -1, -1)
    ]


def weekly_total(ledger: Ledger, reference_day: date) -> int:
    """Sum daily totals over ``reference_day`` and the six days before it."""
    return sum(daily_total(ledger, day) for day in week_days(reference_day))
