"""Entry editing service."""

import logging
from dataclasses import dataclass
from datetime import date, datetime

from calorie_ledger.domain.errors import (
    ConfirmationRequiredError,
    EmptyLedgerError,
    ValidationError,
)
from calorie_ledger.domain.ledger import AddedEntry, FoodEntry
from calorie_ledger.services.clock import parse_timestamp
from calorie_ledger.services.store import LedgerStore

logger = logging.getLogger(__name__)


@dataclass
class EntryEditor:
    """Service that validates, appends and removes food entries."""

    store: LedgerStore
    timezone: str | None = None

    def add_entry(
        self, name: str | None, calories: object, timestamp: datetime | str | None
    ) -> AddedEntry:
        """Validate and log a food entry, returning it with the day's new total."""
        entry = build_entry(name, calories, timestamp, self.timezone)
        ledger = self.store.load()
        log = ledger.add(entry)
        self.store.save(ledger)
        logger.info(
            "Logged food",
            extra={"day": entry.day.isoformat(), "calories": entry.calories},
        )
        return AddedEntry(entry=entry, daily_total=log.total_calories)

    def undo_last(self, today: date) -> FoodEntry:
        """Remove the most recent entry logged for ``today``."""
        ledger = self.store.load()
        entry = ledger.pop_last(today)
        if entry is None:
            raise EmptyLedgerError
        self.store.save(ledger)
        logger.info("Removed last food", extra={"day": today.isoformat()})
        return entry

    def reset_all(self, confirmed: bool) -> None:
        """Delete every logged day. Irreversible, so it must be confirmed."""
        if not confirmed:
            raise ConfirmationRequiredError
        self.store.clear()
        logger.info("Cleared all calorie data")


def build_entry(
    name: str | None,
    calories: object,
    timestamp: datetime | str | None,
    timezone_name: str | None = None,
) -> FoodEntry:
    """Validate raw form values and return a FoodEntry."""
    cleaned_name = name.strip() if isinstance(name, str) else ""
    if not cleaned_name:
        raise ValidationError("Food name is required.")
    count = _parse_calories(calories)
    if count is None:
        raise ValidationError("Calories must be a whole number of zero or more.")
    time = parse_timestamp(timestamp, timezone_name)
    if time is None:
        raise ValidationError("A valid date and time is required.")
    return FoodEntry(name=cleaned_name, calories=count, time=time)


def _parse_calories(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, str):
        cleaned = value.strip()
        if cleaned.isascii() and cleaned.isdigit():
            try:
                return int(cleaned)
            except ValueError:
                return None
    return None
