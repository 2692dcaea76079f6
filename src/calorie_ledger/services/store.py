"""Ledger persistence service."""

import json
import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol

from calorie_ledger.domain.errors import StorageReadError
from calorie_ledger.domain.ledger import DayLog, FoodEntry, Ledger
from calorie_ledger.services.clock import format_minute

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "calorieData"


class LedgerStorage(Protocol):
    """Backend holding serialized documents under string keys."""

    def read(self, key: str) -> str | None:
        """Return the stored document or None when absent."""

    def write(self, key: str, payload: str) -> None:
        """Overwrite the stored document."""

    def delete(self, key: str) -> None:
        """Remove the stored document if present."""


@dataclass
class LedgerStore:
    """Loads and saves the whole ledger as one document."""

    storage: LedgerStorage
    key: str = DEFAULT_STORAGE_KEY

    def load(self) -> Ledger:
        """Return the persisted ledger, or an empty one if it can't be read."""
        try:
            raw = self.storage.read(self.key)
        except Exception:
            logger.exception("Failed to read ledger", extra={"key": self.key})
            return Ledger()
        if raw is None:
            return Ledger()
        try:
            return decode_ledger(raw)
        except StorageReadError as exc:
            logger.warning("Discarding unreadable ledger: %s", exc.detail)
            return Ledger()

    def save(self, ledger: Ledger) -> None:
        """Overwrite the persisted ledger."""
        self.storage.write(self.key, encode_ledger(ledger))

    def clear(self) -> None:
        """Remove the persisted ledger entirely."""
        self.storage.delete(self.key)


def encode_ledger(ledger: Ledger) -> str:
    """Serialize a ledger to its JSON document."""
    payload = {
        key: {
            "foods": [
                {
                    "name": food.name,
                    "calories": food.calories,
                    "time": format_minute(food.time),
                }
                for food in log.foods
            ],
            "totalCalories": log.total_calories,
        }
        for key, log in ledger.days.items()
        if not log.is_empty
    }
    return json.dumps(payload)


def decode_ledger(raw: str) -> Ledger:
    """Parse a JSON document into a ledger, raising StorageReadError."""
    try:
        payload = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        raise StorageReadError(f"invalid JSON: {exc}") from exc
    if payload is None:
        return Ledger()
    if not isinstance(payload, dict):
        raise StorageReadError("ledger document is not an object")
    ledger = Ledger()
    for key, value in payload.items():
        ledger.days[key] = _parse_day(key, value)
    return ledger


def _parse_day(key: str, value: object) -> DayLog:
    try:
        day = date.fromisoformat(key)
    except ValueError as exc:
        raise StorageReadError(f"invalid day key {key!r}") from exc
    if day.isoformat() != key:
        raise StorageReadError(f"day key {key!r} is not YYYY-MM-DD")
    if not isinstance(value, dict):
        raise StorageReadError(f"day {key} is not an object")
    foods = value.get("foods")
    if not isinstance(foods, list) or not foods:
        raise StorageReadError(f"day {key} has no foods")
    log = DayLog()
    for item in foods:
        entry = _parse_food(key, item)
        if entry.day != day:
            raise StorageReadError(f"entry {entry.name!r} does not belong to {key}")
        log.append(entry)
    stored_total = value.get("totalCalories")
    if not _is_count(stored_total) or stored_total != log.total_calories:
        raise StorageReadError(f"day {key} total does not match its foods")
    return log


def _parse_food(key: str, item: object) -> FoodEntry:
    if not isinstance(item, dict):
        raise StorageReadError(f"day {key} contains a non-object food")
    name = item.get("name")
    calories = item.get("calories")
    time_raw = item.get("time")
    if not isinstance(name, str) or not name.strip():
        raise StorageReadError(f"day {key} contains a food without a name")
    if not _is_count(calories):
        raise StorageReadError(f"food {name!r} has invalid calories")
    if not isinstance(time_raw, str):
        raise StorageReadError(f"food {name!r} has no time")
    try:
        time = datetime.fromisoformat(time_raw)
    except ValueError as exc:
        raise StorageReadError(f"food {name!r} has invalid time") from exc
    return FoodEntry(
        name=name, calories=calories, time=time.replace(second=0, microsecond=0)
    )


def _is_count(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0
