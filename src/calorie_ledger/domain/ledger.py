"""Domain models for the calorie ledger."""

from dataclasses import dataclass, field
from datetime import date, datetime


@dataclass(frozen=True)
class FoodEntry:
    """A single logged food item."""

    name: str
    calories: int
    time: datetime

    @property
    def day(self) -> date:
        """Calendar day the entry belongs to."""
        return self.time.date()


@dataclass(frozen=True)
class AddedEntry:
    """An entry that was just logged and its day's new total."""

    entry: FoodEntry
    daily_total: int


@dataclass
class DayLog:
    """One calendar day's entries and their running total.

    ``total_calories`` is kept in step with ``foods`` by ``append`` and
    ``pop_last``; callers must not mutate either field directly.
    """

    foods: list[FoodEntry] = field(default_factory=list)
    total_calories: int = 0

    def append(self, entry: FoodEntry) -> None:
        """Add an entry and bump the total."""
        self.foods.append(entry)
        self.total_calories += entry.calories

    def pop_last(self) -> FoodEntry:
        """Remove the most recently appended entry and reduce the total."""
        entry = self.foods.pop()
        self.total_calories -= entry.calories
        return entry

    @property
    def is_empty(self) -> bool:
        """True when no entries remain."""
        return not self.foods


@dataclass
class Ledger:
    """Mapping of ``YYYY-MM-DD`` keys to day logs."""

    days: dict[str, DayLog] = field(default_factory=dict)

    def day_log(self, day: date) -> DayLog | None:
        """Return the log for a day if one exists."""
        return self.days.get(day_key(day))

    def add(self, entry: FoodEntry) -> DayLog:
        """Append an entry to its day, creating the day lazily."""
        key = day_key(entry.day)
        log = self.days.get(key)
        if log is None:
            log = DayLog()
            self.days[key] = log
        log.append(entry)
        return log

    def pop_last(self, day: date) -> FoodEntry | None:
        """Remove the last entry of a day, dropping the day once empty."""
        key = day_key(day)
        log = self.days.get(key)
        if log is None or log.is_empty:
            return None
        entry = log.pop_last()
        if log.is_empty:
            del self.days[key]
        return entry

    def clear(self) -> None:
        """Drop every day."""
        self.days.clear()

    def __len__(self) -> int:
        return len(self.days)


def day_key(day: date) -> str:
    """Return the storage key for a calendar day."""
    return day.isoformat()
