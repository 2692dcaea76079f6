"""Tests for the ledger store."""

import json
from datetime import date, datetime

import pytest

from calorie_ledger.adapters.memory_storage import InMemoryLedgerStorage
from calorie_ledger.domain.errors import StorageReadError
from calorie_ledger.domain.ledger import DayLog, FoodEntry, Ledger
from calorie_ledger.services.aggregates import daily_total
from calorie_ledger.services.entries import EntryEditor
from calorie_ledger.services.store import LedgerStore, decode_ledger, encode_ledger
from tests.conftest import FailingLedgerStorage


def _ledger() -> Ledger:
    ledger = Ledger()
    ledger.add(FoodEntry("Apple", 95, datetime(2024, 1, 1, 8, 0)))
    ledger.add(FoodEntry("Toast", 150, datetime(2024, 1, 1, 8, 5)))
    ledger.add(FoodEntry("Soup", 0, datetime(2024, 1, 3, 19, 30)))
    return ledger


def test_load_after_save_returns_equal_ledger(store: LedgerStore) -> None:
    ledger = _ledger()

    store.save(ledger)

    assert store.load() == ledger


def test_save_writes_expected_layout(
    store: LedgerStore, storage: InMemoryLedgerStorage
) -> None:
    store.save(_ledger())

    payload = json.loads(storage.documents["calorieData"])
    assert payload["2024-01-01"] == {
        "foods": [
            {"name": "Apple", "calories": 95, "time": "2024-01-01T08:00"},
            {"name": "Toast", "calories": 150, "time": "2024-01-01T08:05"},
        ],
        "totalCalories": 245,
    }


def test_load_missing_state_is_empty(store: LedgerStore) -> None:
    assert store.load() == Ledger()


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        "[]",
        '{"2024-01-01": []}',
        '{"bad-key": {"foods": [], "totalCalories": 0}}',
        '{"2024-01-01": {"foods": [], "totalCalories": 0}}',
        '{"2024-01-01": {"foods": [{"name": "A", "calories": 5,'
        ' "time": "2024-01-01T08:00"}], "totalCalories": 6}}',
        '{"2024-01-01": {"foods": [{"name": "A", "calories": -5,'
        ' "time": "2024-01-01T08:00"}], "totalCalories": -5}}',
        '{"2024-01-01": {"foods": [{"name": "A", "calories": 5,'
        ' "time": "2024-01-02T08:00"}], "totalCalories": 5}}',
        '{"2024-01-01": {"foods": [{"name": "", "calories": 5,'
        ' "time": "2024-01-01T08:00"}], "totalCalories": 5}}',
        '{"20240101": {"foods": [{"name": "A", "calories": 5,'
        ' "time": "2024-01-01T08:00"}], "totalCalories": 5}}',
    ],
)
def test_load_corrupt_state_fails_soft(
    store: LedgerStore, storage: InMemoryLedgerStorage, raw: str
) -> None:
    storage.documents["calorieData"] = raw

    assert store.load() == Ledger()


def test_load_deeply_nested_state_fails_soft(
    store: LedgerStore, storage: InMemoryLedgerStorage
) -> None:
    storage.documents["calorieData"] = "[" * 200000 + "]" * 200000

    assert store.load() == Ledger()


def test_basic_form_day_key_is_not_kept(
    store: LedgerStore, storage: InMemoryLedgerStorage
) -> None:
    storage.documents["calorieData"] = (
        '{"20240101": {"foods": [{"name": "A", "calories": 5,'
        ' "time": "2024-01-01T08:00"}], "totalCalories": 5}}'
    )
    editor = EntryEditor(store)

    editor.add_entry("B", 7, "2024-01-01T09:00")

    ledger = store.load()
    assert list(ledger.days) == ["2024-01-01"]
    assert daily_total(ledger, date(2024, 1, 1)) == 7


def test_decode_raises_storage_read_error() -> None:
    with pytest.raises(StorageReadError):
        decode_ledger('{"2024-01-01": "oops"}')


def test_decode_null_document_is_empty() -> None:
    assert decode_ledger("null") == Ledger()


def test_load_swallows_backend_errors() -> None:
    store = LedgerStore(FailingLedgerStorage())

    assert store.load() == Ledger()


def test_encode_skips_empty_days() -> None:
    ledger = _ledger()
    ledger.days["2024-01-05"] = DayLog()

    assert "2024-01-05" not in json.loads(encode_ledger(ledger))


def test_clear_removes_document(
    store: LedgerStore, storage: InMemoryLedgerStorage
) -> None:
    store.save(_ledger())

    store.clear()

    assert "calorieData" not in storage.documents
    assert store.load() == Ledger()


def test_custom_key(storage: InMemoryLedgerStorage) -> None:
    store = LedgerStore(storage, key="other")
    store.save(_ledger())

    assert list(storage.documents) == ["other"]
