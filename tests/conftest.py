"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from calorie_ledger.adapters.memory_storage import InMemoryLedgerStorage
from calorie_ledger.config import Settings
from calorie_ledger.containers import AppContainer, build_container
from calorie_ledger.services.entries import EntryEditor
from calorie_ledger.services.store import LedgerStorage, LedgerStore


@dataclass
class FailingLedgerStorage(LedgerStorage):
    """Storage whose reads always fail and whose writes are recorded."""

    writes: list[tuple[str, str]] = field(default_factory=list)

    def read(self, key: str) -> str | None:
        raise RuntimeError("storage unavailable")

    def write(self, key: str, payload: str) -> None:
        self.writes.append((key, payload))

    def delete(self, key: str) -> None:
        return None


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory", timezone="UTC")


@pytest.fixture
def storage() -> InMemoryLedgerStorage:
    return InMemoryLedgerStorage()


@pytest.fixture
def store(storage: InMemoryLedgerStorage) -> LedgerStore:
    return LedgerStore(storage)


@pytest.fixture
def editor(store: LedgerStore) -> EntryEditor:
    return EntryEditor(store)


@pytest.fixture
def container(settings: Settings, storage: InMemoryLedgerStorage) -> AppContainer:
    return build_container(settings, storage=storage)
