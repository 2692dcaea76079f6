"""In-memory backend for ledger documents."""

from dataclasses import dataclass, field

from calorie_ledger.services.store import LedgerStorage


@dataclass
class InMemoryLedgerStorage(LedgerStorage):
    """Keeps documents in a dict for the life of the process."""

    documents: dict[str, str] = field(default_factory=dict)

    def read(self, key: str) -> str | None:
        return self.documents.get(key)

    def write(self, key: str, payload: str) -> None:
        self.documents[key] = payload

    def delete(self, key: str) -> None:
        self.documents.pop(key, None)
