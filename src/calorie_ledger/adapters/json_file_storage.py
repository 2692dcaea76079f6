"""JSON file backend for ledger documents."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from calorie_ledger.services.store import LedgerStorage

logger = logging.getLogger(__name__)


@dataclass
class JsonFileStorage(LedgerStorage):
    """Stores every key as one member of a single JSON object on disk."""

    path: Path

    def read(self, key: str) -> str | None:
        """Return the document stored under ``key``."""
        documents = self._read_all()
        value = documents.get(key)
        return value if isinstance(value, str) else None

    def write(self, key: str, payload: str) -> None:
        """Overwrite the document stored under ``key``."""
        documents = self._read_all()
        documents[key] = payload
        self._write_all(documents)

    def delete(self, key: str) -> None:
        """Remove ``key`` from the file."""
        documents = self._read_all()
        if documents.pop(key, None) is not None:
            self._write_all(documents)

    def _read_all(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (ValueError, RecursionError):
            logger.warning("Ignoring unreadable storage file %s", self.path)
            return {}
        return data if isinstance(data, dict) else {}

    def _write_all(self, documents: dict[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(documents, indent=2), encoding="utf-8")
        tmp_path.replace(self.path)
