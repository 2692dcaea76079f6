"""Supabase backend for ledger documents."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from calorie_ledger.services.store import LedgerStorage


@dataclass
class SupabaseLedgerStorage(LedgerStorage):
    """Supabase implementation backed by a key/payload table."""

    client: Client
    table: str = "ledger_documents"

    def read(self, key: str) -> str | None:
        """Return the stored payload for a key."""
        response = (
            self.client.table(self.table)
            .select("payload")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        payload = response.data[0].get("payload")
        return payload if isinstance(payload, str) else None

    def write(self, key: str, payload: str) -> None:
        """Insert or replace the payload for a key."""
        response = (
            self.client.table(self.table)
            .upsert(
                {
                    "key": key,
                    "payload": payload,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save ledger document")

    def delete(self, key: str) -> None:
        """Delete the row for a key."""
        self.client.table(self.table).delete().eq("key", key).execute()
