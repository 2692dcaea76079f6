"""Dependency container wiring for the application."""

from dataclasses import dataclass
from pathlib import Path

from supabase import create_client

from calorie_ledger.adapters.json_file_storage import JsonFileStorage
from calorie_ledger.adapters.memory_storage import InMemoryLedgerStorage
from calorie_ledger.adapters.supabase_ledger_storage import SupabaseLedgerStorage
from calorie_ledger.config import Settings, parse_timezone
from calorie_ledger.services.dashboard import DashboardService
from calorie_ledger.services.entries import EntryEditor
from calorie_ledger.services.store import LedgerStorage, LedgerStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    timezone: str | None
    ledger_store: LedgerStore
    entry_editor: EntryEditor
    dashboard_service: DashboardService


def build_storage(settings: Settings) -> LedgerStorage:
    """Create the storage backend selected in settings."""
    if settings.storage_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError(
                "SUPABASE_URL and SUPABASE_SERVICE_KEY are required "
                "for the supabase storage backend"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseLedgerStorage(client, table=settings.supabase_table)
    if settings.storage_backend == "memory":
        return InMemoryLedgerStorage()
    return JsonFileStorage(Path(settings.storage_path))


def build_container(
    settings: Settings | None = None, storage: LedgerStorage | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    timezone = parse_timezone(resolved_settings.timezone)
    ledger_store = LedgerStore(
        storage=storage or build_storage(resolved_settings),
        key=resolved_settings.storage_key,
    )
    return AppContainer(
        settings=resolved_settings,
        timezone=timezone,
        ledger_store=ledger_store,
        entry_editor=EntryEditor(store=ledger_store, timezone=timezone),
        dashboard_service=DashboardService(ledger_store),
    )
