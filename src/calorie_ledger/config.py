"""Application configuration."""

import os
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_backend: Literal["file", "supabase", "memory"] = "file"
    storage_path: str = "calorie_data.json"
    storage_key: str = "calorieData"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    supabase_table: str = "ledger_documents"
    timezone: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_timezone(raw: str | None) -> str | None:
    """Normalize the configured timezone; blank or "local" means host time."""
    if raw is None:
        return None
    cleaned = raw.strip()
    if cleaned.lower() in {"", "local"}:
        return None
    return cleaned
