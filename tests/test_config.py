"""Tests for configuration helpers."""

import pytest

from calorie_ledger.config import Settings, parse_timezone


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, None),
        ("", None),
        ("  local ", None),
        ("Europe/Berlin", "Europe/Berlin"),
        (" UTC ", "UTC"),
    ],
)
def test_parse_timezone(raw: str | None, expected: str | None) -> None:
    assert parse_timezone(raw) == expected


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    monkeypatch.setenv("STORAGE_KEY", "custom")

    settings = Settings()

    assert settings.storage_backend == "memory"
    assert settings.storage_key == "custom"
    assert settings.storage_path == "calorie_data.json"
