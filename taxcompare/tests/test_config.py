"""Settings tests: defaults, environment overrides, CORS origin parsing."""
from __future__ import annotations

import pytest

from taxcompare.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("FISCAL_YEAR", "DEBUG", "CORS_ORIGINS", "REPORT_TITLE"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.fiscal_year == "2024-25"
    assert settings.report_title == "Tax Liability Comparison Report"
    assert settings.debug is False


def test_environment_overrides_are_case_insensitive(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("fiscal_year", "2025-26")
    monkeypatch.setenv("DEBUG", "true")
    settings = Settings(_env_file=None)
    assert settings.fiscal_year == "2025-26"
    assert settings.debug is True


def test_unrelated_environment_keys_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql://unused")
    assert not hasattr(Settings(_env_file=None), "database_url")


def test_cors_origins_list_drops_blanks() -> None:
    settings = Settings(_env_file=None, cors_origins=" http://a.test , ,http://b.test,")
    assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
