"""Testes das settings base e da agenda (carga por env)."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from pydantic import ValidationError

from config.settings import AgendaSettings, BaseSettings, get_agenda_settings, get_base_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    get_agenda_settings.cache_clear()
    get_base_settings.cache_clear()
    yield
    get_agenda_settings.cache_clear()
    get_base_settings.cache_clear()


class TestBaseSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("ENVIRONMENT", "SERVICE_NAME", "DEBUG", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        settings = get_base_settings()
        assert settings.environment == "development"
        assert settings.service_name == "prontio_agenda"
        assert settings.debug is False
        assert settings.validate() == []

    def test_environment_aliases(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        settings = get_base_settings()
        assert settings.environment == "production"
        assert settings.is_production is True

    def test_invalid_log_level_reported(self) -> None:
        errors = BaseSettings(log_level="verbose").validate()
        assert errors == ["LOG_LEVEL inválido: verbose"]


class TestAgendaSettings:
    def test_defaults_from_empty_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in (
            "PRONTIO_API_BASE_URL",
            "PRONTIO_API_TIMEOUT_SECONDS",
            "AGENDA_LOCK_TERMINAL_STATUS",
            "AGENDA_DEFAULT_VIEW",
            "AGENDA_PATIENT_SEARCH_LIMIT",
            "AGENDA_PATIENT_SEARCH_MIN_CHARS",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = get_agenda_settings()

        assert settings.api_base_url == ""
        assert settings.api_timeout_seconds == 20.0
        assert settings.lock_terminal_statuses is False
        assert settings.default_view_mode == "dia"
        assert settings.patient_search_limit == 30
        assert settings.patient_search_min_chars == 2
        assert settings.validate_settings() == ["PRONTIO_API_BASE_URL não configurado"]

    def test_reads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PRONTIO_API_BASE_URL", " https://script.google.com/macros/s/x/exec ")
        monkeypatch.setenv("PRONTIO_API_TIMEOUT_SECONDS", "5")
        monkeypatch.setenv("AGENDA_LOCK_TERMINAL_STATUS", "true")
        monkeypatch.setenv("AGENDA_DEFAULT_VIEW", "SEMANA")

        settings = get_agenda_settings()

        assert settings.api_base_url == "https://script.google.com/macros/s/x/exec"
        assert settings.api_timeout_seconds == 5.0
        assert settings.lock_terminal_statuses is True
        assert settings.default_view_mode == "semana"
        assert settings.validate_settings() == []

    def test_non_http_url_reported(self) -> None:
        errors = AgendaSettings(api_base_url="ftp://example").validate_settings()
        assert errors == ["PRONTIO_API_BASE_URL deve começar com http:// ou https://"]

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            AgendaSettings(api_timeout_seconds=0)
