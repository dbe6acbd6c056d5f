"""Unit tests for environment-backed collector settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from elim_ranks.collector.config import DEFAULT_TIMEOUT, ELIM_RANKS_URL
from elim_ranks.config.settings import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in ("ELIM_RANKS_URL", "ELIM_RANKS_TIMEOUT", "ELIM_RANKS_LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)

        settings = Settings(_env_file=None)

        assert settings.url == ELIM_RANKS_URL == "https://ut4stats.com/elim_ranks"
        assert settings.timeout == DEFAULT_TIMEOUT
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ELIM_RANKS_URL", "http://localhost:8080/elim_ranks")
        monkeypatch.setenv("ELIM_RANKS_TIMEOUT", "2.5")

        settings = Settings(_env_file=None)

        assert settings.url == "http://localhost:8080/elim_ranks"
        assert settings.timeout == 2.5

    def test_non_positive_timeout_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ELIM_RANKS_TIMEOUT", "0")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_cache_clear_rereads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ELIM_RANKS_URL", "https://first.example.org/")
        first = get_settings()

        monkeypatch.setenv("ELIM_RANKS_URL", "https://second.example.org/")
        get_settings.cache_clear()

        assert first.url == "https://first.example.org/"
        assert get_settings().url == "https://second.example.org/"
