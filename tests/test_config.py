from __future__ import annotations

from pathlib import Path

import pytest

from careguide.config import DEFAULT_DATA_DIR, get_settings


@pytest.fixture
def fresh_settings(monkeypatch):
    names = (
        "APP_ENV",
        "DEBUG",
        "LOG_LEVEL",
        "PORT",
        "KNOWLEDGE_BASE_DIR",
        "RATE_LIMIT_PER_MINUTE",
        "CORS_ORIGINS",
        "TRUSTED_PROXIES",
    )
    for name in names:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield get_settings
    get_settings.cache_clear()


def test_defaults(fresh_settings):
    settings = fresh_settings()

    assert settings.environment == "development"
    assert settings.debug is True
    assert settings.log_level == "DEBUG"
    assert settings.knowledge_base_dir == DEFAULT_DATA_DIR
    assert settings.rate_limit_per_minute == 60
    assert "http://localhost:5173" in settings.cors_origins
    assert settings.trusted_proxies == []


def test_production_defaults(fresh_settings, monkeypatch):
    monkeypatch.setenv("APP_ENV", "Production")

    settings = fresh_settings()

    assert settings.environment == "production"
    assert settings.debug is False
    assert settings.log_level == "INFO"


def test_values_from_environment(fresh_settings, monkeypatch, tmp_path):
    monkeypatch.setenv("KNOWLEDGE_BASE_DIR", str(tmp_path))
    monkeypatch.setenv("RATE_LIMIT_PER_MINUTE", "0")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("TRUSTED_PROXIES", "10.0.0.1,10.0.0.2")

    settings = fresh_settings()

    assert settings.knowledge_base_dir == Path(tmp_path)
    assert settings.rate_limit_per_minute == 0
    assert settings.cors_origins == ["https://a.example", "https://b.example"]
    assert settings.log_level == "WARNING"
    assert settings.trusted_proxies == ["10.0.0.1", "10.0.0.2"]


@pytest.mark.parametrize(
    ("name", "value"),
    [("PORT", "eighty"), ("PORT", "70000"), ("RATE_LIMIT_PER_MINUTE", "-1"), ("LOG_LEVEL", "LOUD")],
)
def test_invalid_values_raise(fresh_settings, monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError):
        fresh_settings()
