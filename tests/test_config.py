"""Tests for environment-driven settings."""

import pytest

from homefin.config import DEFAULT_RATES_URL, Settings


def test_defaults():
    settings = Settings.from_env({})

    assert settings.database_path is None
    assert settings.reference_currency == "RUB"
    assert settings.pivot_currency == "USD"
    assert settings.rates_url == DEFAULT_RATES_URL
    assert settings.rates_ttl_seconds == 3600
    assert settings.rates_timeout_seconds == 10.0


def test_from_env():
    settings = Settings.from_env({
        "HOMEFIN_DB_PATH": "/tmp/h.db",
        "HOMEFIN_REFERENCE_CURRENCY": "eur",
        "HOMEFIN_RATES_URL": "http://localhost:8000/v4/",
        "HOMEFIN_RATES_TTL": "60",
        "HOMEFIN_RATES_TIMEOUT": "2.5",
    })

    assert settings.database_path == "/tmp/h.db"
    assert settings.reference_currency == "EUR"
    assert settings.rates_url == "http://localhost:8000/v4"
    assert settings.rates_ttl_seconds == 60
    assert settings.rates_timeout_seconds == 2.5


def test_invalid_number():
    with pytest.raises(ValueError):
        Settings.from_env({"HOMEFIN_RATES_TTL": "soon"})


def test_with_overrides_ignores_none():
    settings = Settings(database_path="/a.db").with_overrides(database_path=None, pivot_currency="EUR")

    assert settings.database_path == "/a.db"
    assert settings.pivot_currency == "EUR"


def test_resolve_database_path_default(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))

    path = Settings().resolve_database_path()

    assert path == str(tmp_path / ".homefin" / "homefin.db")
    assert (tmp_path / ".homefin").is_dir()
