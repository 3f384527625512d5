"""Tests for environment configuration."""
import pytest
from unittest.mock import patch
from config import load_config

ENV_VARS = ("WEATHER_API_KEY", "PORT", "WEATHER_CACHE_TTL", "WEATHER_API_BASE_URL", "WEATHER_API_TIMEOUT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from the real environment and any local .env file."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    with patch("config.load_dotenv"):
        yield


def test_defaults():
    settings = load_config()

    assert settings.api_key == ""
    assert settings.port == 3000
    assert settings.cache_ttl_seconds == 900
    assert settings.base_url == "http://api.weatherapi.com/v1"
    assert settings.timeout == 10


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("WEATHER_API_KEY", "abc123")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("WEATHER_CACHE_TTL", "0.1")
    monkeypatch.setenv("WEATHER_API_TIMEOUT", "2.5")

    settings = load_config()

    assert settings.api_key == "abc123"
    assert settings.port == 8080
    assert settings.cache_ttl_seconds == 0.1
    assert settings.timeout == 2.5


def test_invalid_port_aborts(monkeypatch):
    monkeypatch.setenv("PORT", "eighty")

    with pytest.raises(SystemExit) as exc_info:
        load_config()

    assert "PORT" in str(exc_info.value)


def test_missing_api_key_warns(caplog):
    with caplog.at_level("WARNING"):
        load_config()

    assert "WEATHER_API_KEY is not set" in caplog.text
