import json
import logging

from address_validation.config import DEFAULT_GEOCODING_URL, Settings
from address_validation.logs import JsonFormatter
from address_validation.scorer import SIMILARITY_THRESHOLD


def test_settings_defaults(monkeypatch):
    for name in (
        "PORT",
        "GOOGLE_MAPS_GEOCODING_API_KEY",
        "GOOGLE_MAPS_GEOCODING_API_URL",
        "GEOCODING_TIMEOUT",
        "ADDRESS_SIMILARITY_THRESHOLD",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.port == 3000
    assert settings.google_api_key == ""
    assert settings.geocoding_url == DEFAULT_GEOCODING_URL
    assert settings.request_timeout == 10.0
    assert settings.similarity_threshold == SIMILARITY_THRESHOLD
    assert settings.log_level == "info"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("GOOGLE_MAPS_GEOCODING_API_KEY", "secret")
    monkeypatch.setenv("GOOGLE_MAPS_GEOCODING_API_URL", "https://geocoder.test/json")
    monkeypatch.setenv("ADDRESS_SIMILARITY_THRESHOLD", "0.7")

    settings = Settings()

    assert settings.port == 8080
    assert settings.google_api_key == "secret"
    assert settings.geocoding_url == "https://geocoder.test/json"
    assert settings.similarity_threshold == 0.7


def test_settings_ignore_unparseable_numbers(monkeypatch):
    monkeypatch.setenv("PORT", "eighty")
    monkeypatch.setenv("GEOCODING_TIMEOUT", "soon")

    settings = Settings()

    assert settings.port == 3000
    assert settings.request_timeout == 10.0


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord("address_validation.api", logging.WARNING, __file__, 1, "geocoding.denied", (), None)
    record.requestId = "req-1"

    line = json.loads(JsonFormatter().format(record))

    assert line["level"] == "warning"
    assert line["msg"] == "geocoding.denied"
    assert line["requestId"] == "req-1"
    assert "ts" in line
    assert "pathname" not in line
