"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from carcheck.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.port == 3001
    assert settings.cors_origin == "http://localhost:5173"
    assert settings.full_report_provider == "oneauto"
    assert settings.request_timeout is None
    assert settings.include_raw is False


def test_reads_upstream_keys_from_env(monkeypatch):
    monkeypatch.setenv("DVLA_API_KEY", "dvla-secret")
    monkeypatch.setenv("RAPIDCARCHECK_KEY", "rcc-secret")
    monkeypatch.setenv("ONEAUTO_API_KEY", "oneauto-secret")
    monkeypatch.setenv("MOT_API_KEY", "mot-secret")
    monkeypatch.setenv("PORT", "4000")
    monkeypatch.setenv("CORS_ORIGIN", "https://carcheck.example")

    settings = Settings(_env_file=None)

    assert settings.dvla_api_key == "dvla-secret"
    assert settings.rapidcarcheck_key == "rcc-secret"
    assert settings.oneauto_api_key == "oneauto-secret"
    assert settings.mot_api_key == "mot-secret"
    assert settings.port == 4000
    assert settings.cors_origin == "https://carcheck.example"


def test_rejects_unknown_full_report_provider(monkeypatch):
    monkeypatch.setenv("FULL_REPORT_PROVIDER", "carfax")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
