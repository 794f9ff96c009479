"""Tests for environment-driven settings."""

from agenda.config import Settings, load_settings


def test_defaults_when_unset(monkeypatch):
    for name in (
        "AGENDA_DATABASE_URL",
        "AGENDA_LOG_LEVEL",
        "AGENDA_LINKEDIN_URL_PREFIX",
        "AGENDA_PHONE_REGION",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("agenda.config.load_env", lambda: None)
    assert load_settings() == Settings()


def test_values_from_environment(monkeypatch):
    monkeypatch.setattr("agenda.config.load_env", lambda: None)
    monkeypatch.setenv("AGENDA_DATABASE_URL", " sqlite:////tmp/x.db ")
    monkeypatch.setenv("AGENDA_LOG_LEVEL", "debug")
    monkeypatch.setenv("AGENDA_LINKEDIN_URL_PREFIX", "https://li.example/")
    monkeypatch.setenv("AGENDA_PHONE_REGION", "es")

    settings = load_settings()
    assert settings.database_url == "sqlite:////tmp/x.db"
    assert settings.log_level == "DEBUG"
    assert settings.linkedin_url_prefix == "https://li.example/"
    assert settings.phone_region == "ES"
