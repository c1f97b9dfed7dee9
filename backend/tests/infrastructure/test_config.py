"""Settings - defaults and database URL normalization."""

from employee_registry.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.database_url == "sqlite+aiosqlite:///./employees.db"
    assert settings.rate_limit_max_requests == 100
    assert settings.rate_limit_window_seconds == 900
    assert settings.log_format == "json"


def test_plain_sqlite_url_gets_async_driver(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./data/people.db")
    settings = Settings(_env_file=None)
    assert settings.database_url == "sqlite+aiosqlite:///./data/people.db"


def test_rate_limit_settings_from_env(monkeypatch):
    monkeypatch.setenv("RATE_LIMIT_MAX_REQUESTS", "5")
    monkeypatch.setenv("RATE_LIMIT_ENABLED", "false")
    settings = Settings(_env_file=None)
    assert settings.rate_limit_max_requests == 5
    assert settings.rate_limit_enabled is False
