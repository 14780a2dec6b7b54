"""Settings — environment-driven configuration."""

from model_api.config import Settings, get_settings


def test_postgres_url_rewritten_to_asyncpg():
    settings = Settings(database_url="postgresql://u:p@host:5432/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_other_urls_untouched():
    settings = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert settings.database_url == "sqlite+aiosqlite:///:memory:"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DATABASE_CREATE_SCHEMA", "false")
    settings = Settings()
    assert settings.log_level == "DEBUG"
    assert settings.database_create_schema is False


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
