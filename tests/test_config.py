from __future__ import annotations

import pytest
from pydantic import SecretStr, ValidationError

from user_management.config import DatabaseConfig, Settings


def test_postgres_url_is_quoted() -> None:
    db = DatabaseConfig(user="svc", password=SecretStr("p@ss/word"), host="db", name="users")

    assert db.url == "postgresql+asyncpg://svc:p%40ss%2Fword@db:5432/users"


def test_sqlite_url_uses_name_as_path() -> None:
    db = DatabaseConfig(driver="sqlite+aiosqlite", name="/tmp/users.sqlite3")

    assert db.url == "sqlite+aiosqlite:////tmp/users.sqlite3"


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.example, http://b.example")
    monkeypatch.setenv("DB_HOST", "database")
    monkeypatch.setenv("DEFAULT_PAGE_SIZE", "25")

    settings = Settings(_env_file=None)

    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ["http://a.example", "http://b.example"]
    assert settings.db.host == "database"
    assert settings.default_page_size == 25
    assert settings.database_url.startswith("postgresql+asyncpg://postgres:@database:5432/")


def test_invalid_log_level_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="chatty")
