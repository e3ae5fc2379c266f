from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from user_management.config import DatabaseConfig, Settings
from user_management.main import create_app
from user_management.modules.user.memory import InMemoryUserRepository
from user_management.modules.user.service import UserService


class FakeClock:
    """Deterministic clock so timestamp changes are observable."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def service(repository: InMemoryUserRepository, clock: FakeClock) -> UserService:
    return UserService(repository, clock=clock)


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        _env_file=None,
        debug=True,
        db=DatabaseConfig(
            driver="sqlite+aiosqlite",
            name=str(tmp_path / "users.sqlite3"),
        ),
    )


@pytest.fixture()
def client(settings: Settings) -> Iterator[TestClient]:
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


def user_payload(index: int = 0, **overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "username": f"user{index:02d}",
        "email": f"user{index:02d}@example.com",
        "phoneNumber": f"+1555000{index:04d}",
        "role": "USER",
    }
    payload.update(overrides)
    return payload
