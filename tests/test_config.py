"""Settings and backend selection tests."""

import pytest

from users_api.config import Settings
from users_api.repositories.factory import build_user_repository
from users_api.repositories.memory import InMemoryUserRepository
from users_api.repositories.mongo import MongoUserRepository


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("USE_MONGO", "MONGO_URI", "PORT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.use_mongo is False
    assert settings.mongo_uri == "mongodb://127.0.0.1:27017/test_case"
    assert settings.port == 3000
    assert settings.backend_name == "memory"


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("USE_MONGO", "true")
    monkeypatch.setenv("MONGO_URI", "mongodb://db.internal:27017/users")
    monkeypatch.setenv("PORT", "8080")

    settings = Settings(_env_file=None)

    assert settings.use_mongo is True
    assert settings.mongo_uri == "mongodb://db.internal:27017/users"
    assert settings.port == 8080
    assert settings.backend_name == "mongo"


def test_builds_memory_repository_by_default() -> None:
    repository = build_user_repository(Settings(_env_file=None, use_mongo=False))
    assert isinstance(repository, InMemoryUserRepository)


def test_builds_mongo_repository_without_connecting() -> None:
    settings = Settings(_env_file=None, use_mongo=True, mongo_uri="mongodb://db.internal/users")

    repository = build_user_repository(settings)

    assert isinstance(repository, MongoUserRepository)
    assert repository.connection.uri == "mongodb://db.internal/users"
    assert repository.connection.is_connected is False
