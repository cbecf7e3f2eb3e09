"""Shared fixtures for the API and repository tests."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from users_api.config import Settings
from users_api.database import MongoConnection
from users_api.main import create_application
from users_api.repositories.memory import InMemoryUserRepository
from users_api.repositories.mongo import MongoUserRepository

TEST_MONGO_URI = "mongodb://127.0.0.1:27017/users_api_test"


class MockMotorClient(AsyncMongoMockClient):
    """In-process stand-in for the motor client."""

    def close(self) -> None:
        return None


def mock_client_factory(uri: str, **kwargs) -> MockMotorClient:
    return MockMotorClient()


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None, use_mongo=False, log_level="WARNING")


@pytest_asyncio.fixture()
async def memory_repository() -> AsyncIterator[InMemoryUserRepository]:
    repository = InMemoryUserRepository()
    yield repository
    await repository.reset()


@pytest_asyncio.fixture()
async def mongo_repository() -> AsyncIterator[MongoUserRepository]:
    connection = MongoConnection(TEST_MONGO_URI, client_factory=mock_client_factory)
    repository = MongoUserRepository(connection)
    yield repository
    await repository.reset()
    await repository.close()


@pytest.fixture()
def app(settings: Settings, memory_repository: InMemoryUserRepository) -> FastAPI:
    return create_application(settings, repository=memory_repository)


@pytest_asyncio.fixture()
async def api_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest_asyncio.fixture()
async def mongo_api_client(
    settings: Settings, mongo_repository: MongoUserRepository
) -> AsyncIterator[AsyncClient]:
    mongo_settings = settings.model_copy(update={"use_mongo": True})
    application = create_application(mongo_settings, repository=mongo_repository)
    transport = ASGITransport(app=application)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
