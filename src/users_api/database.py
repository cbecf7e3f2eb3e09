"""MongoDB connection management."""

from collections.abc import Callable
from typing import Any
from urllib.parse import urlsplit

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from users_api.logging import get_logger

DEFAULT_DATABASE = "test_case"

_logger = get_logger("database")


def database_name_from_uri(uri: str, default: str = DEFAULT_DATABASE) -> str:
    """Return the database named in the path of a MongoDB connection string."""

    name = urlsplit(uri).path.lstrip("/")
    return name or default


class MongoConnection:
    """Shared MongoDB client, opened on first use and reused afterwards."""

    def __init__(
        self,
        uri: str,
        *,
        timeout_ms: int = 5000,
        client_factory: Callable[..., Any] = AsyncIOMotorClient,
    ):
        self.uri = uri
        self.timeout_ms = timeout_ms
        self._client_factory = client_factory
        self._client: Any | None = None

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    def connect(self) -> None:
        """Create the client unless one already exists."""
        if self.is_connected:
            return
        self._client = self._client_factory(
            self.uri, serverSelectionTimeoutMS=self.timeout_ms
        )
        _logger.info("mongo.connect database=%s", database_name_from_uri(self.uri))

    def disconnect(self) -> None:
        """Close the client if one was opened."""
        if not self.is_connected:
            return
        self._client.close()
        self._client = None
        _logger.info("mongo.disconnect")

    def collection(self, name: str) -> AsyncIOMotorCollection:
        """Return a collection handle, connecting first when needed."""
        self.connect()
        return self._client[database_name_from_uri(self.uri)][name]
