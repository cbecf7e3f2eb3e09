"""Pick the user repository backend from configuration."""

from users_api.config import Settings
from users_api.database import MongoConnection
from users_api.logging import get_logger
from users_api.repositories.base import UserRepository
from users_api.repositories.memory import InMemoryUserRepository
from users_api.repositories.mongo import MongoUserRepository

_logger = get_logger("repositories")


def build_user_repository(settings: Settings) -> UserRepository:
    """Create the repository selected by ``settings.use_mongo``."""

    if settings.use_mongo:
        connection = MongoConnection(settings.mongo_uri, timeout_ms=settings.mongo_timeout_ms)
        repository: UserRepository = MongoUserRepository(connection)
    else:
        repository = InMemoryUserRepository()
    _logger.info("repository.selected backend=%s", settings.backend_name)
    return repository
