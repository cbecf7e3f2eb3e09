"""Application entrypoint."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from users_api.api.routers import health, users
from users_api.config import Settings, get_settings
from users_api.errors import register_exception_handlers
from users_api.logging import configure_logging, get_logger
from users_api.middleware import RequestLoggingMiddleware
from users_api.repositories.base import UserRepository
from users_api.repositories.factory import build_user_repository

_logger = get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Release the storage backend when the application stops."""
    yield
    await app.state.user_repository.close()
    _logger.info("shutdown complete backend=%s", app.state.user_repository.name)


def create_application(
    settings: Settings | None = None,
    repository: UserRepository | None = None,
) -> FastAPI:
    """Build and configure a FastAPI instance.

    The repository is chosen once here from ``settings`` unless one is passed
    in, which is how tests supply their own storage.
    """

    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.user_repository = repository or build_user_repository(settings)

    register_exception_handlers(app)
    app.add_middleware(RequestLoggingMiddleware)
    app.include_router(health.router)
    app.include_router(users.router)
    return app


app = create_application()
