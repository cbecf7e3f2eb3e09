"""Run the API under uvicorn."""

import uvicorn

from users_api.config import get_settings
from users_api.logging import configure_logging, get_logger

_logger = get_logger("server")


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    _logger.info("Server running on port %s", settings.port)
    uvicorn.run(
        "users_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
