"""Application configuration helpers."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    """Runtime configuration read from environment variables."""

    app_name: str = Field(default="users-api")
    log_level: str = Field(default="INFO")

    # Server settings
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)

    # Persistence settings
    use_mongo: bool = Field(default=False)
    mongo_uri: str = Field(default="mongodb://127.0.0.1:27017/test_case")
    mongo_timeout_ms: int = Field(default=5000)

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def backend_name(self) -> str:
        return "mongo" if self.use_mongo else "memory"


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings object so expensive IO only runs once."""

    return Settings()
