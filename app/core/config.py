"""Application configuration."""
import logging
import sys

from fastapi import Request
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings."""

    # API
    API_HOST: str = "0.0.0.0"
    PORT: int
    CORS_ORIGIN: str
    LOG_LEVEL: str = "INFO"

    # Database
    POSTGRES_USER: str
    POSTGRES_PASSWORD: str
    POSTGRES_HOST: str = "db"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "the-diamond-scheduler"
    DB_POOL_SIZE: int = 5
    DB_CONNECT_TIMEOUT_SECONDS: float = 5.0
    DB_STATEMENT_TIMEOUT_SECONDS: float = 30.0
    HEALTHCHECK_TIMEOUT_SECONDS: float = 2.0

    # Migrations
    MIGRATIONS_DIR: str = "db/migrations"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def DATABASE_URL(self) -> URL:
        """Build the asyncpg connection URL from the Postgres credentials."""
        return URL.create(
            "postgresql+asyncpg",
            username=self.POSTGRES_USER,
            password=self.POSTGRES_PASSWORD,
            host=self.POSTGRES_HOST,
            port=self.POSTGRES_PORT,
            database=self.POSTGRES_DB,
        )


def load_settings() -> Settings:
    """
    Load settings from the environment (and `.env` when present).

    Exits the process with status 1 when a required variable is missing.
    """
    try:
        return Settings()
    except ValidationError as e:
        for error in e.errors():
            name = ".".join(str(part) for part in error["loc"])
            if error["type"] == "missing":
                logger.error(f"Missing required environment variable '{name}'")
            else:
                logger.error(f"Invalid environment variable '{name}': {error['msg']}")
        sys.exit(1)


def get_settings(request: Request) -> Settings:
    """Dependency: the settings the application was created with."""
    return request.app.state.settings
