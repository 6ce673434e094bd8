"""Schema migrations run at startup."""
import asyncio
import logging

from alembic import command
from alembic.config import Config

from app.core.config import Settings

logger = logging.getLogger(__name__)


def alembic_config(settings: Settings) -> Config:
    """Build an alembic Config without relying on alembic.ini."""
    config = Config()
    config.set_main_option("script_location", settings.MIGRATIONS_DIR)
    config.attributes["database_url"] = settings.DATABASE_URL
    config.attributes["connect_timeout"] = settings.DB_CONNECT_TIMEOUT_SECONDS
    return config


async def run_migrations(settings: Settings):
    """
    Upgrade the schema to the latest revision.

    Revisions are forward-only and already-applied ones are skipped, so this
    is safe on every start. alembic drives its own event loop inside env.py,
    so the upgrade runs in a worker thread.
    """
    logger.info(f"Running migrations from {settings.MIGRATIONS_DIR}")
    await asyncio.to_thread(command.upgrade, alembic_config(settings), "head")
    logger.info("Migrations finished successfully")
