"""Alembic environment for the scheduler database."""
import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.ext.asyncio import create_async_engine

from app.core.database import Base
import app.models  # noqa: F401  registers the tables on Base.metadata

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata


def get_url():
    """URL handed over by the app, else alembic.ini, else the environment."""
    url = config.attributes.get("database_url") or config.get_main_option("sqlalchemy.url")
    if url:
        return url

    from app.core.config import load_settings

    return load_settings().DATABASE_URL


def run_migrations_offline():
    """Emit SQL to stdout without a database connection."""
    url = get_url()
    if not isinstance(url, str):
        url = url.render_as_string(hide_password=False)

    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection):
    context.configure(connection=connection, target_metadata=target_metadata)

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations():
    connect_timeout = config.attributes.get("connect_timeout", 5.0)
    connectable = create_async_engine(
        get_url(),
        poolclass=pool.NullPool,
        connect_args={"timeout": connect_timeout, "ssl": "disable"},
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_async_migrations())
