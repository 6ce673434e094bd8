"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from app.api import coaches, health, reservations, tunnels
from app.core.config import Settings, load_settings
from app.core.database import Database
from app.core.errors import UTF8JSONResponse, validation_exception_handler
from app.core.middleware import CancelOnDisconnectMiddleware, CORSHeadersMiddleware
from app.core.migrations import run_migrations

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO"):
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    database: Database = app.state.database

    # Startup
    logger.info("Starting The Diamond Scheduler API")

    try:
        await run_migrations(settings)
    except Exception as e:
        logger.error(f"Error running migrations: {e}")
        raise

    try:
        await database.connect()
    except Exception as e:
        logger.error(f"Error connecting to the database: {e}")
        raise

    yield

    # Shutdown
    logger.info("Shutting down The Diamond Scheduler API")
    await database.disconnect()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Settings to use; loaded from the environment when omitted

    Returns:
        Configured FastAPI app
    """
    if settings is None:
        settings = load_settings()

    app = FastAPI(
        title="The Diamond Scheduler API",
        description="Tunnels, coaches and reservations for a batting cage facility",
        version="1.0.0",
        lifespan=lifespan,
        default_response_class=UTF8JSONResponse,
    )

    app.state.settings = settings
    app.state.database = Database(
        settings.DATABASE_URL,
        pool_size=settings.DB_POOL_SIZE,
        connect_timeout=settings.DB_CONNECT_TIMEOUT_SECONDS,
        statement_timeout=settings.DB_STATEMENT_TIMEOUT_SECONDS,
    )

    app.add_middleware(CORSHeadersMiddleware, allow_origin=settings.CORS_ORIGIN)
    app.add_middleware(CancelOnDisconnectMiddleware)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Include routers
    app.include_router(health.router)
    app.include_router(tunnels.router)
    app.include_router(reservations.router)
    app.include_router(coaches.router)

    return app


def run():
    """Console entry point: load settings, then serve."""
    configure_logging()
    settings = load_settings()
    logging.getLogger().setLevel(settings.LOG_LEVEL.upper())

    logger.info(f"Server starting on port {settings.PORT}")
    config = uvicorn.Config(
        create_app(settings),
        host=settings.API_HOST,
        port=settings.PORT,
        log_config=None,
    )
    server = uvicorn.Server(config)
    server.run()

    # Migration or connection failures end here with a normal exit
    if not server.started:
        logger.error("Server did not start, exiting")
