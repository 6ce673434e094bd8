"""Healthcheck endpoint."""
import logging

from fastapi import APIRouter, Depends

from app.core.config import Settings, get_settings
from app.core.database import Database, get_database
from app.core.errors import UTF8JSONResponse
from app.schemas.health import HealthStatus

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/healthcheck", response_model=HealthStatus)
async def healthcheck(
    database: Database = Depends(get_database),
    settings: Settings = Depends(get_settings),
):
    """Report whether the database answers a ping."""
    try:
        await database.ping(timeout=settings.HEALTHCHECK_TIMEOUT_SECONDS)
    except Exception as e:
        logger.error(f"Healthcheck ping failed: {e}")
        return UTF8JSONResponse(
            status_code=503,
            content=HealthStatus(status="unhealthy", db="down").model_dump(),
        )

    return HealthStatus(status="healthy", db="up")
