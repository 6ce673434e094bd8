"""Response classes and request error handling."""
import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.schemas.errors import ErrorResponse

logger = logging.getLogger(__name__)


class UTF8JSONResponse(JSONResponse):
    """JSON response that states its charset."""

    media_type = "application/json; charset=utf-8"


def invalid_request(message: str) -> UTF8JSONResponse:
    """Build the 400 body used for every unparseable request."""
    return UTF8JSONResponse(
        status_code=400,
        content=ErrorResponse(message=message).model_dump(),
    )


def format_validation_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into one readable line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts) or "request could not be parsed"


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Bad JSON, missing fields and malformed path or query values all become a 400."""
    message = format_validation_errors(exc)
    logger.warning(f"Invalid request on {request.method} {request.url.path}: {message}")
    return invalid_request(message)
