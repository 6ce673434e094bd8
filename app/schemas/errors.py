"""Error response schemas."""
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body returned for requests that cannot be parsed."""

    error: str = "invalid_request"
    message: str
