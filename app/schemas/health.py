"""Healthcheck schemas."""
from typing import Literal

from pydantic import BaseModel


class HealthStatus(BaseModel):
    """Schema for the healthcheck response."""

    status: Literal["healthy", "unhealthy"]
    db: Literal["up", "down"]
