"""Tunnel schemas."""
from pydantic import BaseModel, ConfigDict
from datetime import datetime


class TunnelInDB(BaseModel):
    """Schema for tunnel from database."""

    id: int
    name: str
    is_active: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
