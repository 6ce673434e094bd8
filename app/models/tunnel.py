"""Tunnel model."""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Identity
from sqlalchemy.sql import func
from app.core.database import Base


class Tunnel(Base):
    """Represents a physical practice lane."""

    __tablename__ = "tunnels"

    id = Column(Integer, Identity(), primary_key=True)
    name = Column(String, nullable=False)
    is_active = Column(Boolean, nullable=False, server_default="true")
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
