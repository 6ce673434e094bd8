"""API schemas."""
from app.schemas.tunnel import TunnelInDB
from app.schemas.coach import (
    CoachCreate,
    CoachUpdate,
    CoachInDB,
)
from app.schemas.reservation import (
    ReservationCreate,
    ReservationUpdate,
    ReservationInDB,
)
from app.schemas.health import HealthStatus
from app.schemas.errors import ErrorResponse

__all__ = [
    "TunnelInDB",
    "CoachCreate",
    "CoachUpdate",
    "CoachInDB",
    "ReservationCreate",
    "ReservationUpdate",
    "ReservationInDB",
    "HealthStatus",
    "ErrorResponse",
]
