"""Database models."""
from app.models.tunnel import Tunnel
from app.models.coach import Coach
from app.models.reservation import Reservation
from app.models.enums import CoachSpecialty, ReservationKind, ReservationStatus

__all__ = [
    "Tunnel",
    "Coach",
    "Reservation",
    "CoachSpecialty",
    "ReservationKind",
    "ReservationStatus",
]
