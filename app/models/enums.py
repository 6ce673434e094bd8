"""Enumerated value sets shared by the tables and the API schemas."""
from enum import Enum


class CoachSpecialty(str, Enum):
    hitting = "hitting"
    pitching = "pitching"
    fielding = "fielding"
    catching = "catching"


class ReservationKind(str, Enum):
    tunnel = "tunnel"
    lesson = "lesson"


class ReservationStatus(str, Enum):
    held = "held"
    confirmed = "confirmed"
    cancelled = "cancelled"
    completed = "completed"
    no_show = "no_show"


def pg_enum_values(enum_class):
    """Store enum values, not member names, in the Postgres enum type."""
    return [member.value for member in enum_class]
