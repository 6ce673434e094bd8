"""Reservation schemas."""
from pydantic import AliasChoices, AwareDatetime, BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from uuid import UUID

from app.models.enums import ReservationKind, ReservationStatus


class ReservationBase(BaseModel):
    """Base reservation schema."""

    tunnel_id: Optional[int] = None
    coach_id: Optional[UUID] = None
    customer_first_name: str
    customer_last_name: str
    customer_phone: str
    customer_email: Optional[str] = None
    start_time: AwareDatetime
    end_time: AwareDatetime
    duration_minutes: int
    notes: Optional[str] = None


class ReservationCreate(ReservationBase):
    """
    Schema for creating a reservation.

    kind and status are checked by the reservation_kind and
    reservation_status enums in the database.
    """

    kind: str
    status: str = ReservationStatus.held.value


class ReservationUpdate(BaseModel):
    """Schema for updating a reservation. Omitted fields are left unchanged."""

    kind: Optional[str] = None
    tunnel_id: Optional[int] = None
    coach_id: Optional[UUID] = None
    customer_first_name: Optional[str] = None
    customer_last_name: Optional[str] = None
    customer_phone: Optional[str] = None
    customer_email: Optional[str] = None
    start_time: Optional[AwareDatetime] = None
    end_time: Optional[AwareDatetime] = None
    duration_minutes: Optional[int] = None
    status: Optional[str] = None
    notes: Optional[str] = None


class ReservationInDB(ReservationBase):
    """Schema for reservation from database."""

    id: UUID
    # Stored in the reservation_kind column
    kind: ReservationKind = Field(validation_alias=AliasChoices("kind", "reservation_kind"))
    status: ReservationStatus
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
