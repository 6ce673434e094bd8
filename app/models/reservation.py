"""Reservation model."""
from sqlalchemy import Column, Integer, String, Text, ForeignKey, DateTime, Enum, Index, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func
from app.core.database import Base
from app.models.enums import ReservationKind, ReservationStatus, pg_enum_values


class Reservation(Base):
    """Represents a booked interval on a tunnel, optionally led by a coach."""

    __tablename__ = "reservations"

    id = Column(UUID(as_uuid=True), primary_key=True, server_default=text("gen_random_uuid()"))
    reservation_kind = Column(
        Enum(ReservationKind, name="reservation_kind", values_callable=pg_enum_values, create_type=False),
        nullable=False,
    )
    tunnel_id = Column(Integer, ForeignKey("tunnels.id"), nullable=True)
    coach_id = Column(UUID(as_uuid=True), ForeignKey("coaches.id"), nullable=True)
    customer_first_name = Column(String, nullable=False)
    customer_last_name = Column(String, nullable=False)
    customer_phone = Column(String, nullable=False)
    customer_email = Column(String, nullable=True)
    start_time = Column(DateTime(timezone=True), nullable=False)
    duration_minutes = Column(Integer, nullable=False)
    end_time = Column(DateTime(timezone=True), nullable=False)
    status = Column(
        Enum(ReservationStatus, name="reservation_status", values_callable=pg_enum_values, create_type=False),
        nullable=False,
        server_default=ReservationStatus.held.value,
    )
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    # Search filters on tunnel and start time
    __table_args__ = (
        Index("ix_reservations_start_time", "start_time"),
        Index("ix_reservations_tunnel_start_time", "tunnel_id", "start_time"),
    )
