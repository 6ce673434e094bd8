"""Coach model."""
from sqlalchemy import Column, String, Boolean, DateTime, Enum, text
from sqlalchemy.dialects.postgresql import ARRAY, UUID
from sqlalchemy.sql import func
from app.core.database import Base
from app.models.enums import CoachSpecialty, pg_enum_values


class Coach(Base):
    """Represents an instructor who can lead lessons."""

    __tablename__ = "coaches"

    id = Column(UUID(as_uuid=True), primary_key=True, server_default=text("gen_random_uuid()"))
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=False)
    is_active = Column(Boolean, nullable=False, server_default="true")
    specialties = Column(
        ARRAY(
            Enum(
                CoachSpecialty,
                name="coach_specialty",
                values_callable=pg_enum_values,
                create_type=False,
            )
        ),
        nullable=False,
        server_default="{}",
    )
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
