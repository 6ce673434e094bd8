"""Coach schemas."""
from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional, List
from datetime import datetime
from uuid import UUID

from app.models.enums import CoachSpecialty


def _dedupe(values):
    """Drop repeated specialties, keeping first-seen order."""
    if values is None:
        return None
    return list(dict.fromkeys(values))


class CoachBase(BaseModel):
    """Base coach schema."""

    first_name: str
    last_name: str
    phone: str
    email: Optional[str] = None


class CoachCreate(CoachBase):
    """
    Schema for creating a coach.

    Specialties stay plain strings here; the coach_specialty enum in the
    database decides what is accepted.
    """

    specialties: List[str] = []

    @field_validator("specialties")
    @classmethod
    def dedupe_specialties(cls, v):
        return _dedupe(v)


class CoachUpdate(BaseModel):
    """Schema for updating a coach. Omitted fields are left unchanged."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    is_active: Optional[bool] = None
    specialties: Optional[List[str]] = None

    @field_validator("specialties")
    @classmethod
    def dedupe_specialties(cls, v):
        return _dedupe(v)


class CoachInDB(CoachBase):
    """Schema for coach from database."""

    id: UUID
    is_active: bool
    specialties: List[CoachSpecialty]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
