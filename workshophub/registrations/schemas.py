"""Pydantic schemas for registrations."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from workshophub.users.schemas import UserSummary
from workshophub.workshops.schemas import WorkshopSummary
from .models import RegistrationStatus


class RegistrationCreate(BaseModel):
    workshop_id: UUID = Field(..., alias="workshopId")

    model_config = ConfigDict(populate_by_name=True)


class RegistrationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    workshop_id: UUID
    user_id: UUID
    status: RegistrationStatus
    registration_date: Optional[datetime] = None
    workshop: Optional[WorkshopSummary] = None
    user: Optional[UserSummary] = None
