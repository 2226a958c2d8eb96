from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from workshophub.registrations.schemas import RegistrationResponse


class AttendanceMark(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    registration_id: UUID = Field(..., alias="registrationId")
    attended: bool


class AttendanceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    registration_id: UUID
    attended: bool
    marked_by: Optional[UUID] = None
    registration: Optional[RegistrationResponse] = None
    updated_at: Optional[datetime] = None
