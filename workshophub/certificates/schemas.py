from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from workshophub.users.schemas import UserSummary
from workshophub.workshops.schemas import WorkshopSummary


class CertificateCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    workshop: Optional[UUID] = None
    user_id: Optional[UUID] = Field(None, alias="userId")
    certificate_url: Optional[str] = Field(None, max_length=1000)


class CertificateResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    workshop_id: UUID
    user_id: UUID
    certificate_url: str
    issued_date: Optional[datetime] = None
    workshop: Optional[WorkshopSummary] = None
    user: Optional[UserSummary] = None
