from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from workshophub.workshops.schemas import WorkshopSummary


class MaterialCreate(BaseModel):
    workshop: Optional[UUID] = None
    title: Optional[str] = Field(None, max_length=200)
    file_url: Optional[str] = Field(None, max_length=1000)


class MaterialResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    workshop_id: UUID
    title: str
    file_url: str
    uploaded_by: Optional[UUID] = None
    workshop: Optional[WorkshopSummary] = None
    created_at: Optional[datetime] = None
