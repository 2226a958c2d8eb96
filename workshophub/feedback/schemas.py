from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from workshophub.users.schemas import UserSummary
from workshophub.workshops.schemas import WorkshopSummary


class FeedbackCreate(BaseModel):
    # Presence of workshop/rating is checked by FeedbackCRUD.submit
    workshop: Optional[UUID] = None
    rating: Optional[int] = None
    comment: Optional[str] = Field(None, max_length=2000)


class FeedbackResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    workshop_id: UUID
    user_id: UUID
    rating: int
    comment: Optional[str] = None
    date: Optional[datetime] = None
    workshop: Optional[WorkshopSummary] = None
    user: Optional[UserSummary] = None
