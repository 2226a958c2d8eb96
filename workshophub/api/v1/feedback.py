import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from workshophub.api.dependencies import require_roles
from workshophub.core.database import get_db
from workshophub.core.roles import PARTICIPANT_ONLY, STAFF
from workshophub.feedback.crud import FeedbackCRUD
from workshophub.feedback.schemas import FeedbackCreate, FeedbackResponse
from workshophub.models.user import User


router = APIRouter(prefix="/feedback", tags=["feedback"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=FeedbackResponse)
def add_feedback(
    payload: FeedbackCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(PARTICIPANT_ONLY)),
):
    return FeedbackCRUD.submit(
        db,
        current_user,
        workshop_id=payload.workshop,
        rating=payload.rating,
        comment=payload.comment,
    )


@router.get("", response_model=List[FeedbackResponse])
def list_feedback(
    workshop: Optional[uuid.UUID] = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(STAFF)),
):
    return FeedbackCRUD.list(db, current_user, workshop_id=workshop)
