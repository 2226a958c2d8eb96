"""Feedback submission and role-scoped feedback listing."""

import logging
import uuid
from typing import List, Optional

from sqlalchemy import ColumnElement, false, true
from sqlalchemy.orm import Session

from workshophub.core import messages
from workshophub.core.exceptions import ValidationFailed
from workshophub.core.roles import Role
from workshophub.models.user import User
from workshophub.workshops.crud import WorkshopCRUD
from .models import Feedback


logger = logging.getLogger("workshophub.feedback.crud")


class FeedbackCRUD:

    @staticmethod
    def visible_to(user: User) -> ColumnElement[bool]:
        """Admins read all feedback, instructors only that of workshops they own."""
        if user.role == Role.ADMIN:
            return true()
        if user.role == Role.INSTRUCTOR:
            return Feedback.workshop_id.in_(WorkshopCRUD.instructed_ids(user.id))
        return false()

    @staticmethod
    def submit(
        db: Session,
        user: User,
        workshop_id: Optional[uuid.UUID],
        rating: Optional[int],
        comment: Optional[str] = None,
    ) -> Feedback:
        if workshop_id is None or rating is None:
            raise ValidationFailed(messages.FEEDBACK_FIELDS_REQUIRED)
        if not 1 <= rating <= 5:
            raise ValidationFailed(messages.FEEDBACK_RATING_RANGE)
        WorkshopCRUD.get_or_404(db, workshop_id)

        feedback = Feedback(
            workshop_id=workshop_id,
            user_id=user.id,
            rating=rating,
            comment=comment or None,
            created_by=str(user.id),
        )
        db.add(feedback)
        db.commit()
        db.refresh(feedback)
        logger.info("Feedback %s submitted for workshop %s", feedback.id, workshop_id)
        return feedback

    @staticmethod
    def list(
        db: Session,
        user: User,
        workshop_id: Optional[uuid.UUID] = None,
    ) -> List[Feedback]:
        """List visible feedback. The workshop filter narrows, never widens, visibility."""
        query = db.query(Feedback).filter(FeedbackCRUD.visible_to(user))
        if workshop_id is not None:
            query = query.filter(Feedback.workshop_id == workshop_id)
        return query.order_by(Feedback.date.desc()).all()
