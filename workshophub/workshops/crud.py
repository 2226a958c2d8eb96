"""CRUD operations for the workshop catalog."""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, List, Optional

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from workshophub.core import messages
from workshophub.core.exceptions import NotFound, ValidationFailed
from workshophub.core.roles import Role
from workshophub.models.user import User
from workshophub.registrations.models import Registration, RegistrationStatus
from .models import Workshop


logger = logging.getLogger("workshophub.workshops.crud")

_REQUIRED_FIELDS = ("title", "seats")


class WorkshopCRUD:
    """CRUD operations for workshops."""

    @staticmethod
    def get_by_id(db: Session, workshop_id: uuid.UUID) -> Optional[Workshop]:
        """Get a workshop that has not been deleted."""
        return (
            db.query(Workshop)
            .filter(
                Workshop.id == workshop_id,
                Workshop.is_deleted.is_(False),
            )
            .first()
        )

    @staticmethod
    def get_or_404(db: Session, workshop_id: uuid.UUID) -> Workshop:
        workshop = WorkshopCRUD.get_by_id(db, workshop_id)
        if not workshop:
            raise NotFound(messages.WORKSHOP_NOT_FOUND)
        return workshop

    @staticmethod
    def list(db: Session, instructor_id: Optional[uuid.UUID] = None) -> List[Workshop]:
        """List workshops, newest date first, optionally only one instructor's."""
        query = db.query(Workshop).filter(Workshop.is_deleted.is_(False))
        if instructor_id is not None:
            query = query.filter(Workshop.instructor_id == instructor_id)
        return query.order_by(Workshop.date.desc().nulls_last(), Workshop.created_at.desc()).all()

    @staticmethod
    def instructed_ids(instructor_id: uuid.UUID) -> Select:
        """Subquery of the ids of workshops owned by ``instructor_id``."""
        return select(Workshop.id).where(
            Workshop.instructor_id == instructor_id,
            Workshop.is_deleted.is_(False),
        )

    @staticmethod
    def active_registration_count(db: Session, workshop_id: uuid.UUID) -> int:
        return (
            db.query(func.count(Registration.id))
            .filter(
                Registration.workshop_id == workshop_id,
                Registration.status == RegistrationStatus.REGISTERED,
            )
            .scalar()
        ) or 0

    @staticmethod
    def _check_instructor(db: Session, instructor_id: Optional[uuid.UUID]) -> None:
        if instructor_id is None:
            return
        instructor = db.get(User, instructor_id)
        if not instructor or instructor.role != Role.INSTRUCTOR:
            raise ValidationFailed(messages.WORKSHOP_INSTRUCTOR_INVALID)

    @staticmethod
    def create(db: Session, created_by: uuid.UUID, **fields: Any) -> Workshop:
        """Create a workshop. ``instructor`` must reference an instructor account."""
        instructor_id = fields.pop("instructor", None)
        WorkshopCRUD._check_instructor(db, instructor_id)

        workshop = Workshop(
            **fields,
            instructor_id=instructor_id,
            created_by=str(created_by),
        )
        db.add(workshop)
        db.commit()
        db.refresh(workshop)
        logger.info("Workshop %s created by %s", workshop.id, created_by)
        return workshop

    @staticmethod
    def update(
        db: Session,
        workshop_id: uuid.UUID,
        updated_by: uuid.UUID,
        **updates: Any,
    ) -> Workshop:
        """Update the given fields only."""
        workshop = WorkshopCRUD.get_or_404(db, workshop_id)

        if "instructor" in updates:
            instructor_id = updates.pop("instructor")
            WorkshopCRUD._check_instructor(db, instructor_id)
            workshop.instructor_id = instructor_id

        for key, value in updates.items():
            if value is None and key in _REQUIRED_FIELDS:
                raise ValidationFailed(f"{key} cannot be empty")
            if hasattr(workshop, key):
                setattr(workshop, key, value)

        workshop.updated_by = str(updated_by)
        db.add(workshop)
        db.commit()
        db.refresh(workshop)
        return workshop

    @staticmethod
    def delete(db: Session, workshop_id: uuid.UUID, deleted_by: uuid.UUID) -> None:
        """Soft delete workshop."""
        workshop = WorkshopCRUD.get_or_404(db, workshop_id)

        workshop.is_deleted = True
        workshop.deleted_at = datetime.now(timezone.utc)
        workshop.deleted_by = str(deleted_by)
        db.add(workshop)
        db.commit()
        logger.info("Workshop %s deleted by %s", workshop_id, deleted_by)
