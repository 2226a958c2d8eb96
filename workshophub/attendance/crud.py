"""Attendance marking, restricted to a workshop's own instructor or an admin."""

import logging
import uuid
from typing import List

from sqlalchemy.orm import Session

from workshophub.core import messages
from workshophub.core.exceptions import Forbidden, NotFound
from workshophub.core.roles import Role
from workshophub.models.user import User
from workshophub.registrations.models import Registration
from workshophub.workshops.crud import WorkshopCRUD
from workshophub.workshops.models import Workshop
from .models import Attendance


logger = logging.getLogger("workshophub.attendance.crud")


class AttendanceCRUD:

    @staticmethod
    def can_manage(user: User, workshop: Workshop) -> bool:
        """Admins manage every workshop; instructors only the ones they own."""
        if user.role == Role.ADMIN:
            return True
        return user.role == Role.INSTRUCTOR and workshop.instructor_id == user.id

    @staticmethod
    def _ensure_can_manage(user: User, workshop: Workshop) -> None:
        if not AttendanceCRUD.can_manage(user, workshop):
            logger.warning(
                "User %s (%s) denied attendance access to workshop %s",
                user.id,
                user.role.value,
                workshop.id,
            )
            raise Forbidden(messages.ATTENDANCE_NOT_INSTRUCTOR)

    @staticmethod
    def mark(db: Session, user: User, registration_id: uuid.UUID, attended: bool) -> Attendance:
        """Create or overwrite the attendance flag of one registration."""
        registration = db.get(Registration, registration_id)
        if not registration:
            raise NotFound(messages.REGISTRATION_NOT_FOUND)
        workshop = WorkshopCRUD.get_or_404(db, registration.workshop_id)
        AttendanceCRUD._ensure_can_manage(user, workshop)

        record = (
            db.query(Attendance)
            .filter(Attendance.registration_id == registration_id)
            .first()
        )
        if record is None:
            record = Attendance(registration_id=registration_id, created_by=str(user.id))
        record.attended = attended
        record.marked_by = user.id
        record.updated_by = str(user.id)
        db.add(record)
        db.commit()
        db.refresh(record)
        return record

    @staticmethod
    def list_by_workshop(db: Session, user: User, workshop_id: uuid.UUID) -> List[Attendance]:
        workshop = WorkshopCRUD.get_or_404(db, workshop_id)
        AttendanceCRUD._ensure_can_manage(user, workshop)

        return (
            db.query(Attendance)
            .join(Registration, Attendance.registration_id == Registration.id)
            .filter(Registration.workshop_id == workshop_id)
            .all()
        )
