"""Registration ledger operations and visibility rules."""

import logging
import uuid
from typing import List, Optional

from sqlalchemy import ColumnElement, func, true
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from workshophub.core import messages
from workshophub.core.exceptions import AlreadyRegistered, Forbidden, NotFound, WorkshopFull
from workshophub.core.roles import Role
from workshophub.models.user import User
from workshophub.workshops.models import Workshop
from .models import Registration, RegistrationStatus


logger = logging.getLogger("workshophub.registrations.crud")


class RegistrationCRUD:
    """Sign-ups, cancellations and listings of registrations."""

    @staticmethod
    def visible_to(user: User) -> ColumnElement[bool]:
        """Participants see their own registrations; staff see all of them."""
        if user.role == Role.PARTICIPANT:
            return Registration.user_id == user.id
        return true()

    @staticmethod
    def get_by_id(db: Session, registration_id: uuid.UUID) -> Optional[Registration]:
        return db.get(Registration, registration_id)

    @staticmethod
    def get_visible(db: Session, user: User, registration_id: uuid.UUID) -> Registration:
        registration = (
            db.query(Registration)
            .filter(Registration.id == registration_id, RegistrationCRUD.visible_to(user))
            .first()
        )
        if not registration:
            raise NotFound(messages.REGISTRATION_NOT_FOUND)
        return registration

    @staticmethod
    def list(
        db: Session,
        user: User,
        workshop_id: Optional[uuid.UUID] = None,
    ) -> List[Registration]:
        query = db.query(Registration).filter(RegistrationCRUD.visible_to(user))
        if workshop_id is not None:
            query = query.filter(Registration.workshop_id == workshop_id)
        return query.order_by(Registration.registration_date.desc()).all()

    @staticmethod
    def register(db: Session, user: User, workshop_id: uuid.UUID) -> Registration:
        """Take a seat in a workshop.

        The workshop row is locked for the duration of the count-and-insert so
        concurrent sign-ups for the last seat are serialized.
        """
        workshop = (
            db.query(Workshop)
            .filter(Workshop.id == workshop_id, Workshop.is_deleted.is_(False))
            .with_for_update(of=Workshop)
            .first()
        )
        if not workshop:
            db.rollback()
            raise NotFound(messages.WORKSHOP_NOT_FOUND)

        active = (
            db.query(Registration)
            .filter(
                Registration.workshop_id == workshop_id,
                Registration.status == RegistrationStatus.REGISTERED,
            )
        )
        if active.filter(Registration.user_id == user.id).first():
            db.rollback()
            raise AlreadyRegistered(messages.REGISTRATION_ALREADY_EXISTS)

        taken = active.with_entities(func.count(Registration.id)).scalar() or 0
        if taken >= workshop.seats:
            db.rollback()
            logger.info("Workshop %s is full (%d/%d)", workshop_id, taken, workshop.seats)
            raise WorkshopFull(messages.REGISTRATION_WORKSHOP_FULL)

        registration = Registration(
            workshop_id=workshop_id,
            user_id=user.id,
            status=RegistrationStatus.REGISTERED,
            created_by=str(user.id),
        )
        db.add(registration)
        try:
            db.commit()
        except IntegrityError as exc:
            # Lost a race against a concurrent sign-up by the same user
            db.rollback()
            raise AlreadyRegistered(messages.REGISTRATION_ALREADY_EXISTS) from exc
        db.refresh(registration)
        logger.info("User %s registered for workshop %s", user.id, workshop_id)
        return registration

    @staticmethod
    def cancel(db: Session, user: User, registration_id: uuid.UUID) -> Registration:
        """Cancel the caller's own registration. Cancelling twice is a no-op."""
        registration = RegistrationCRUD.get_by_id(db, registration_id)
        if not registration:
            raise NotFound(messages.REGISTRATION_NOT_FOUND)
        if registration.user_id != user.id:
            logger.warning(
                "User %s tried to cancel registration %s owned by %s",
                user.id,
                registration_id,
                registration.user_id,
            )
            raise Forbidden(messages.REGISTRATION_NOT_OWNER)

        if registration.status == RegistrationStatus.CANCELLED:
            return registration

        registration.status = RegistrationStatus.CANCELLED
        registration.updated_by = str(user.id)
        db.add(registration)
        db.commit()
        db.refresh(registration)
        logger.info("Registration %s cancelled", registration_id)
        return registration
